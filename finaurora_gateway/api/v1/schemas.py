"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import List, Optional


class ApplicantSchema(BaseModel):
    """Applicant figures submitted for evaluation"""

    name: str = Field(..., min_length=1, description="Applicant name, used for reporting only")
    monthly_income: float = Field(..., description="Monthly income")
    active_loan_count: int = Field(..., description="Loans currently held")
    credit_score: int = Field(..., description="Credit score, 0-1000")
    requested_amount: float = Field(..., description="Loan principal requested")
    has_cosigner: bool = False


class InstallmentRequest(BaseModel):
    """Request body for POST /v1/installment"""

    requested_amount: float = Field(..., description="Loan principal")
    annual_rate_percent: float = Field(..., description="Nominal annual rate, 24.0 means 24%")
    term_months: int = Field(..., description="Number of monthly payments")
    include_schedule: bool = False


class AmortizationRowSchema(BaseModel):
    """Single period in an amortization schedule"""

    period: int
    payment: float
    interest: float
    principal: float
    balance: float


class InstallmentResponse(BaseModel):
    """Response for POST /v1/installment"""

    monthly_rate_percent: float
    installment: float
    schedule: Optional[List[AmortizationRowSchema]] = None


class EvaluationRequest(BaseModel):
    """Request body for POST /v1/evaluation"""

    applicant: ApplicantSchema
    annual_rate_percent: Optional[float] = Field(None, description="Defaults to the configured rate")
    term_months: Optional[int] = Field(None, description="Defaults to the configured term")


class EvaluationResponse(BaseModel):
    """Response for POST /v1/evaluation"""

    applicant_name: str
    approved: bool
    tier: str
    installment: Optional[float] = None
    max_installment: Optional[float] = None
    reason: str
