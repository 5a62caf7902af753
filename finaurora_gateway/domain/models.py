"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class ApplicantProfile:
    """Credit applicant as submitted for a single evaluation"""

    name: str
    monthly_income: float
    active_loan_count: int
    credit_score: int  # 0-1000, not enforced here
    requested_amount: float
    has_cosigner: bool


class CreditTier(str, Enum):
    """Risk band an applicant falls into, in policy precedence order"""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    DEFAULT = "default"


@dataclass(frozen=True)
class ApprovalDecision:
    """Output of the approval policy"""

    approved: bool
    tier: CreditTier
    installment: Optional[float]
    max_installment: Optional[float]
    reason: str


@dataclass(frozen=True)
class AmortizationRow:
    """Single period in a French amortization schedule"""

    period: int
    payment: float
    interest: float
    principal: float
    balance: float
