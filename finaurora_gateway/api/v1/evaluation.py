"""POST /v1/evaluation - Credit approval decision endpoint"""

import time
from fastapi import APIRouter, Depends, Request

from finaurora_gateway.api.v1.schemas import EvaluationRequest, EvaluationResponse
from finaurora_gateway.api.dependencies import get_credit_policy, get_request_id, get_settings
from finaurora_gateway.config import Settings
from finaurora_gateway.domain.evaluation import CreditPolicy, make_approval_decision
from finaurora_gateway.domain.models import ApplicantProfile
from finaurora_gateway.infrastructure.observability.metrics import record_evaluation
from finaurora_gateway.infrastructure.observability.logging import log_evaluation

router = APIRouter()


@router.post("/evaluation", response_model=EvaluationResponse)
def create_evaluation(
    request_body: EvaluationRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
    policy: CreditPolicy = Depends(get_credit_policy),
):
    """
    Decide whether an applicant is approved for the requested loan.

    Flow:
    1. Fill in rate and term from settings when omitted
    2. Run the applicant through the ordered policy table (invalid input → 422 via handler)
    3. Record metrics and logs
    4. Return decision with tier, installment and the income cap applied
    """
    start_time = time.time()
    request_id = get_request_id(request)

    annual_rate = (
        request_body.annual_rate_percent
        if request_body.annual_rate_percent is not None
        else app_settings.default_annual_rate_percent
    )
    term_months = (
        request_body.term_months
        if request_body.term_months is not None
        else app_settings.default_term_months
    )

    applicant = request_body.applicant
    profile = ApplicantProfile(
        name=applicant.name,
        monthly_income=applicant.monthly_income,
        active_loan_count=applicant.active_loan_count,
        credit_score=applicant.credit_score,
        requested_amount=applicant.requested_amount,
        has_cosigner=applicant.has_cosigner,
    )

    decision = make_approval_decision(profile, annual_rate, term_months, policy)

    duration_ms = (time.time() - start_time) * 1000
    record_evaluation(decision.approved, decision.tier.value, decision.installment)
    log_evaluation(
        request_id,
        profile.name,
        decision.approved,
        decision.tier.value,
        decision.reason,
        decision.installment,
        duration_ms,
    )

    return EvaluationResponse(
        applicant_name=profile.name,
        approved=decision.approved,
        tier=decision.tier.value,
        installment=decision.installment,
        max_installment=decision.max_installment,
        reason=decision.reason,
    )
