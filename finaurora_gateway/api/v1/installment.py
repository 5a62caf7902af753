"""POST /v1/installment - Monthly installment quote"""

from fastapi import APIRouter, Depends

from finaurora_gateway.api.v1.schemas import InstallmentRequest, InstallmentResponse, AmortizationRowSchema
from finaurora_gateway.api.dependencies import get_settings
from finaurora_gateway.config import Settings
from finaurora_gateway.domain.installments import (
    build_amortization_schedule,
    compute_monthly_installment,
    monthly_rate_percent,
)
from finaurora_gateway.domain.exceptions import InvalidArgumentError

router = APIRouter()


@router.post("/installment", response_model=InstallmentResponse)
def quote_installment(request_body: InstallmentRequest, app_settings: Settings = Depends(get_settings)):
    """
    Quote the constant monthly installment for a loan.

    Optionally includes the full French amortization schedule, limited to
    `max_schedule_months` rows.
    """
    installment = compute_monthly_installment(
        request_body.annual_rate_percent,
        request_body.term_months,
        request_body.requested_amount,
    )

    schedule = None
    if request_body.include_schedule:
        if request_body.term_months > app_settings.max_schedule_months:
            raise InvalidArgumentError(
                f"schedules are limited to {app_settings.max_schedule_months} months, "
                f"got term_months={request_body.term_months}"
            )

        schedule = [
            AmortizationRowSchema(
                period=row.period,
                payment=row.payment,
                interest=row.interest,
                principal=row.principal,
                balance=row.balance,
            )
            for row in build_amortization_schedule(
                request_body.annual_rate_percent,
                request_body.term_months,
                request_body.requested_amount,
            )
        ]

    return InstallmentResponse(
        monthly_rate_percent=monthly_rate_percent(request_body.annual_rate_percent),
        installment=installment,
        schedule=schedule,
    )
