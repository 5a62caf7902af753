"""Monthly installment calculation using French amortization"""

import math
from typing import List
from finaurora_gateway.domain.models import AmortizationRow
from finaurora_gateway.domain.exceptions import InvalidArgumentError


def monthly_rate_percent(annual_nominal_rate_percent: float) -> float:
    """Convert a nominal annual rate to its monthly rate, both in percent"""
    return annual_nominal_rate_percent / 12.0


def validate_loan_terms(annual_nominal_rate_percent: float, term_months: int, principal: float) -> None:
    """Reject loan terms the amortization formula cannot handle"""
    if term_months <= 0:
        raise InvalidArgumentError(f"term_months must be positive, got {term_months}")
    if not math.isfinite(principal) or principal < 0:
        raise InvalidArgumentError(f"principal must be a finite non-negative amount, got {principal}")
    if not math.isfinite(annual_nominal_rate_percent) or annual_nominal_rate_percent < 0:
        raise InvalidArgumentError(
            f"annual_nominal_rate_percent must be a finite non-negative rate, got {annual_nominal_rate_percent}"
        )


def compute_monthly_installment(
    annual_nominal_rate_percent: float,
    term_months: int,
    principal: float,
) -> float:
    """
    Calculate the constant monthly installment for a loan.

    Formula:
        installment = P * r * (1+r)^n / ((1+r)^n - 1)
                    = P * r / (1 - (1+r)^-n)

    where r is the monthly rate as a decimal fraction and n the term in months.
    A zero rate degenerates to a linear split of the principal. Very long
    terms converge to the interest-only payment P * r.

    Args:
        annual_nominal_rate_percent: Nominal annual rate, e.g. 24.0 for 24%
        term_months: Number of monthly payments
        principal: Loan amount

    Returns:
        Unrounded installment amount

    Raises:
        InvalidArgumentError: non-positive term, negative or non-finite principal or rate

    Example:
        24% annual over 36 months → r = 2% / 100 = 0.02
        15,000,000 → ~588,492.78 per month
    """
    validate_loan_terms(annual_nominal_rate_percent, term_months, principal)

    monthly_rate = monthly_rate_percent(annual_nominal_rate_percent) / 100.0
    if monthly_rate == 0:
        return principal / term_months

    # 1 - (1+r)^-n via expm1/log1p: accurate for tiny r, tends to 1 on long terms
    paid_off_fraction = -math.expm1(-term_months * math.log1p(monthly_rate))
    installment = principal * monthly_rate / paid_off_fraction

    if not math.isfinite(installment):
        raise InvalidArgumentError(
            f"loan terms do not yield a finite installment: rate={annual_nominal_rate_percent}, "
            f"term_months={term_months}, principal={principal}"
        )
    return installment


def build_amortization_schedule(
    annual_nominal_rate_percent: float,
    term_months: int,
    principal: float,
) -> List[AmortizationRow]:
    """
    Break a loan down into its per-period interest and principal portions.

    Requirements:
    - Every row pays the same installment
    - Interest is charged on the opening balance of each period
    - Last row absorbs floating-point drift so the loan closes at exactly 0
    """
    payment = compute_monthly_installment(annual_nominal_rate_percent, term_months, principal)
    monthly_rate = monthly_rate_percent(annual_nominal_rate_percent) / 100.0

    rows = []
    balance = principal
    for period in range(1, term_months + 1):
        interest = balance * monthly_rate

        if period == term_months:
            # Close out whatever is left
            principal_part = balance
            row_payment = balance + interest
        else:
            principal_part = payment - interest
            row_payment = payment

        balance -= principal_part
        if period == term_months:
            balance = 0.0

        rows.append(
            AmortizationRow(
                period=period,
                payment=row_payment,
                interest=interest,
                principal=principal_part,
                balance=balance,
            )
        )

    return rows
