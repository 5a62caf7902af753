"""Credit approval policy - core business logic for loan decisions"""

import math
from dataclasses import dataclass
from typing import Callable, Optional, Tuple
from finaurora_gateway.domain.models import ApplicantProfile, ApprovalDecision, CreditTier
from finaurora_gateway.domain.installments import compute_monthly_installment, validate_loan_terms
from finaurora_gateway.domain.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class CreditPolicy:
    """
    Thresholds driving the tiered approval policy.

    Tier bands:
    - score < 500:          Low, automatic rejection
    - 500 <= score <= 700:  Medium, cosigner required and installment <= 25% of income
    - score > 700:          High, fewer than 2 active loans and installment <= 30% of income
    """

    low_score_floor: int = 500
    medium_score_ceiling: int = 700
    medium_installment_ratio: float = 0.25
    high_installment_ratio: float = 0.30
    high_max_active_loans: int = 2


DEFAULT_POLICY = CreditPolicy()


@dataclass(frozen=True)
class PolicyRule:
    """One row of the ordered policy table"""

    tier: CreditTier
    matches: Callable[[ApplicantProfile, CreditPolicy], bool]
    installment_ratio: Optional[Callable[[CreditPolicy], float]] = None  # None: reject outright
    requires_cosigner: bool = False


# Order matters: first matching rule wins
POLICY_RULES: Tuple[PolicyRule, ...] = (
    PolicyRule(
        tier=CreditTier.LOW,
        matches=lambda profile, policy: profile.credit_score < policy.low_score_floor,
    ),
    PolicyRule(
        tier=CreditTier.MEDIUM,
        matches=lambda profile, policy: profile.credit_score <= policy.medium_score_ceiling,
        installment_ratio=lambda policy: policy.medium_installment_ratio,
        requires_cosigner=True,
    ),
    PolicyRule(
        tier=CreditTier.HIGH,
        matches=lambda profile, policy: profile.active_loan_count < policy.high_max_active_loans,
        installment_ratio=lambda policy: policy.high_installment_ratio,
    ),
)


def _validate_profile(profile: ApplicantProfile) -> None:
    if not math.isfinite(profile.monthly_income) or profile.monthly_income < 0:
        raise InvalidArgumentError(
            f"monthly_income must be a finite non-negative amount, got {profile.monthly_income}"
        )
    if profile.active_loan_count < 0:
        raise InvalidArgumentError(f"active_loan_count must not be negative, got {profile.active_loan_count}")


def _match_rule(profile: ApplicantProfile, policy: CreditPolicy) -> Optional[PolicyRule]:
    for rule in POLICY_RULES:
        if rule.matches(profile, policy):
            return rule
    return None


def classify_tier(profile: ApplicantProfile, policy: CreditPolicy = DEFAULT_POLICY) -> CreditTier:
    """Map an applicant to the first policy tier they fall into"""
    rule = _match_rule(profile, policy)
    return rule.tier if rule else CreditTier.DEFAULT


def make_approval_decision(
    profile: ApplicantProfile,
    annual_nominal_rate_percent: float,
    term_months: int,
    policy: CreditPolicy = DEFAULT_POLICY,
) -> ApprovalDecision:
    """
    Main entry point: run the applicant through the ordered policy table.

    Inputs are validated up front so invalid terms fail the same way in
    every tier. The installment is only computed for tiers that compare it
    against income.

    Raises:
        InvalidArgumentError: non-positive term, or a negative or non-finite
            principal, rate or income, or a negative loan count
    """
    validate_loan_terms(annual_nominal_rate_percent, term_months, profile.requested_amount)
    _validate_profile(profile)

    rule = _match_rule(profile, policy)

    if rule is None:
        # High score but too many active loans
        return ApprovalDecision(
            approved=False,
            tier=CreditTier.DEFAULT,
            installment=None,
            max_installment=None,
            reason="too_many_active_loans",
        )

    if rule.installment_ratio is None:
        return ApprovalDecision(
            approved=False,
            tier=rule.tier,
            installment=None,
            max_installment=None,
            reason="score_below_floor",
        )

    installment = compute_monthly_installment(
        annual_nominal_rate_percent, term_months, profile.requested_amount
    )
    max_installment = profile.monthly_income * rule.installment_ratio(policy)

    if rule.requires_cosigner and not profile.has_cosigner:
        approved, reason = False, "cosigner_required"
    elif installment > max_installment:
        approved, reason = False, "installment_exceeds_income_ratio"
    else:
        approved, reason = True, "approved"

    return ApprovalDecision(
        approved=approved,
        tier=rule.tier,
        installment=installment,
        max_installment=max_installment,
        reason=reason,
    )


def evaluate_approval(
    profile: ApplicantProfile,
    annual_nominal_rate_percent: float,
    term_months: int,
    policy: CreditPolicy = DEFAULT_POLICY,
) -> bool:
    """Return True when the applicant is approved for the requested loan"""
    return make_approval_decision(profile, annual_nominal_rate_percent, term_months, policy).approved
