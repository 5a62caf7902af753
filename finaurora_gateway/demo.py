"""Console driver evaluating the reference applicants"""

import logging
from typing import List, Optional
from finaurora_gateway.config import settings
from finaurora_gateway.domain.evaluation import make_approval_decision
from finaurora_gateway.domain.models import ApplicantProfile
from finaurora_gateway.infrastructure.observability.logging import setup_logging

SAMPLE_APPLICANTS: List[ApplicantProfile] = [
    ApplicantProfile("Ana Pérez", 2_000_000, 1, 450, 10_000_000, False),
    ApplicantProfile("Luis Gómez", 3_000_000, 2, 650, 15_000_000, True),
    ApplicantProfile("María López", 5_000_000, 1, 750, 20_000_000, False),
]


def run_demo(
    applicants: Optional[List[ApplicantProfile]] = None,
    annual_rate_percent: Optional[float] = None,
    term_months: Optional[int] = None,
) -> List[str]:
    """Evaluate each applicant and return one report line per applicant"""
    applicants = SAMPLE_APPLICANTS if applicants is None else applicants
    rate = settings.default_annual_rate_percent if annual_rate_percent is None else annual_rate_percent
    term = settings.default_term_months if term_months is None else term_months
    policy = settings.credit_policy()

    lines = []
    for profile in applicants:
        decision = make_approval_decision(profile, rate, term, policy)
        logging.debug(
            "Demo applicant evaluated",
            extra={"applicant_name": profile.name, "tier": decision.tier.value, "reason": decision.reason},
        )
        lines.append(f"Cliente: {profile.name} → Aprobado: {str(decision.approved).lower()}")

    return lines


def main() -> None:
    setup_logging(settings.log_level, settings.service_name)
    for line in run_demo():
        print(line)


if __name__ == "__main__":
    main()
