"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from finaurora_gateway.api.main import create_app
from finaurora_gateway.domain.models import ApplicantProfile


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def low_tier_applicant() -> ApplicantProfile:
    return ApplicantProfile(
        name="Ana Pérez",
        monthly_income=2_000_000,
        active_loan_count=1,
        credit_score=450,
        requested_amount=10_000_000,
        has_cosigner=False,
    )


@pytest.fixture
def medium_tier_applicant() -> ApplicantProfile:
    return ApplicantProfile(
        name="Luis Gómez",
        monthly_income=3_000_000,
        active_loan_count=2,
        credit_score=650,
        requested_amount=15_000_000,
        has_cosigner=True,
    )


@pytest.fixture
def high_tier_applicant() -> ApplicantProfile:
    return ApplicantProfile(
        name="María López",
        monthly_income=5_000_000,
        active_loan_count=1,
        credit_score=750,
        requested_amount=20_000_000,
        has_cosigner=False,
    )
