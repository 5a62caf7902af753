"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from finaurora_gateway.domain.evaluation import CreditPolicy


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "finaurora-gateway"
    log_level: str = "INFO"

    # Loan terms used when a request omits them
    default_annual_rate_percent: float = 24.0
    default_term_months: int = 36

    # Largest amortization schedule the API will build
    max_schedule_months: int = 600

    # Approval policy
    low_score_floor: int = 500
    medium_score_ceiling: int = 700
    medium_installment_ratio: float = 0.25
    high_installment_ratio: float = 0.30
    high_max_active_loans: int = 2

    def credit_policy(self) -> CreditPolicy:
        """Build the approval policy from configured thresholds"""
        return CreditPolicy(
            low_score_floor=self.low_score_floor,
            medium_score_ceiling=self.medium_score_ceiling,
            medium_installment_ratio=self.medium_installment_ratio,
            high_installment_ratio=self.high_installment_ratio,
            high_max_active_loans=self.high_max_active_loans,
        )


settings = Settings()
