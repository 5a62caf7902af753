"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from finaurora_gateway.config import Settings, settings
from finaurora_gateway.domain.evaluation import CreditPolicy


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_settings() -> Settings:
    """Provide application settings"""
    return settings


def get_credit_policy() -> CreditPolicy:
    """Provide the approval policy built from configured thresholds"""
    return settings.credit_policy()
