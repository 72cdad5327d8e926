"""Dependency injection for FastAPI endpoints"""

from functools import lru_cache

from fastapi import Request
from decision_gateway.config import settings
from decision_gateway.domain.engine import DecisionEngine
from decision_gateway.infrastructure.validators.personal_code import EstonianPersonalCodeValidator


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


@lru_cache
def get_decision_engine() -> DecisionEngine:
    """Provide the process-wide decision engine, built once from settings"""
    return DecisionEngine(
        rules=settings.decision_rules(),
        validator=EstonianPersonalCodeValidator(),
    )
