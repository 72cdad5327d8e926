"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from decision_gateway.api.main import create_app
from decision_gateway.domain.engine import DecisionEngine
from decision_gateway.domain.models import DecisionRules


# Valid Estonian personal codes, one per credit segment
DEBT_CODE = "49002010965"  # segment 0965
SEGMENT_1_CODE = "50307172740"  # segment 2740
SEGMENT_2_CODE = "38411266610"  # segment 6610
SEGMENT_3_CODE = "35006069515"  # segment 9515
LAST_DEBT_CODE = "39008152499"  # segment 2499
FIRST_SEGMENT_1_CODE = "39004152500"  # segment 2500


class StubValidator:
    """Personal code validator with a fixed answer"""

    def __init__(self, valid: bool = True):
        self.valid = valid
        self.calls = []

    def is_valid(self, personal_code: str) -> bool:
        self.calls.append(personal_code)
        return self.valid


@pytest.fixture
def rules() -> DecisionRules:
    return DecisionRules()


@pytest.fixture
def validator() -> StubValidator:
    return StubValidator()


@pytest.fixture
def engine(rules: DecisionRules, validator: StubValidator) -> DecisionEngine:
    """Decision engine that accepts any personal code"""
    return DecisionEngine(rules=rules, validator=validator)


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)
