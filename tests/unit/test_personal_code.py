"""Unit tests for Estonian personal code validation"""

import pytest
from decision_gateway.infrastructure.validators.personal_code import EstonianPersonalCodeValidator


@pytest.mark.parametrize(
    "personal_code",
    ["49002010965", "50307172740", "38411266610", "35006069515", "39008152499", "39004152500"],
)
def test_valid_codes(personal_code: str):
    assert EstonianPersonalCodeValidator().is_valid(personal_code) is True


@pytest.mark.parametrize(
    "personal_code",
    [
        "50307172741",  # wrong check digit
        "12345678901",  # month 45
        "9030717274",  # too short
        "5030717274a",  # not numeric
        "",
        "39004152500 ",  # trailing space
        " 39004152500",  # leading space
        "390041525 00",  # inner space
    ],
)
def test_invalid_codes(personal_code: str):
    assert EstonianPersonalCodeValidator().is_valid(personal_code) is False
