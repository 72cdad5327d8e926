"""Unit tests for settings and rule resolution"""

import pytest
from decision_gateway.config import Settings


def test_defaults_resolve_to_default_rules():
    rules = Settings(_env_file=None).decision_rules()

    assert rules.max_loan_amount == 10000
    assert rules.segment_3_credit_modifier == 1000
    assert rules.max_age_by_country["latvia"] == 75


def test_rules_read_from_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("MIN_LOAN_AMOUNT", "1000")
    monkeypatch.setenv("MAX_LOAN_PERIOD", "48")
    monkeypatch.setenv("MAX_AGE_BY_COUNTRY", '{"Finland": 70}')

    rules = Settings(_env_file=None).decision_rules()

    assert rules.min_loan_amount == 1000
    assert rules.max_loan_period == 48
    assert dict(rules.max_age_by_country) == {"finland": 70}


def test_inconsistent_settings_rejected():
    settings = Settings(_env_file=None, min_loan_period=24, max_loan_period=12)

    with pytest.raises(ValueError):
        settings.decision_rules()
