"""Unit tests for credit scoring rules"""

import pytest
from decision_gateway.domain.models import DecisionRules, LoanRequest
from decision_gateway.domain.scoring import (
    calculate_credit_score,
    get_credit_modifier,
    get_maximum_age,
    get_segment,
    highest_valid_loan_amount,
    minimum_viable_period,
    verify_inputs,
)
from decision_gateway.domain.exceptions import (
    AgeTooHighError,
    AgeTooLowError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    InvalidPersonalCodeError,
    UnsupportedCountryError,
)
from conftest import StubValidator


def make_request(**overrides) -> LoanRequest:
    fields = {
        "personal_code": "38411266610",
        "loan_amount": 4000,
        "loan_period": 24,
        "country": "Estonia",
        "age": 30,
    }
    fields.update(overrides)
    return LoanRequest(**fields)


def test_get_segment_uses_last_four_digits():
    assert get_segment("38411266610") == 6610
    assert get_segment("49002010965") == 965


@pytest.mark.parametrize(
    "segment, expected",
    [
        ("0000", 0),
        ("2499", 0),
        ("2500", 100),
        ("4999", 100),
        ("5000", 300),
        ("7499", 300),
        ("7500", 1000),
        ("9999", 1000),
    ],
)
def test_get_credit_modifier_bands(rules: DecisionRules, segment: str, expected: int):
    """Bands are contiguous: [0,2500), [2500,5000), [5000,7500), [7500,10000)"""
    assert get_credit_modifier("3900101" + segment, rules) == expected


def test_get_credit_modifier_uses_configured_values():
    rules = DecisionRules(segment_1_credit_modifier=150, segment_2_credit_modifier=350, segment_3_credit_modifier=900)

    assert get_credit_modifier("39001012600", rules) == 150
    assert get_credit_modifier("39001015100", rules) == 350
    assert get_credit_modifier("39001017600", rules) == 900


def test_calculate_credit_score_formula():
    # (300 / 2000) * 12 / 10
    assert calculate_credit_score(300, 2000, 12) == pytest.approx(0.18)
    assert calculate_credit_score(1000, 10000, 60) == pytest.approx(0.6)


def test_calculate_credit_score_monotonic_in_period(rules: DecisionRules):
    """For a fixed modifier and amount, a longer period never lowers the score"""
    for modifier in (100, 300, 1000):
        for amount in (2000, 5555, 10000):
            scores = [
                calculate_credit_score(modifier, amount, period)
                for period in range(rules.min_loan_period, rules.max_loan_period + 1)
            ]
            assert scores == sorted(scores)


def test_highest_valid_loan_amount():
    assert highest_valid_loan_amount(300, 12) == 3600


def test_minimum_viable_period_rounds_up(rules: DecisionRules):
    assert minimum_viable_period(100, rules) == 20
    assert minimum_viable_period(300, rules) == 7  # 2000 / 300 = 6.67
    assert minimum_viable_period(1000, rules) == 2


@pytest.mark.parametrize("country", ["estonia", "Estonia", "ESTONIA", " latvia "])
def test_get_maximum_age_is_case_insensitive(rules: DecisionRules, country: str):
    assert get_maximum_age(country, rules) in (78, 75)


def test_get_maximum_age_unknown_country(rules: DecisionRules):
    with pytest.raises(UnsupportedCountryError):
        get_maximum_age("Finland", rules)


def test_verify_inputs_accepts_valid_request(rules: DecisionRules):
    verify_inputs(make_request(), rules, StubValidator())


def test_verify_inputs_invalid_personal_code(rules: DecisionRules):
    with pytest.raises(InvalidPersonalCodeError):
        verify_inputs(make_request(), rules, StubValidator(valid=False))


@pytest.mark.parametrize("amount", [2000, 10000])
def test_verify_inputs_amount_bounds_inclusive(rules: DecisionRules, amount: int):
    verify_inputs(make_request(loan_amount=amount), rules, StubValidator())


@pytest.mark.parametrize("amount", [1999, 10001, 0, -5000])
def test_verify_inputs_amount_out_of_range(rules: DecisionRules, amount: int):
    with pytest.raises(InvalidLoanAmountError):
        verify_inputs(make_request(loan_amount=amount), rules, StubValidator())


@pytest.mark.parametrize("period", [12, 60])
def test_verify_inputs_period_bounds_inclusive(rules: DecisionRules, period: int):
    verify_inputs(make_request(loan_period=period), rules, StubValidator())


@pytest.mark.parametrize("period", [11, 61])
def test_verify_inputs_period_out_of_range(rules: DecisionRules, period: int):
    with pytest.raises(InvalidLoanPeriodError):
        verify_inputs(make_request(loan_period=period), rules, StubValidator())


def test_verify_inputs_age_limits(rules: DecisionRules):
    verify_inputs(make_request(age=18), rules, StubValidator())
    verify_inputs(make_request(age=78, country="estonia"), rules, StubValidator())

    with pytest.raises(AgeTooLowError):
        verify_inputs(make_request(age=17), rules, StubValidator())
    with pytest.raises(AgeTooHighError):
        verify_inputs(make_request(age=79, country="estonia"), rules, StubValidator())
    with pytest.raises(AgeTooHighError):
        verify_inputs(make_request(age=76, country="latvia"), rules, StubValidator())


def test_verify_inputs_reports_first_violation_only(rules: DecisionRules):
    """Checks run in order: code, amount, period, country, age"""
    request = make_request(loan_amount=1, loan_period=1, country="Narnia", age=5)

    with pytest.raises(InvalidPersonalCodeError):
        verify_inputs(request, rules, StubValidator(valid=False))
    with pytest.raises(InvalidLoanAmountError):
        verify_inputs(request, rules, StubValidator())
    with pytest.raises(InvalidLoanPeriodError):
        verify_inputs(make_request(loan_period=1, country="Narnia", age=5), rules, StubValidator())
    with pytest.raises(UnsupportedCountryError):
        verify_inputs(make_request(country="Narnia", age=5), rules, StubValidator())
