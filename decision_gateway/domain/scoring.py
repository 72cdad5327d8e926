"""Credit scoring rules - pure helpers behind the decision engine"""

import math

from decision_gateway.domain.exceptions import (
    AgeTooHighError,
    AgeTooLowError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    InvalidPersonalCodeError,
    UnsupportedCountryError,
)
from decision_gateway.domain.models import DecisionRules, LoanRequest, PersonalCodeValidator

SEGMENT_DIGITS = 4


def get_segment(personal_code: str) -> int:
    """Last four digits of the personal code as an integer"""
    return int(personal_code[-SEGMENT_DIGITS:])


def get_credit_modifier(personal_code: str, rules: DecisionRules) -> int:
    """
    Map the customer's segment to a credit modifier.

    Segment bands:
    - 0000-2499: Debt (modifier 0, no loan possible)
    - 2500-4999: Segment 1
    - 5000-7499: Segment 2
    - 7500-9999: Segment 3
    """
    segment = get_segment(personal_code)

    if segment < 2500:
        return 0
    elif segment < 5000:
        return rules.segment_1_credit_modifier
    elif segment < 7500:
        return rules.segment_2_credit_modifier
    else:
        return rules.segment_3_credit_modifier


def calculate_credit_score(credit_modifier: int, loan_amount: int, loan_period: int) -> float:
    """
    Affordability ratio of a loan for the given modifier.

    Grows linearly with the period for a fixed modifier and amount, so the
    first period clearing the threshold is also the shortest one.
    """
    return ((credit_modifier / loan_amount) * loan_period) / 10.0


def highest_valid_loan_amount(credit_modifier: int, loan_period: int) -> int:
    """Largest amount the customer can service over the given period"""
    return credit_modifier * loan_period


def minimum_viable_period(credit_modifier: int, rules: DecisionRules) -> int:
    """Shortest period at which the customer's maximum reaches the minimum loan amount"""
    return math.ceil(rules.min_loan_amount / credit_modifier)


def get_maximum_age(country: str, rules: DecisionRules) -> int:
    """Look up the age ceiling for a country (case-insensitive)"""
    try:
        return rules.max_age_by_country[country.strip().lower()]
    except KeyError:
        raise UnsupportedCountryError() from None


def verify_inputs(request: LoanRequest, rules: DecisionRules, validator: PersonalCodeValidator) -> None:
    """
    Check a request against the business rules, in a fixed order.

    Only the first violation is reported.

    Raises:
        InvalidPersonalCodeError: Personal code fails validation
        InvalidLoanAmountError: Amount outside the allowed range
        InvalidLoanPeriodError: Period outside the allowed range
        UnsupportedCountryError: No age limit configured for the country
        AgeTooLowError / AgeTooHighError: Age outside the country's range
    """
    if not validator.is_valid(request.personal_code):
        raise InvalidPersonalCodeError()

    if not rules.min_loan_amount <= request.loan_amount <= rules.max_loan_amount:
        raise InvalidLoanAmountError()

    if not rules.min_loan_period <= request.loan_period <= rules.max_loan_period:
        raise InvalidLoanPeriodError()

    maximum_age = get_maximum_age(request.country, rules)

    if request.age < rules.min_age:
        raise AgeTooLowError()
    if request.age > maximum_age:
        raise AgeTooHighError()
