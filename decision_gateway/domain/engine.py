"""Decision engine - core business logic for loan decisions"""

import logging

from decision_gateway.domain.exceptions import (
    CreditScoreTooLowError,
    DomainException,
    InDebtError,
    NoValidPeriodError,
)
from decision_gateway.domain.models import Decision, DecisionRules, LoanRequest, PersonalCodeValidator
from decision_gateway.domain.scoring import (
    calculate_credit_score,
    get_credit_modifier,
    highest_valid_loan_amount,
    minimum_viable_period,
    verify_inputs,
)

logger = logging.getLogger(__name__)


class DecisionEngine:
    """
    Calculates the approved loan amount and period for a customer.

    The amount depends on the customer's credit modifier, which is derived
    from the last four digits of their personal ID code. Stateless: one
    instance can serve any number of concurrent evaluations.
    """

    def __init__(self, rules: DecisionRules, validator: PersonalCodeValidator):
        self.rules = rules
        self.validator = validator

    def evaluate(self, personal_code: str, loan_amount: int, loan_period: int, country: str, age: int) -> Decision:
        """Evaluate a loan request given as separate fields"""
        return self.evaluate_request(
            LoanRequest(
                personal_code=personal_code,
                loan_amount=loan_amount,
                loan_period=loan_period,
                country=country,
                age=age,
            )
        )

    def evaluate_request(self, request: LoanRequest) -> Decision:
        """
        Main entry point: validate the request and search for a qualifying loan.

        Business rule violations come back as a rejected Decision. Anything
        else (e.g. a malformed code accepted by a lenient validator) propagates.
        """
        try:
            return self._calculate_approved_loan(request)
        except DomainException as e:
            logger.debug("Loan request rejected: %s", e.reason.value)
            return Decision.reject(e)

    def _calculate_approved_loan(self, request: LoanRequest) -> Decision:
        rules = self.rules
        verify_inputs(request, rules, self.validator)

        credit_modifier = get_credit_modifier(request.personal_code, rules)
        if credit_modifier == 0:
            raise InDebtError()

        # Skip periods too short to ever reach the minimum loan amount
        loan_period = max(request.loan_period, minimum_viable_period(credit_modifier, rules))

        while (
            calculate_credit_score(credit_modifier, request.loan_amount, loan_period) < rules.min_credit_score
            and loan_period < rules.max_loan_period
        ):
            loan_period += 1

        if loan_period > rules.max_loan_period:
            raise NoValidPeriodError()

        loan_amount = min(rules.max_loan_amount, highest_valid_loan_amount(credit_modifier, loan_period))

        # Loop above may have stopped at the period ceiling without clearing the threshold
        if calculate_credit_score(credit_modifier, request.loan_amount, loan_period) < rules.min_credit_score:
            raise CreditScoreTooLowError()

        return Decision.approve(loan_amount, loan_period)
