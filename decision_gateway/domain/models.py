"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Protocol

from decision_gateway.domain.exceptions import DomainException, RejectionReason


@dataclass(frozen=True)
class LoanRequest:
    """Loan application as submitted by the caller"""

    personal_code: str
    loan_amount: int  # currency units
    loan_period: int  # months
    country: str
    age: int


@dataclass(frozen=True)
class DecisionRules:
    """
    Business constants the engine decides against.

    Built once at startup and shared read-only by every evaluation.
    Country keys are normalized to lower case so lookups are case-insensitive.
    """

    min_loan_amount: int = 2000
    max_loan_amount: int = 10000
    min_loan_period: int = 12
    max_loan_period: int = 60
    min_age: int = 18
    max_age_by_country: Mapping[str, int] = field(
        default_factory=lambda: {"estonia": 78, "latvia": 75, "lithuania": 76}
    )
    segment_1_credit_modifier: int = 100
    segment_2_credit_modifier: int = 300
    segment_3_credit_modifier: int = 1000
    min_credit_score: float = 0.1

    def __post_init__(self):
        if self.min_loan_amount > self.max_loan_amount:
            raise ValueError("min_loan_amount must not exceed max_loan_amount")
        if self.min_loan_period > self.max_loan_period:
            raise ValueError("min_loan_period must not exceed max_loan_period")
        if self.min_loan_amount <= 0 or self.min_loan_period <= 0:
            raise ValueError("Loan amount and period bounds must be positive")

        modifiers = (
            self.segment_1_credit_modifier,
            self.segment_2_credit_modifier,
            self.segment_3_credit_modifier,
        )
        if any(modifier <= 0 for modifier in modifiers):
            raise ValueError("Segment credit modifiers must be positive")

        age_limits = {country.strip().lower(): limit for country, limit in self.max_age_by_country.items()}
        for country, limit in age_limits.items():
            if limit < self.min_age:
                raise ValueError(f"Maximum age for {country} is below min_age")

        # Frozen dataclass: bypass __setattr__ to store the normalized, read-only table
        object.__setattr__(self, "max_age_by_country", MappingProxyType(age_limits))


@dataclass(frozen=True)
class Decision:
    """
    Outcome of a loan evaluation.

    Either an approved (loan_amount, loan_period) pair, or a rejection reason
    with a human-readable message. Never both, never neither.
    """

    loan_amount: Optional[int] = None
    loan_period: Optional[int] = None
    reason: Optional[RejectionReason] = None
    error_message: Optional[str] = None

    def __post_init__(self):
        has_offer = self.loan_amount is not None and self.loan_period is not None
        has_partial_offer = (self.loan_amount is None) != (self.loan_period is None)
        has_error = self.reason is not None

        if has_partial_offer or has_offer == has_error:
            raise ValueError("Decision must hold either an approved loan or a rejection reason")
        if has_error and not self.error_message:
            raise ValueError("Rejected decision requires an error message")

    @property
    def approved(self) -> bool:
        return self.reason is None

    @classmethod
    def approve(cls, loan_amount: int, loan_period: int) -> "Decision":
        return cls(loan_amount=loan_amount, loan_period=loan_period)

    @classmethod
    def reject(cls, error: DomainException) -> "Decision":
        return cls(reason=error.reason, error_message=str(error))


class PersonalCodeValidator(Protocol):
    """Checks the format and checksum of a national personal ID code"""

    def is_valid(self, personal_code: str) -> bool: ...
