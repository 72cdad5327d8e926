"""Domain-specific exceptions for loan decisions"""

from enum import Enum


class RejectionReason(str, Enum):
    """Why a loan request was turned down"""

    INVALID_PERSONAL_CODE = "invalid_personal_code"
    INVALID_LOAN_AMOUNT = "invalid_loan_amount"
    INVALID_LOAN_PERIOD = "invalid_loan_period"
    UNSUPPORTED_COUNTRY = "unsupported_country"
    AGE_TOO_LOW = "age_too_low"
    AGE_TOO_HIGH = "age_too_high"
    NO_VALID_LOAN = "no_valid_loan"


class DomainException(Exception):
    """Base exception for domain layer"""

    reason: RejectionReason
    message: str = "Loan request rejected"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class LoanValidationError(DomainException):
    """Request breaks an input rule; reported to the caller as a bad request"""

    pass


class InvalidPersonalCodeError(LoanValidationError):
    reason = RejectionReason.INVALID_PERSONAL_CODE
    message = "Invalid personal ID code!"


class InvalidLoanAmountError(LoanValidationError):
    reason = RejectionReason.INVALID_LOAN_AMOUNT
    message = "Invalid loan amount!"


class InvalidLoanPeriodError(LoanValidationError):
    reason = RejectionReason.INVALID_LOAN_PERIOD
    message = "Invalid loan period!"


class UnsupportedCountryError(LoanValidationError):
    reason = RejectionReason.UNSUPPORTED_COUNTRY
    message = "Loans are not available for your country!"


class AgeTooLowError(LoanValidationError):
    reason = RejectionReason.AGE_TOO_LOW
    message = "Age does not meet minimum age requirements!"


class AgeTooHighError(LoanValidationError):
    reason = RejectionReason.AGE_TOO_HIGH
    message = "Age exceeds maximum age requirements!"


class NoValidLoanError(DomainException):
    """Request is well-formed but no amount/period combination qualifies"""

    reason = RejectionReason.NO_VALID_LOAN
    message = "No valid loan found!"


class InDebtError(NoValidLoanError):
    message = "Loans are not available with debt!"


class NoValidPeriodError(NoValidLoanError):
    message = "No valid loan period found!"


class CreditScoreTooLowError(NoValidLoanError):
    message = "Credit score too low, loan is not available for your bracket!"
