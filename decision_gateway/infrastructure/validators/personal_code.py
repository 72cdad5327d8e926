"""Personal ID code validation backed by python-stdnum"""

from stdnum.ee import ik


class EstonianPersonalCodeValidator:
    """
    Validator for Estonian personal ID codes (isikukood).

    Checks the 11-digit layout, the century/sex digit, the encoded birth
    date and the two-pass modulo 11 check digit. Only the bare 11 digits are
    accepted: the engine reads the segment straight off the submitted code,
    so spaced or padded forms are rejected instead of being compacted.
    """

    def is_valid(self, personal_code: str) -> bool:
        return ik.compact(personal_code) == personal_code and ik.is_valid(personal_code)
