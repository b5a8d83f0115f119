from __future__ import annotations


class BicError(ValueError):
    """Base class for rejected BIC input."""

    segment = "BIC"

    def __init__(self, value: str, message: str):
        super().__init__(message)
        self.value = value


class InvalidLength(BicError):
    segment = "length"


class InvalidPrefix(BicError):
    segment = "business party prefix"


class InvalidCountry(BicError):
    segment = "country code"


class InvalidSuffix(BicError):
    segment = "business party suffix"


class InvalidBranch(BicError):
    segment = "branch code"
