"""
Custom exceptions for randpwd.
"""


class RandPwdException(Exception):
    """Base exception for randpwd."""

    pass


class InvalidInputError(RandPwdException, ValueError):
    """A count is negative or not a non-negative integer."""

    pass


class InsufficientLengthError(RandPwdException, ValueError):
    """Length is smaller than the symbol and digit counts combined."""

    pass
