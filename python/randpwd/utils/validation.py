"""
Input validation utilities for randpwd.
"""

import operator
import re
from decimal import Decimal
from typing import Any, Tuple

from ..exceptions import InvalidInputError, InsufficientLengthError

# Decimal count pattern: digits with optional single underscores between groups
COUNT_PATTERN = re.compile(r"^\+?[0-9]+(?:_[0-9]+)*$")


def _parse_text(text: str) -> int:
    """Parse a decimal string into an int of any size."""
    text = text.strip()
    if not COUNT_PATTERN.match(text):
        raise ValueError(text)
    # Decimal keeps very long digit strings exact and is not subject to the
    # int/str conversion digit limit
    return int(Decimal(text.replace("_", "")))


def to_count(value: Any, name: str = "value") -> int:
    """
    Convert a caller-supplied count into a non-negative int.

    Args:
        value: An int, an object implementing ``__index__``, or a decimal
            string/bytes holding a non-negative integer
        name: Argument name used in the error message

    Returns:
        The count as a Python int

    Raises:
        InvalidInputError: If the value is not a non-negative integer
    """
    if isinstance(value, bool):
        raise InvalidInputError(f"{name}: {get_validation_error_message(value)}")

    try:
        if isinstance(value, bytes):
            count = _parse_text(value.decode("ascii"))
        elif isinstance(value, str):
            count = _parse_text(value)
        else:
            count = operator.index(value)
    except (TypeError, ValueError, UnicodeDecodeError):
        raise InvalidInputError(f"{name}: {get_validation_error_message(value)}") from None

    if count < 0:
        raise InvalidInputError(f"{name}: {get_validation_error_message(value)}")

    return count


def check_counts(length: Any, symbol_count: Any, number_count: Any) -> Tuple[int, int, int]:
    """
    Validate the three counts of a password request.

    Args:
        length: Total password length
        symbol_count: Number of symbol characters
        number_count: Number of digit characters

    Returns:
        Tuple of (length, symbol_count, number_count) as ints

    Raises:
        InvalidInputError: If any count is not a non-negative integer
        InsufficientLengthError: If length < symbol_count + number_count
    """
    try:
        length = to_count(length, "length")
        symbol_count = to_count(symbol_count, "symbol_count")
        number_count = to_count(number_count, "number_count")
    except InvalidInputError as e:
        raise InvalidInputError(
            f"length, symbol_count and number_count must all be non-negative integers ({e})"
        ) from None

    if length < symbol_count + number_count:
        raise InsufficientLengthError(
            "length must be greater than or equal to symbol_count plus number_count"
        )

    return length, symbol_count, number_count


def get_validation_error_message(value: Any) -> str:
    """
    Get a descriptive error message for an invalid count.

    Args:
        value: The rejected value

    Returns:
        Error message describing why the value is invalid
    """
    if value is None:
        return "Count cannot be None"

    if isinstance(value, bool):
        return "Count must be an integer, not a boolean"

    if isinstance(value, float):
        return "Count must be an integer, not a float"

    if isinstance(value, (str, bytes)):
        text = value.strip()
        if len(text) == 0:
            return "Count cannot be empty"
        if text[:1] in ("-", b"-"):
            return "Count cannot be negative"
        return "Count must be a decimal integer"

    try:
        if operator.index(value) < 0:
            return "Count cannot be negative"
    except TypeError:
        return f"Count must be an integer, not {type(value).__name__}"

    return "Count format is invalid"
