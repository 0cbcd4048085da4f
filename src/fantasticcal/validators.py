"""Input validation functions with strict type checking."""

import math
from decimal import Decimal, InvalidOperation
from typing import TypeVar

from fantasticcal.exceptions import InvalidInputError

T = TypeVar("T", int, float, Decimal)


def validate_number(value: T) -> T:
    """
    Validate that a value is a finite number.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is NaN, Inf, or not a number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise InvalidInputError(value, f"Expected number, got {type(value).__name__}")

    if isinstance(value, Decimal):
        if value.is_nan():
            raise InvalidInputError(value, "NaN is not allowed")
        if value.is_infinite():
            raise InvalidInputError(value, "Infinity is not allowed")
    elif isinstance(value, float):
        if math.isnan(value):
            raise InvalidInputError(value, "NaN is not allowed")
        if math.isinf(value):
            raise InvalidInputError(value, "Infinity is not allowed")

    return value


def to_float(value: T) -> float:
    """
    Convert a validated number to a finite float.

    Raises:
        InvalidInputError: If value is invalid or too large for a float
    """
    validate_number(value)

    try:
        converted = float(value)
    except OverflowError as e:
        raise InvalidInputError(value, "Number is too large") from e

    if math.isinf(converted):
        raise InvalidInputError(value, "Number is too large")

    return converted


def parse_number(text: str | None) -> float:
    """
    Parse a typed number such as ``4``, ``-5.7`` or ``.5``.

    Raises:
        InvalidInputError: If the text is empty or not a finite number
    """
    if text is None or not text.strip():
        raise InvalidInputError(text, "Expected a number")

    try:
        value = Decimal(text.strip())
    except InvalidOperation as e:
        raise InvalidInputError(text, "Expected a number") from e

    return to_float(value)


def validate_non_zero(value: T) -> T:
    """
    Validate that a value is not zero.

    Raises:
        InvalidInputError: If value is zero
    """
    validate_number(value)

    if value == 0:
        raise InvalidInputError(value, "Value must not be zero")

    return value


def validate_positive(value: T, allow_zero: bool = False) -> T:
    """
    Validate that a value is positive.

    Args:
        value: The value to validate
        allow_zero: Whether zero is considered valid

    Raises:
        InvalidInputError: If value is not positive
    """
    validate_number(value)

    if allow_zero:
        if value < 0:
            raise InvalidInputError(value, "Value must be non-negative")
    elif value <= 0:
        raise InvalidInputError(value, "Value must be positive")

    return value


def is_integral(value: float) -> bool:
    """True if a finite float has no fractional part."""
    return float(value).is_integer()
