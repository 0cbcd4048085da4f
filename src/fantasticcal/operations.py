"""
Per-operator computations.

Every function takes the first operand and the second value (an explicit
operand or an embedded base, possibly None) as floats, the way the catalog
calls them. Arithmetic is plain binary floating point; callers wrap the
result in a Decimal only for rendering.
"""

import math

from fantasticcal.config import MAX_FACTORIAL_OPERAND, ROOT_SNAP_TOLERANCE
from fantasticcal.exceptions import (
    DivisionByZeroError,
    InvalidInputError,
    MissingOperandError,
    NegativeOrNonIntegerOperandError,
    NegativeRadicandError,
    NonPositiveOperandError,
    ResultOverflowError,
)
from fantasticcal.validators import is_integral, validate_non_zero, validate_positive


def _require_second(b: float | None, description: str) -> float:
    if b is None:
        raise MissingOperandError(description)
    return b


def _finite(result: float, operation: str, *operands: float) -> float:
    if math.isinf(result) or math.isnan(result):
        raise ResultOverflowError(operation, *operands)
    return result


def add(a: float, b: float | None) -> float:
    """
    Add two numbers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Raises:
        MissingOperandError: If b is None
        ResultOverflowError: If result would overflow
    """
    b = _require_second(b, "addition")
    return _finite(a + b, "addition", a, b)


def subtract(a: float, b: float | None) -> float:
    """
    Subtract b from a.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Self-inverse: subtract(a, a) == 0
    """
    b = _require_second(b, "subtraction")
    return _finite(a - b, "subtraction", a, b)


def multiply(a: float, b: float | None) -> float:
    """Multiply two numbers."""
    b = _require_second(b, "multiplication")
    return _finite(a * b, "multiplication", a, b)


def divide(a: float, b: float | None) -> float:
    """
    Divide a by b.

    Raises:
        MissingOperandError: If b is None
        DivisionByZeroError: If b is zero
        ResultOverflowError: If result would overflow
    """
    b = _require_second(b, "division")

    if b == 0:
        raise DivisionByZeroError(a)

    return _finite(a / b, "division", a, b)


def modulo(a: float, b: float | None) -> float:
    """
    Remainder of a divided by b, truncated toward zero.

    The result carries the sign of the dividend: modulo(-10, 3) == -1.

    Raises:
        MissingOperandError: If b is None
        DivisionByZeroError: If b is zero
    """
    b = _require_second(b, "modulus")

    if b == 0:
        raise DivisionByZeroError(a)

    return math.fmod(a, b)


def power(base: float, exponent: float | None) -> float:
    """
    Raise base to the power of exponent.

    Properties:
        - Identity: power(a, 1) == a
        - Zero exponent: power(a, 0) == 1

    Raises:
        InvalidInputError: If the result is undefined
        ResultOverflowError: If result would overflow
    """
    exponent = _require_second(exponent, "exponentiation")

    if base == 0 and exponent < 0:
        raise InvalidInputError((base, exponent), "0 cannot be raised to negative power")

    if base < 0 and not is_integral(exponent):
        raise InvalidInputError((base, exponent), "Negative base with non-integer exponent")

    try:
        result = math.pow(base, exponent)
    except OverflowError as e:
        raise ResultOverflowError("exponentiation", base, exponent) from e

    return _finite(result, "exponentiation", base, exponent)


def root(radicand: float, index: float | None) -> float:
    """
    The index-th root of radicand, computed as exp(ln(radicand) / index).

    Results within ROOT_SNAP_TOLERANCE of an integer are snapped to it, so
    root(27, 3) == 3.0 rather than 3.0000000000000004.

    Raises:
        NegativeRadicandError: If radicand is negative
        InvalidInputError: If index is zero
    """
    index = _require_second(index, "root")

    if radicand < 0:
        raise NegativeRadicandError(radicand)

    validate_non_zero(index)

    if radicand == 0:
        return 0.0

    try:
        temporary = math.exp(math.log(radicand) / index)
    except OverflowError as e:
        raise ResultOverflowError("root", radicand, index) from e

    temporary = _finite(temporary, "root", radicand, index)
    rounded = float(round(temporary))
    if abs(rounded - temporary) < ROOT_SNAP_TOLERANCE:
        return rounded
    return temporary


def factorial(n: float, _: float | None = None) -> int:
    """
    Product 1 * 2 * ... * n for a non-negative integral n.

    Raises:
        NegativeOrNonIntegerOperandError: If n is negative or fractional
        ResultOverflowError: If n exceeds MAX_FACTORIAL_OPERAND
    """
    if n < 0 or not is_integral(n):
        raise NegativeOrNonIntegerOperandError(n)

    if n > MAX_FACTORIAL_OPERAND:
        raise ResultOverflowError("factorial", n)

    return math.factorial(int(n))


def logarithm(a: float, base: float | None) -> float:
    """
    Logarithm of a with the given base, ln(a) / ln(base).

    Raises:
        NonPositiveOperandError: If a <= 0
        InvalidInputError: If base is not positive or equals 1
    """
    base = _require_second(base, "logarithm")

    if a <= 0:
        raise NonPositiveOperandError(a)

    validate_positive(base)
    if base == 1:
        raise InvalidInputError(base, "Logarithm base must not be 1")

    return _finite(math.log(a) / math.log(base), "logarithm", a, base)


def natural_logarithm(a: float, _: float | None = None) -> float:
    """
    Logarithm of a with base e.

    Raises:
        NonPositiveOperandError: If a <= 0
    """
    if a <= 0:
        raise NonPositiveOperandError(a)

    return _finite(math.log(a), "natural logarithm", a)
