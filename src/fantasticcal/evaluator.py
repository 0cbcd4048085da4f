"""Evaluate one operator against its operands."""

from __future__ import annotations

import logging
from decimal import Decimal

from fantasticcal.catalog import BoundOperator
from fantasticcal.matcher import require_operator
from fantasticcal.validators import to_float

logger = logging.getLogger(__name__)

Number = int | float | Decimal


def evaluate(
    first: Number, operator: BoundOperator, second: Number | None = None
) -> Decimal:
    """
    Apply a bound operator to its operands.

    Operators with an embedded base take their second value from their own
    token (``^2``, ``V[3]``, ``log[10]``); an explicit second operand is then
    ignored. All other operators use ``second``, which unary operators may
    leave as None.

    Args:
        first: First operand
        operator: Operator resolved by match_operator
        second: Optional second operand

    Returns:
        The result as an exact Decimal of the computed value

    Raises:
        InvalidInputError: If an operand is not a finite number or overflows a float
        CalculatorError: Subclass describing why the operation failed
    """
    first_value = to_float(first)
    if second is not None:
        to_float(second)

    if operator.has_embedded_base:
        if second is not None:
            logger.debug("Ignoring second operand %s for %s", second, operator)
        second_value: float | None = operator.base
    else:
        second_value = None if second is None else to_float(second)

    result = operator.operator.compute(first_value, second_value)
    logger.debug("%s %s %s = %s", first, operator, second_value, result)
    return Decimal(result)


def render(value: Decimal) -> str:
    """Plain rendering without exponent notation, e.g. ``8`` or ``0.5``."""
    if value == 0:
        return "0"
    return format(value, "f")


def calculate(first: Number, token: str | None, second: Number | None = None) -> str:
    """
    Match, evaluate and render in one step.

    Example:
        >>> calculate(5, "+", 3)
        '8'
        >>> calculate(16, "V[2]")
        '4'

    Raises:
        NoOperatorMatchError: If the token matches no operator
        CalculatorError: If the evaluation fails
    """
    return render(evaluate(first, require_operator(token), second))
