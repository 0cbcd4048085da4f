"""
Operator catalog.

Operators are immutable templates. Matching user input against a template
produces a separate BoundOperator carrying the literal text, so the catalog
itself is never mutated and can be shared freely.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fantasticcal import operations
from fantasticcal.exceptions import InvalidInputError, UnknownOperatorError

if TYPE_CHECKING:
    from collections.abc import Callable

# Integer, decimal, or decimal without a leading digit
NUMBER_PATTERN = r"(?:\d+(?:\.\d+)?|\.\d+)"
NUMBER_IN_BRACKETS_PATTERN = rf"\[{NUMBER_PATTERN}\]"

_NON_NUMERIC = re.compile(r"[^0-9.]")


def extract_base(text: str) -> float:
    """
    Read the number embedded in an operator token, e.g. 3 from ``V[3]``.

    Raises:
        InvalidInputError: If the token carries no number or it overflows a float
    """
    digits = _NON_NUMERIC.sub("", text or "")
    try:
        base = float(digits)
    except ValueError as e:
        raise InvalidInputError(text, "Operator token carries no base") from e

    if math.isinf(base):
        raise InvalidInputError(text, "Operator base is too large")
    return base


@dataclass(frozen=True)
class Operator:
    """A catalog entry describing one supported operation."""

    symbol: str
    pattern: re.Pattern[str]
    description: str
    can_precede_number: bool
    is_unary: bool
    has_embedded_base: bool
    compute: Callable[[float, float | None], float | int]

    def matches(self, token: str) -> bool:
        """Whether the whole token matches this operator's pattern."""
        return self.pattern.fullmatch(token) is not None

    def bind(self, text: str) -> BoundOperator:
        """Pair this template with the literal text that selected it."""
        return BoundOperator(self, text)


@dataclass(frozen=True)
class BoundOperator:
    """An operator resolved against real input."""

    operator: Operator
    bound_text: str

    @property
    def symbol(self) -> str:
        return self.operator.symbol

    @property
    def description(self) -> str:
        return self.operator.description

    @property
    def can_precede_number(self) -> bool:
        return self.operator.can_precede_number

    @property
    def is_unary(self) -> bool:
        return self.operator.is_unary

    @property
    def has_embedded_base(self) -> bool:
        return self.operator.has_embedded_base

    @property
    def base(self) -> float:
        """Number embedded in the bound text."""
        if not self.has_embedded_base:
            raise InvalidInputError(self.bound_text, f"Operator {self.symbol} has no base")
        return extract_base(self.bound_text)

    def __str__(self) -> str:
        return self.bound_text


OPERATORS: tuple[Operator, ...] = (
    Operator(
        symbol="+",
        pattern=re.compile(r"\+"),
        description="addition",
        can_precede_number=False,
        is_unary=False,
        has_embedded_base=False,
        compute=operations.add,
    ),
    Operator(
        symbol="-",
        pattern=re.compile(r"-"),
        description="subtraction",
        can_precede_number=True,
        is_unary=False,
        has_embedded_base=False,
        compute=operations.subtract,
    ),
    Operator(
        symbol="*",
        pattern=re.compile(r"\*"),
        description="multiplication",
        can_precede_number=False,
        is_unary=False,
        has_embedded_base=False,
        compute=operations.multiply,
    ),
    Operator(
        symbol="/",
        pattern=re.compile(r"/"),
        description="division",
        can_precede_number=False,
        is_unary=False,
        has_embedded_base=False,
        compute=operations.divide,
    ),
    Operator(
        symbol="^i",
        pattern=re.compile(rf"\^{NUMBER_PATTERN}"),
        description="exponentiation with power i",
        can_precede_number=False,
        is_unary=True,
        has_embedded_base=True,
        compute=operations.power,
    ),
    Operator(
        symbol="%",
        pattern=re.compile(r"%"),
        description="modulus",
        can_precede_number=False,
        is_unary=False,
        has_embedded_base=False,
        compute=operations.modulo,
    ),
    Operator(
        symbol="V[i]",
        pattern=re.compile(rf"V{NUMBER_IN_BRACKETS_PATTERN}"),
        description="root with index i",
        can_precede_number=True,
        is_unary=True,
        has_embedded_base=True,
        compute=operations.root,
    ),
    Operator(
        symbol="!",
        pattern=re.compile(r"!"),
        description="factorial",
        can_precede_number=False,
        is_unary=True,
        has_embedded_base=False,
        compute=operations.factorial,
    ),
    Operator(
        symbol="log[b]",
        pattern=re.compile(rf"log{NUMBER_IN_BRACKETS_PATTERN}"),
        description="logarithm with base b",
        can_precede_number=True,
        is_unary=True,
        has_embedded_base=True,
        compute=operations.logarithm,
    ),
    Operator(
        symbol="ln",
        pattern=re.compile(r"ln"),
        description="logarithm with base e",
        can_precede_number=True,
        is_unary=True,
        has_embedded_base=False,
        compute=operations.natural_logarithm,
    ),
)

_BY_SYMBOL = {operator.symbol: operator for operator in OPERATORS}


def descriptions() -> dict[str, str]:
    """Symbol to description for every operator, in catalog order."""
    return {operator.symbol: operator.description for operator in OPERATORS}


def get_operator(symbol: str) -> Operator:
    """
    Look up a template by its canonical symbol.

    Raises:
        UnknownOperatorError: If no operator has this symbol
    """
    try:
        return _BY_SYMBOL[symbol]
    except KeyError:
        raise UnknownOperatorError(symbol) from None


def operators_with_base() -> tuple[Operator, ...]:
    """Operators whose second value is embedded in their token."""
    return tuple(operator for operator in OPERATORS if operator.has_embedded_base)


def operators_without_base() -> tuple[Operator, ...]:
    """Operators whose token carries no number."""
    return tuple(operator for operator in OPERATORS if not operator.has_embedded_base)
