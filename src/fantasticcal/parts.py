"""Typed pieces of a typed calculation."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from fantasticcal.catalog import BoundOperator
from fantasticcal.matcher import match_operator


@dataclass(frozen=True)
class CalculusPart:
    """Base class for a classified token."""

    value: object


@dataclass(frozen=True)
class UndefinedPart(CalculusPart):
    value: str


@dataclass(frozen=True)
class OperatorPart(CalculusPart):
    value: BoundOperator


@dataclass(frozen=True)
class NumberPart(CalculusPart):
    value: Decimal


@dataclass(frozen=True)
class LeftParenthesisPart(CalculusPart):
    value: str = "("


@dataclass(frozen=True)
class RightParenthesisPart(CalculusPart):
    value: str = ")"


def _as_number(token: str) -> Decimal | None:
    try:
        number = Decimal(token)
    except InvalidOperation:
        return None
    return number if number.is_finite() else None


def classify(token: str) -> CalculusPart:
    """
    Classify a single token.

    Numbers are tried before operators, so ``-5`` is a number while a lone
    ``-`` is subtraction.
    """
    if token == "(":
        return LeftParenthesisPart()
    if token == ")":
        return RightParenthesisPart()

    number = _as_number(token)
    if number is not None:
        return NumberPart(number)

    operator = match_operator(token)
    if operator is not None:
        return OperatorPart(operator)

    return UndefinedPart(token)


def split_parts(line: str) -> list[CalculusPart]:
    """Classify every whitespace-separated token of a line."""
    return [classify(token) for token in line.split()]
