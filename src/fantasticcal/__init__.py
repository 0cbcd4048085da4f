"""
FantastiCal: a one-operator-at-a-time text calculator.

Operator tokens typed by a user are matched against a fixed catalog
(``+``, ``-``, ``*``, ``/``, ``^i``, ``%``, ``V[i]``, ``!``, ``log[b]``,
``ln``), then evaluated against one or two operands. Operators such as
``V[3]`` or ``log[10]`` carry their second value inside the token.
"""

from fantasticcal.catalog import (
    OPERATORS,
    BoundOperator,
    Operator,
    descriptions,
    extract_base,
    get_operator,
    operators_with_base,
    operators_without_base,
)
from fantasticcal.config import VERSION
from fantasticcal.evaluator import calculate, evaluate, render
from fantasticcal.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    InvalidInputError,
    MissingOperandError,
    NegativeOrNonIntegerOperandError,
    NegativeRadicandError,
    NoOperatorMatchError,
    NonPositiveOperandError,
    ResultOverflowError,
    UnknownOperatorError,
)
from fantasticcal.matcher import match_operator, require_operator
from fantasticcal.parts import (
    CalculusPart,
    LeftParenthesisPart,
    NumberPart,
    OperatorPart,
    RightParenthesisPart,
    UndefinedPart,
    classify,
    split_parts,
)
from fantasticcal.validators import parse_number, validate_number

__all__ = [
    "OPERATORS",
    "BoundOperator",
    "CalculatorError",
    "CalculusPart",
    "DivisionByZeroError",
    "InvalidInputError",
    "LeftParenthesisPart",
    "MissingOperandError",
    "NegativeOrNonIntegerOperandError",
    "NegativeRadicandError",
    "NoOperatorMatchError",
    "NonPositiveOperandError",
    "NumberPart",
    "Operator",
    "OperatorPart",
    "ResultOverflowError",
    "RightParenthesisPart",
    "UndefinedPart",
    "UnknownOperatorError",
    "calculate",
    "classify",
    "descriptions",
    "evaluate",
    "extract_base",
    "get_operator",
    "match_operator",
    "operators_with_base",
    "operators_without_base",
    "parse_number",
    "render",
    "require_operator",
    "split_parts",
    "validate_number",
]

__version__ = VERSION
