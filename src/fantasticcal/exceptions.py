"""Custom exceptions for the fantasticcal package."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class NoOperatorMatchError(CalculatorError):
    """Raised when an operator token matches no catalog entry."""

    def __init__(self, token: str | None) -> None:
        super().__init__("No operator matches", token)
        self.token = token


class UnknownOperatorError(CalculatorError):
    """Raised when a canonical symbol is not in the catalog."""

    def __init__(self, symbol: str) -> None:
        super().__init__("Unknown operator symbol", symbol)
        self.symbol = symbol


class MissingOperandError(CalculatorError):
    """Raised when a binary operation has no second operand."""

    def __init__(self, description: str) -> None:
        super().__init__(
            f"Binary operation {description} requires two operands. Second number is missing"
        )
        self.description = description


class DivisionByZeroError(CalculatorError):
    """Raised when attempting to divide by zero."""

    def __init__(self, numerator: float) -> None:
        super().__init__("Division by zero", numerator)
        self.numerator = numerator


class NegativeRadicandError(CalculatorError):
    """Raised when a root of a negative number is requested."""

    def __init__(self, radicand: float) -> None:
        super().__init__("Root of a negative number is not allowed", radicand)
        self.radicand = radicand


class NegativeOrNonIntegerOperandError(CalculatorError):
    """Raised when factorial gets a negative or fractional operand."""

    def __init__(self, operand: float) -> None:
        super().__init__("Factorial requires a non-negative integer", operand)
        self.operand = operand


class NonPositiveOperandError(CalculatorError):
    """Raised when a logarithm of a number <= 0 is requested."""

    def __init__(self, operand: float) -> None:
        super().__init__("Logarithm requires a number greater than 0", operand)
        self.operand = operand


class ResultOverflowError(CalculatorError):
    """Raised when a calculation results in overflow."""

    def __init__(self, operation: str, *operands: float) -> None:
        super().__init__(f"Overflow in {operation}", operands)
        self.operation = operation
        self.operands = operands


class InvalidInputError(CalculatorError):
    """Raised when input is invalid (NaN, Inf, wrong type) or a result is undefined."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason
