"""Exceptions raised when an arithmetic expression cannot be evaluated."""
from typing import Optional


class InvalidExpressionError(ValueError):
    """
    Base class for every rejected expression.

    Subclasses identify the cause; callers that only care whether the
    expression was accepted can catch this class (or ``ValueError``).

    :param str message: Human-readable description of the failure
    :param expression: Offending expression, if known
    """

    def __init__(self, message: str, expression: Optional[str] = None) -> None:
        self.message = message
        self.expression = expression
        super().__init__(message)


class EmptyOrMissingExpressionError(InvalidExpressionError):
    """Expression is None or an empty string."""


class InvalidCharacterError(InvalidExpressionError):
    """Expression contains a character outside digits, operators and spaces."""

    def __init__(self, expression: str, character: str, position: int) -> None:
        self.character = character
        self.position = position
        super().__init__(
            f"Invalid character {character!r} at position {position}: {expression!r}",
            expression,
        )


class MissingOperandError(InvalidExpressionError):
    """An operator lacks an operand on one side, or there are no operands at all."""


class MissingOperatorError(InvalidExpressionError):
    """Two operands follow each other without an operator in between."""


class UnknownOperatorError(InvalidExpressionError):
    """A symbol other than + - * / reached operator resolution."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Unknown operator: {symbol!r}")


class DivisionByZeroError(InvalidExpressionError, ZeroDivisionError):
    """Divide operation received a zero operand."""


class OperandOverflowError(InvalidExpressionError):
    """An operand or the result has too many digits to convert to or from text."""
