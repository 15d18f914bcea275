"""Arithmetic operations applied while folding an expression left to right."""
from collections.abc import Callable as ABCCallable
from enum import Enum
import operator
from typing import Callable, Dict

from sequential_calculator.common.errors import DivisionByZeroError, UnknownOperatorError


# Type alias for operation functions (accumulator, operand) -> new accumulator
OperationFn: ABCCallable[[int, int], int] = Callable[[int, int], int]


def _divide(accumulator: int, operand: int) -> int:
    """
    Integer division truncating toward zero.

    Python's ``//`` floors, so the quotient is computed on absolute values
    and the sign is restored afterwards.

    :param int accumulator: Dividend
    :param int operand: Divisor

    :return: Truncated quotient
    :rtype: int
    :raises DivisionByZeroError: If operand is zero
    """
    if operand == 0:
        raise DivisionByZeroError(f"Division by zero: {accumulator} / {operand}")
    quotient: int = abs(accumulator) // abs(operand)
    return quotient if (accumulator >= 0) == (operand > 0) else -quotient


class Operation(str, Enum):
    """Closed set of operations, keyed by their operator symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def symbol(self) -> str:
        return self.value

    def apply(self, accumulator: int, operand: int) -> int:
        """
        Combine the accumulator with the next operand.

        :param int accumulator: Value folded so far
        :param int operand: Next operand

        :return: New accumulator
        :rtype: int
        """
        return OPERATIONS[self](accumulator, operand)


OPERATIONS: Dict[Operation, OperationFn] = {
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.DIVIDE: _divide,
}

OPERATOR_SYMBOLS: frozenset = frozenset(op.symbol for op in Operation)


class OperationFactory:
    """Resolve operator symbols into Operation members."""

    @staticmethod
    def resolve(symbol: str) -> Operation:
        """
        Map a single operator character to its Operation.

        :param str symbol: Operator symbol, one of ``+ - * /``

        :return: Matching operation
        :rtype: Operation
        :raises UnknownOperatorError: If the symbol is not a known operator
        """
        try:
            return Operation(symbol)
        except ValueError:
            raise UnknownOperatorError(symbol) from None
