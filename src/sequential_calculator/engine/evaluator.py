"""Left-to-right folding of operands."""
from collections import deque
from typing import Deque, Sequence

from sequential_calculator.common.errors import MissingOperandError, MissingOperatorError
from sequential_calculator.common.logger import logger
from sequential_calculator.common.models import ParsedExpression
from sequential_calculator.common.operations import Operation


class Evaluator:
    """
    Fold operands strictly in textual order.

    There is no operator precedence: ``9 + 3 * 2`` is ``(9 + 3) * 2 = 24``.
    """

    @staticmethod
    def evaluate(operands: Sequence[int], operations: Sequence[Operation]) -> int:
        """
        Apply each operation to the accumulator and the next operand.

        :param Sequence[int] operands: Operands in order of appearance
        :param Sequence[Operation] operations: One operation fewer than operands

        :return: Final accumulator
        :rtype: int
        :raises MissingOperandError: If there are no operands, or too few for the operations
        :raises MissingOperatorError: If there are operands left without an operation
        :raises DivisionByZeroError: If a division by zero is attempted
        """
        if not operands:
            raise MissingOperandError("No operands to evaluate")
        if len(operands) > len(operations) + 1:
            raise MissingOperatorError(
                f"{len(operands)} operands but only {len(operations)} operations"
            )
        if len(operands) < len(operations) + 1:
            raise MissingOperandError(
                f"{len(operations)} operations but only {len(operands)} operands"
            )

        queue: Deque[Operation] = deque(operations)
        accumulator: int = operands[0]
        for operand in operands[1:]:
            operation: Operation = queue.popleft()
            accumulator = operation.apply(accumulator, operand)
            logger.debug("🧮 %s %s -> %s", operation.symbol, operand, accumulator)

        return accumulator

    @staticmethod
    def evaluate_parsed(parsed: ParsedExpression) -> int:
        """Evaluate the output of ExpressionParser.parse."""
        return Evaluator.evaluate(parsed.operands, parsed.operations)
