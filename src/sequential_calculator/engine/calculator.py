"""Evaluate arithmetic expressions left to right."""
from typing import Optional

from sequential_calculator.common.errors import OperandOverflowError
from sequential_calculator.common.logger import logger
from sequential_calculator.common.models import ParsedExpression
from sequential_calculator.engine.evaluator import Evaluator
from sequential_calculator.engine.parser import ExpressionParser
from sequential_calculator.engine.validator import ExpressionValidator


class Calculator:
    """
    Validate, parse and evaluate an expression of integers and ``+ - * /``.

    Design constraints:
        - No eval(), no dynamic code execution
        - No operator precedence: operators apply in the order they are written
        - Integer division truncates toward zero
        - Operands and results must fit the interpreter's integer string conversion limit
        - Stateless, so one instance (or none) can serve any number of threads

    Examples:
        - ``"9 + 3 * 2 * 3 - 1"`` evaluates as ``(((9 + 3) * 2) * 3) - 1 = 71``
        - ``"1 + 4 -2 *3"`` evaluates to ``9``
    """

    @staticmethod
    def _ensure_printable(result: int, expression: str) -> None:
        """
        Reject results that cannot be written back as decimal text.

        Intermediate accumulators may grow past the limit as long as the final
        value fits.

        :param int result: Evaluated result
        :param str expression: Source expression
        :raises OperandOverflowError: If str(result) would exceed the conversion limit
        """
        try:
            str(result)
        except ValueError:
            raise OperandOverflowError(
                f"Result of {result.bit_length()} bits is too large to convert to text", expression
            ) from None

    @staticmethod
    def calculate(expression: Optional[str]) -> int:
        """
        Evaluate an arithmetic expression.

        :param expression: Expression such as ``"2 + 3 * 4"``

        :return: Integer result
        :rtype: int
        :raises InvalidExpressionError: If the expression is empty, malformed, too large, or divides by zero
        """
        validated: str = ExpressionValidator.validate(expression)
        parsed: ParsedExpression = ExpressionParser.parse(validated)
        result: int = Evaluator.evaluate_parsed(parsed)
        Calculator._ensure_printable(result, validated)
        logger.debug("✅ %r = %s", expression, result)
        return result


def calculate(expression: Optional[str]) -> int:
    """Shortcut for :meth:`Calculator.calculate`."""
    return Calculator.calculate(expression)
