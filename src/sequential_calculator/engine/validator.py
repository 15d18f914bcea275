"""Character-level validation of raw expressions."""
import re
from typing import Optional

from sequential_calculator.common.errors import EmptyOrMissingExpressionError, InvalidCharacterError


# Anything that is not an ASCII digit, an operator or a plain space
INVALID_CHARACTER: re.Pattern = re.compile(r"[^0-9+\-*/ ]")


class ExpressionValidator:
    """
    Reject expressions that are missing or contain illegal characters.

    Only the character set is checked here. Structural problems such as
    ``"1 1"`` (no operator) pass and are reported by the parser.
    """

    @staticmethod
    def validate(expression: Optional[str]) -> str:
        """
        Validate the character set of an expression.

        :param expression: Raw expression text

        :return: The unchanged expression
        :rtype: str
        :raises EmptyOrMissingExpressionError: If the expression is None or empty
        :raises InvalidCharacterError: On the first character outside digits, ``+ - * /`` and space
        """
        if expression is None or expression == "":
            raise EmptyOrMissingExpressionError("Expression is missing or empty", expression)

        match = INVALID_CHARACTER.search(expression)
        if match:
            raise InvalidCharacterError(expression, match.group(), match.start())

        return expression
