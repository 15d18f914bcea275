"""Split validated expressions into operands and an operation queue."""
import re
from typing import List

from sequential_calculator.common.errors import (
    InvalidCharacterError,
    MissingOperandError,
    MissingOperatorError,
    OperandOverflowError,
)
from sequential_calculator.common.logger import logger
from sequential_calculator.common.models import ParsedExpression
from sequential_calculator.common.operations import OPERATOR_SYMBOLS, Operation, OperationFactory


# Maximal digit runs, single operator characters, or any other non-space character
TOKEN: re.Pattern = re.compile(r"[0-9]+|[+\-*/]|[^ ]")


class ExpressionParser:
    """
    Parse validated arithmetic expressions.

    Algorithm:
        1. Tokenize into digit runs and single operator characters; spaces only separate
        2. Walk the tokens expecting operand, operator, operand, ... in turn
        3. Resolve each operator through OperationFactory, keeping textual order

    Spacing is optional, so ``"1 + 4 -2 *3"`` and ``"1+4-2*3"`` yield the same tokens.
    The first structural problem met while scanning is the one reported.
    """

    @staticmethod
    def tokenize(expr: str) -> List[str]:
        """
        Split an expression into tokens.

        :param str expr: Arithmetic expression

        :return: List of tokens, without spaces
        :rtype: List[str]
        """
        return TOKEN.findall(expr)

    @staticmethod
    def _is_operand(token: str) -> bool:
        return token.isascii() and token.isdigit()

    @staticmethod
    def _to_int(token: str, expr: str) -> int:
        try:
            return int(token)
        except ValueError:
            # Digit runs above sys.get_int_max_str_digits() are refused by int()
            raise OperandOverflowError(
                f"Operand of {len(token)} digits is too large to convert", expr
            ) from None

    @staticmethod
    def parse(expr: str) -> ParsedExpression:
        """
        Parse an expression into operands and operations.

        :param str expr: Expression that passed character validation

        :return: Operands and operation queue in textual order
        :rtype: ParsedExpression
        :raises MissingOperandError: If there are no operands, or an operator lacks a neighbour operand
        :raises MissingOperatorError: If two operands are adjacent, or there is no operator at all
        :raises InvalidCharacterError: If a token is neither a number nor an operator
        :raises OperandOverflowError: If an operand exceeds the integer string conversion limit
        """
        tokens: List[str] = ExpressionParser.tokenize(expr)
        logger.debug("🔎 Tokens for %r: %s", expr, tokens)

        if not any(ExpressionParser._is_operand(token) for token in tokens):
            raise MissingOperandError(f"Expression has no operands: {expr!r}", expr)

        operands: List[int] = []
        operations: List[Operation] = []
        expect_operand: bool = True

        for token in tokens:
            if ExpressionParser._is_operand(token):
                if not expect_operand:
                    raise MissingOperatorError(
                        f"Missing operator before {token!r}: {expr!r}", expr
                    )
                operands.append(ExpressionParser._to_int(token, expr))
                expect_operand = False
            elif token in OPERATOR_SYMBOLS:
                if expect_operand:
                    raise MissingOperandError(
                        f"Missing operand before operator {token!r}: {expr!r}", expr
                    )
                operations.append(OperationFactory.resolve(token))
                expect_operand = True
            else:
                raise InvalidCharacterError(expr, token, expr.index(token))

        # Trailing operator
        if expect_operand:
            raise MissingOperandError(f"Expression cannot end with an operator: {expr!r}", expr)

        if not operations:
            raise MissingOperatorError(f"Expression has no operator: {expr!r}", expr)

        return ParsedExpression(operands=operands, operations=operations)
