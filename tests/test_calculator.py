"""Test class Calculator and the calculate shortcut."""
import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from sequential_calculator.common.errors import (
    DivisionByZeroError,
    EmptyOrMissingExpressionError,
    InvalidCharacterError,
    InvalidExpressionError,
    MissingOperandError,
    MissingOperatorError,
    OperandOverflowError,
)
from sequential_calculator.engine.calculator import Calculator, calculate


@pytest.mark.parametrize("expr,expected", [
    ("1 + 1", 2),
    ("1 + 1 + 1", 3),
    ("2 + 3 + 4 + 5", 14),
])
def test_addition(expr: str, expected: int) -> None:
    assert calculate(expr) == expected


@pytest.mark.parametrize("expr,expected", [
    ("1 - 1", 0),
    ("3 - 2 - 2", -1),
    ("10 - 3 - 4 - 1", 2),
])
def test_subtraction(expr: str, expected: int) -> None:
    assert calculate(expr) == expected


@pytest.mark.parametrize("expr,expected", [
    ("1 * 1", 1),
    ("3 * 2 * 2", 12),
    ("10 * 3 * 4", 120),
])
def test_multiplication(expr: str, expected: int) -> None:
    assert calculate(expr) == expected


@pytest.mark.parametrize("expr,expected", [
    ("1 / 1", 1),
    ("6 / 2", 3),
    ("12 / 3", 4),
    ("7 / 2", 3),
    ("1 - 8 / 2", -3),  # (1 - 8) / 2 truncates toward zero
])
def test_division(expr: str, expected: int) -> None:
    assert calculate(expr) == expected


@pytest.mark.parametrize("expr,expected", [
    ("9 + 3 - 7", 5),
    ("9 + 3 * 2 * 3 - 1", 71),
    ("9 + 3 * 2 / 2", 12),
])
def test_left_to_right_without_precedence(expr: str, expected: int) -> None:
    """Mixed operators are applied in textual order."""
    assert calculate(expr) == expected


@pytest.mark.parametrize("expr", [
    "1 + 4 -2 *3",
    "1 + 4 - 2 * 3",
    "1+4-2*3",
    "  1 +4-  2*3  ",
])
def test_spacing_does_not_matter(expr: str) -> None:
    assert calculate(expr) == 9


@pytest.mark.parametrize("expr", [None, ""])
def test_missing_expression(expr) -> None:
    with pytest.raises(EmptyOrMissingExpressionError):
        calculate(expr)


def test_non_numeric_characters() -> None:
    with pytest.raises(InvalidCharacterError):
        calculate("a + b + 1 * 2")


@pytest.mark.parametrize("expr", ["1 1", "2 3", "1 2", "1 2 3"])
def test_missing_operator(expr: str) -> None:
    with pytest.raises(MissingOperatorError):
        calculate(expr)


@pytest.mark.parametrize("expr", ["+ ", "-", "*", "/", " +", "* -"])
def test_missing_operand(expr: str) -> None:
    with pytest.raises(MissingOperandError):
        calculate(expr)


def test_division_by_zero() -> None:
    with pytest.raises(DivisionByZeroError):
        calculate("5 / 0")


def test_character_errors_come_before_structural_errors() -> None:
    """An illegal character is reported even if the structure is also broken."""
    with pytest.raises(InvalidCharacterError):
        calculate("1 1 a")


def test_structural_errors_come_before_arithmetic_errors() -> None:
    """A broken structure is reported before any division is attempted."""
    with pytest.raises(MissingOperandError):
        calculate("1 / 0 +")


@pytest.mark.parametrize("expr", [None, "", "x", "1 1", "+", "1 / 0"])
def test_all_failures_are_value_errors(expr) -> None:
    """Every rejection shares the InvalidExpressionError (ValueError) base."""
    with pytest.raises(InvalidExpressionError):
        calculate(expr)
    with pytest.raises(ValueError):
        calculate(expr)


def test_calculate_is_idempotent() -> None:
    expr = "9 + 3 * 2 * 3 - 1"
    assert {calculate(expr) for _ in range(5)} == {71}
    assert Calculator.calculate(expr) == calculate(expr)


def test_calculate_from_threads() -> None:
    """Calls share no state and can run in parallel."""
    expressions = ["9 + 3 * 2 * 3 - 1", "10 - 3 - 4 - 1", "12 / 3", "1 + 4 -2 *3"] * 25
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(calculate, expressions))
    assert results == [71, 2, 4, 9] * 25


def test_calculate_logs_result_at_debug(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="sequential_calculator"):
        calculate("9 + 3 * 2")
    assert "= 24" in caplog.text


def test_operand_beyond_conversion_limit(int_str_digit_limit: int) -> None:
    """A digit run longer than the interpreter accepts is a typed failure."""
    with pytest.raises(OperandOverflowError) as exc_info:
        calculate("1" * (int_str_digit_limit + 700) + " + 1")
    assert isinstance(exc_info.value, InvalidExpressionError)


def test_result_beyond_conversion_limit(int_str_digit_limit: int) -> None:
    """A result too long to print is a typed failure, even at the default log level."""
    with pytest.raises(OperandOverflowError):
        calculate(f"{'9' * 3000} * {'9' * 3000}")


def test_large_intermediate_accumulator(int_str_digit_limit: int) -> None:
    """Only the final result has to fit the conversion limit."""
    nines = "9" * 3000
    assert calculate(f"{nines} * {nines} / {nines}") == int(nines)
