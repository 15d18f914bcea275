"""Shared fixtures."""
import sys

import pytest


DEFAULT_INT_MAX_STR_DIGITS = 4300


@pytest.fixture
def int_str_digit_limit():
    """Pin the interpreter's integer string conversion limit to its default."""
    if not hasattr(sys, "set_int_max_str_digits"):
        pytest.skip("interpreter has no integer string conversion limit")
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(DEFAULT_INT_MAX_STR_DIGITS)
    yield DEFAULT_INT_MAX_STR_DIGITS
    sys.set_int_max_str_digits(previous)
