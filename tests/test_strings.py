import pytest

from inkrt.core import InkError
from inkrt.strings import (
    clean_string,
    decimal_digits,
    str_equal,
    to_str,
    value_length,
)

SAMPLES = [
    "",
    "a",
    "hello world",
    "  a  b  ",
    "a \n b",
    "\n\n x \n\n y  \n",
    " \n \n ",
    "one  two   three\n\nfour ",
]


def test_to_str_ints():
    assert to_str(42) == "42"
    assert to_str(-7) == "-7"


def test_to_str_floats_trim_zeros():
    assert to_str(1.5) == "1.5"
    assert to_str(0.25) == "0.25"
    assert to_str(2.0) == "2"


def test_to_str_newline_and_string():
    assert to_str("\n") == "\n"
    assert to_str("abc") == "abc"


@pytest.mark.parametrize("bad", [None, [1], True])
def test_to_str_rejects_other_types(bad):
    with pytest.raises(InkError):
        to_str(bad)


@pytest.mark.parametrize("number", [0, 9, 10, -1, -15, 123456, 2**31 - 1, -(2**31)])
def test_decimal_digits_bounds_int_text(number):
    assert len(to_str(number)) <= decimal_digits(number)


@pytest.mark.parametrize("number", [0.0, 1.5, -3.25, 1234.5678, -0.5])
def test_decimal_digits_bounds_float_text(number):
    assert len(to_str(number)) <= decimal_digits(number)


def test_decimal_digits_grows_with_magnitude():
    assert decimal_digits(9) < decimal_digits(10)
    assert decimal_digits(5) < decimal_digits(-5)
    assert decimal_digits(3.0) == decimal_digits(3) + 8


def test_value_length():
    assert value_length("abc") == len("abc")
    assert value_length("\n") == len("\n")
    assert value_length(123) == decimal_digits(123)
    with pytest.raises(InkError):
        value_length(object())


def test_str_equal():
    assert str_equal("abc", "abc")
    assert not str_equal("abc", "abd")
    assert not str_equal("ab", "abc")
    assert str_equal("a\0x", "a\0y")


def test_clean_string_collapses_spaces():
    assert clean_string("a  b", False, False) == "a b"


def test_clean_string_unchanged_text():
    assert clean_string("hello world", True, True) == "hello world"


def test_clean_string_leading_and_tailing():
    assert clean_string(" a", True, False) == "a"
    assert clean_string(" a", False, False) == " a"
    assert clean_string("a ", False, True) == "a"
    assert clean_string("a ", False, False) == "a "