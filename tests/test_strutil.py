import pytest

from savedefender.strutil import atoi, format_number, getnbr, prefix_equal


@pytest.mark.parametrize("value", [0, -1, -250])
def test_format_number_non_positive(value):
    assert format_number(value) == " 0"


@pytest.mark.parametrize("value", [1, 9, 10, 1234, 1000000])
def test_format_number_round_trips_through_atoi(value):
    assert atoi(format_number(value)) == value


def test_format_number_has_no_padding_for_positive():
    assert not format_number(77).startswith(" ")


def test_atoi_reads_digits():
    assert atoi("123") == 123


def test_atoi_empty_is_zero():
    assert atoi("") == 0


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("+-42abc", 42), ("  (*%/7", 7), ("abc", 0), ("", 0), ("12 34", 12)],
)
def test_getnbr(text, expected):
    assert getnbr(text) == expected


def test_prefix_equal_matching_prefix():
    assert prefix_equal("hello", "help", 3) is True


def test_prefix_equal_differs_within_prefix():
    assert prefix_equal("hello", "help", 4) is False


def test_prefix_equal_too_short():
    assert prefix_equal("he", "hello", 3) is False


def test_prefix_equal_zero_length():
    assert prefix_equal("", "", 0) is True