import pytest

from wirefdf.numbers import parse_int


def test_plain_number():
    text = "42"
    assert parse_int(text, 0) == (42, len(text))


def test_whitespace_and_sign_then_stops_at_comma():
    text = "  \t-17,0xFF"
    assert parse_int(text, 0) == (-17, text.index(","))


def test_plus_sign():
    text = "+5"
    assert parse_int(text, 0) == (5, len(text))


def test_plus_after_minus_is_not_consumed():
    value, index = parse_int("-+5", 0)
    assert value == 0
    assert index == 1


def test_starts_at_given_index():
    text = "1 2"
    assert parse_int(text, 1) == (2, len(text))


def test_no_digits_leaves_index():
    assert parse_int("abc", 0) == (0, 0)


def test_positive_overflow_gives_minus_one():
    value, _ = parse_int("99999999999999999999", 0)
    assert value == -1


def test_negative_overflow_gives_zero():
    value, _ = parse_int("-99999999999999999999", 0)
    assert value == 0


@pytest.mark.parametrize("number", [0, 7, 1000000, -1000000, 123456])
def test_round_trip(number):
    text = str(number)
    assert parse_int(text) == (number, len(text))