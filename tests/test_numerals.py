import pytest

from shamir_audit.numerals import CHUNK_DIGITS, digits_to_int, to_decimal


@pytest.mark.parametrize("value", [0, 7, -7, 10**CHUNK_DIGITS - 1, 10**CHUNK_DIGITS, -(10**CHUNK_DIGITS) - 1])
def test_to_decimal_matches_str(value):
    assert to_decimal(value) == str(value)


def test_to_decimal_beyond_str_conversion_limit():
    assert to_decimal(10**5000) == "1" + "0" * 5000
    assert to_decimal(-(10**5000 - 1)) == "-" + "9" * 5000
    assert to_decimal(10**2500 + 1) == "1" + "0" * 2499 + "1"


def test_digits_to_int_keeps_leading_zero_chunks():
    body = "1" + "0" * (2 * CHUNK_DIGITS)
    assert digits_to_int(body, 10) == 10 ** (2 * CHUNK_DIGITS)
    assert digits_to_int("0" * 3000 + "ff", 16) == 255
