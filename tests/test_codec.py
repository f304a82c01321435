import pytest

from shamir_audit import ShareDecodeError, decode_digits
from shamir_audit.codec import parse_base


@pytest.mark.parametrize(
    "base, digits, expected",
    [
        (10, "4", 4),
        ("2", "111", 7),
        (16, "ff", 255),
        (16, "FF", 255),
        (36, "zz", 35 * 36 + 35),
        (8, "-17", -15),
        (3, "+21", 7),
        ("15", "aed7015a346d63", int("aed7015a346d63", 15)),
    ],
)
def test_decode_digits(base, digits, expected):
    assert decode_digits(base, digits) == expected


def test_decode_large_value():
    digits = "e1b5e05623d881f"
    assert decode_digits(16, digits * 8) == int(digits * 8, 16)


@pytest.mark.parametrize("digits", ["", "-", "12", "0b1", "1_0", " 1", "1 "])
def test_decode_rejects_invalid_binary(digits):
    with pytest.raises(ShareDecodeError):
        decode_digits(2, digits)


def test_decode_rejects_radix_prefix():
    with pytest.raises(ShareDecodeError):
        decode_digits(16, "0x1f")


def test_decode_rejects_non_string():
    with pytest.raises(ShareDecodeError):
        decode_digits(10, 42)


@pytest.mark.parametrize("base", [0, 1, 37, "x", "", "1.5", True, None, "²"])
def test_parse_base_rejects(base):
    with pytest.raises(ShareDecodeError):
        parse_base(base)


def test_parse_base_strips_whitespace():
    assert parse_base(" 7 ") == 7


def test_decode_beyond_str_conversion_limit():
    assert decode_digits(10, "9" * 5000) == 10**5000 - 1
    assert decode_digits("10", "-1" + "0" * 5000) == -(10**5000)
    assert decode_digits(7, "1" + "0" * 4400) == 7**4400


def test_parse_base_rejects_huge_quoted_base():
    with pytest.raises(ShareDecodeError):
        parse_base("9" * 5000)
