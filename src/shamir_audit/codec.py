# SPDX-FileCopyrightText: 2025 shamir-audit contributors
# SPDX-License-Identifier: MIT

"""Decoding of share ordinates written in an arbitrary base."""

from __future__ import annotations

import string
from typing import Union

from .errors import ShareDecodeError
from .numerals import digits_to_int, to_decimal

DIGITS = string.digits + string.ascii_lowercase
MIN_BASE = 2
MAX_BASE = len(DIGITS)


def parse_base(base: Union[int, str]) -> int:
    """Accept ``16`` as well as ``"16"``; share files usually quote it."""
    if isinstance(base, bool):
        raise ShareDecodeError(f"Invalid base {base!r}")
    if isinstance(base, str):
        text = base.strip()
        if not (text.isascii() and text.isdigit()):
            raise ShareDecodeError(f"Invalid base {base!r}")
        base = digits_to_int(text, 10)
    if not isinstance(base, int):
        raise ShareDecodeError(f"Invalid base {base!r}")
    if not MIN_BASE <= base <= MAX_BASE:
        raise ShareDecodeError(f"Base must be between {MIN_BASE} and {MAX_BASE}, got {to_decimal(base)}")
    return base


def decode_digits(base: Union[int, str], digits: str) -> int:
    """Return the integer written as ``digits`` in ``base``.

    Only the plain alphanumeric digits of the base are accepted, with an
    optional sign; underscores, whitespace and ``0x``-style prefixes are not.
    """
    radix = parse_base(base)
    if not isinstance(digits, str):
        raise ShareDecodeError(f"Digit string expected, got {type(digits).__name__}")

    body = digits[1:] if digits[:1] in ("+", "-") else digits
    if not body:
        raise ShareDecodeError(f"Empty digit string {digits!r}")
    allowed = DIGITS[:radix]
    for char in body.lower():
        if char not in allowed:
            raise ShareDecodeError(f"Digit {char!r} is not valid in base {radix}: {digits!r}")
    try:
        value = digits_to_int(body.lower(), radix)
    except ValueError as exc:
        raise ShareDecodeError(f"Cannot decode {digits!r} in base {radix}: {exc}") from exc
    return -value if digits.startswith("-") else value


__all__ = ["decode_digits", "parse_base", "MIN_BASE", "MAX_BASE"]
