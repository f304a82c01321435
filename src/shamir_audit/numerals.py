# SPDX-FileCopyrightText: 2025 shamir-audit contributors
# SPDX-License-Identifier: MIT

"""Conversion between integers and digit strings of any length.

``int(text, base)`` and ``str(value)`` refuse more than
``sys.get_int_max_str_digits()`` digits (4300 by default) for bases that
are not powers of two. Both directions here work in fixed-size chunks, each
well below that limit.
"""

from __future__ import annotations

CHUNK_DIGITS = 1000
_DECIMAL_CHUNK = 10**CHUNK_DIGITS


def digits_to_int(body: str, radix: int) -> int:
    """Parse an unsigned, already validated digit string."""
    value = 0
    for start in range(0, len(body), CHUNK_DIGITS):
        chunk = body[start : start + CHUNK_DIGITS]
        value = value * radix ** len(chunk) + int(chunk, radix)
    return value


def to_decimal(value: int) -> str:
    if value < 0:
        return "-" + to_decimal(-value)
    chunks = []
    while value >= _DECIMAL_CHUNK:
        value, low = divmod(value, _DECIMAL_CHUNK)
        chunks.append(f"{low:0{CHUNK_DIGITS}d}")
    chunks.append(f"{value:d}")
    return "".join(reversed(chunks))


__all__ = ["digits_to_int", "to_decimal", "CHUNK_DIGITS"]
