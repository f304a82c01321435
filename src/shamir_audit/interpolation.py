# SPDX-FileCopyrightText: 2025 shamir-audit contributors
# SPDX-License-Identifier: MIT

"""Exact Lagrange interpolation at x=0 over the integers."""

from __future__ import annotations

from math import gcd
from typing import Sequence

from .errors import ExactnessError, InsufficientSharesError
from .shares import ShareLike, point_set


def _basis_term(index: int, xs: Sequence[int]) -> tuple[int, int]:
    """Return ``(prod(0 - x_j), prod(x_i - x_j))`` over ``j != index``."""
    xi = xs[index]
    num = 1
    den = 1
    for j, xj in enumerate(xs):
        if j == index:
            continue
        num *= -xj
        den *= xi - xj
    return num, den


def interpolate(points: Sequence[ShareLike]) -> int:
    """Evaluate the polynomial through ``points`` at x=0.

    The Lagrange terms are summed as one running fraction and divided once
    at the end, so a sum that is integral is never truncated term by term.
    Raises :class:`ExactnessError` when the result is not an integer.
    """
    shares = point_set(points)
    if not shares:
        raise InsufficientSharesError(0, 1)

    xs = [share.x for share in shares]
    num, den = 0, 1
    for i, share in enumerate(shares):
        term_num, term_den = _basis_term(i, xs)
        term_num *= share.y
        if term_den < 0:
            term_num, term_den = -term_num, -term_den
        num = num * term_den + term_num * den
        den *= term_den
        common = gcd(num, den)
        if common > 1:
            num //= common
            den //= common

    secret, remainder = divmod(num, den)
    if remainder:
        raise ExactnessError(num, den)
    return secret


__all__ = ["interpolate"]
