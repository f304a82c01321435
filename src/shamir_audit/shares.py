# SPDX-FileCopyrightText: 2025 shamir-audit contributors
# SPDX-License-Identifier: MIT

"""Value types shared by the interpolation engine and the consistency checker.

``Share``
    One ``(x, y)`` point of the secret polynomial.

``ReconstructionResult``
    The recovered secret together with the shares that disagree with it.

``point_set``
    Normalise any iterable of shares or ``(x, y)`` pairs into a tuple sorted
    by ``x``, rejecting repeated abscissae.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union

from .errors import DuplicateAbscissaError
from .numerals import to_decimal


@dataclass(frozen=True, order=True)
class Share:
    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"x={to_decimal(self.x)} y={to_decimal(self.y)}"


ShareLike = Union[Share, Tuple[int, int]]
PointSet = Tuple[Share, ...]


def as_share(item: ShareLike) -> Share:
    if isinstance(item, Share):
        return item
    x, y = item
    for value in (x, y):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Share coordinates must be integers, got {type(value).__name__}")
    return Share(x, y)


def point_set(items: Iterable[ShareLike]) -> PointSet:
    """Return the shares sorted by ``x``.

    Raises :class:`~shamir_audit.errors.DuplicateAbscissaError` when two
    shares carry the same ``x``.
    """
    shares = sorted(as_share(item) for item in items)
    for previous, current in zip(shares, shares[1:]):
        if previous.x == current.x:
            raise DuplicateAbscissaError(current.x)
    return tuple(shares)


@dataclass(frozen=True)
class ReconstructionResult:
    secret: int
    bad_shares: PointSet = ()

    @property
    def consistent(self) -> bool:
        return not self.bad_shares


@dataclass(frozen=True)
class ShareBundle:
    """Decoded contents of a share file."""

    n: int
    k: int
    shares: PointSet


__all__ = ["Share", "ShareLike", "PointSet", "as_share", "point_set", "ReconstructionResult", "ShareBundle"]
