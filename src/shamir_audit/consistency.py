# SPDX-FileCopyrightText: 2025 shamir-audit contributors
# SPDX-License-Identifier: MIT

"""Secret reconstruction with detection of inconsistent shares.

``reconstruct`` trusts the first ``k`` shares (in ``x`` order) as the
candidate basis and checks every other share against the polynomial they
define. ``reconstruct_by_consensus`` scores many candidate bases and keeps
the one the largest group of shares agrees with, which survives a corrupted
share among the first ``k``.
"""

from __future__ import annotations

import logging
from itertools import combinations, islice
from math import comb
from typing import Iterable, Optional

from . import policy as _policy
from .errors import ExactnessError, InsufficientSharesError
from .interpolation import interpolate
from .numerals import to_decimal
from .shares import PointSet, ReconstructionResult, ShareLike, point_set

_logger = logging.getLogger(__name__)


def _check_threshold(available: int, k: int) -> None:
    if k < 1 or available < k:
        raise InsufficientSharesError(available, k)


def _consistent_abscissae(shares: PointSet, basis: PointSet, candidate: int) -> set[int]:
    """Return the ``x`` of every share that reproduces ``candidate``.

    A share outside the basis takes the place of the basis' last element.
    """
    members = set(basis)
    good: set[int] = set()
    for share in shares:
        trial = basis if share in members else basis[:-1] + (share,)
        try:
            trial_secret = interpolate(trial)
        except ExactnessError:
            _logger.debug("Share x=%s yields a non-integral secret with the basis", share.x)
            continue
        if trial_secret == candidate:
            good.add(share.x)
        else:
            _logger.debug("Share x=%s disagrees with the candidate basis", share.x)
    return good


def _result(shares: PointSet, secret: int, good: set[int]) -> ReconstructionResult:
    bad = tuple(share for share in shares if share.x not in good)
    if bad:
        _logger.warning(
            "%d of %d shares are inconsistent: x=%s",
            len(bad),
            len(shares),
            ", ".join(to_decimal(s.x) for s in bad),
        )
    else:
        _logger.info("All %d shares are consistent", len(shares))
    return ReconstructionResult(secret=secret, bad_shares=bad)


def reconstruct(shares: Iterable[ShareLike], k: int) -> ReconstructionResult:
    """Recover the secret from ``shares`` with threshold ``k``.

    An :class:`ExactnessError` raised by the candidate basis itself is
    propagated; the same error for a substituted share only marks that
    share as bad.
    """
    points = point_set(shares)
    _check_threshold(len(points), k)

    basis = points[:k]
    candidate = interpolate(basis)
    good = _consistent_abscissae(points, basis, candidate)
    return _result(points, candidate, good)


def reconstruct_by_consensus(
    shares: Iterable[ShareLike],
    k: int,
    *,
    max_bases: Optional[int] = None,
) -> ReconstructionResult:
    """Recover the secret using the basis most shares agree with.

    Bases are the ``k``-subsets of the shares in lexicographic order, at most
    ``max_bases`` of them. Ties keep the earlier basis. A basis whose own
    interpolation is inexact is skipped; :class:`ExactnessError` is raised
    only when every scored basis is inexact.
    """
    points = point_set(shares)
    _check_threshold(len(points), k)
    limit = max_bases if max_bases is not None else _policy.policy.max_bases
    if limit < 1:
        raise ValueError("max_bases must be positive")

    total = comb(len(points), k)
    if total > limit:
        _logger.warning("Scoring only %d of %d candidate bases", limit, total)

    best: Optional[tuple[int, set[int]]] = None
    last_error: Optional[ExactnessError] = None
    for basis in islice(combinations(points, k), limit):
        try:
            candidate = interpolate(basis)
        except ExactnessError as exc:
            last_error = exc
            continue
        good = _consistent_abscissae(points, basis, candidate)
        if best is None or len(good) > len(best[1]):
            best = (candidate, good)
            if len(good) == len(points):
                break

    if best is None:
        raise last_error  # type: ignore[misc]
    return _result(points, *best)


__all__ = ["reconstruct", "reconstruct_by_consensus"]
