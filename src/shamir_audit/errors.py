# SPDX-FileCopyrightText: 2025 shamir-audit contributors
# SPDX-License-Identifier: MIT

"""Exceptions raised while decoding, interpolating and auditing shares."""

from __future__ import annotations

from .numerals import to_decimal


class ReconstructionError(ValueError):
    """Base class for every error raised by :mod:`shamir_audit`."""


class InsufficientSharesError(ReconstructionError):
    def __init__(self, available: int, threshold: int) -> None:
        self.available = available
        self.threshold = threshold
        super().__init__(f"Not enough shares. Need {to_decimal(threshold)}, got {available}")


class DuplicateAbscissaError(ReconstructionError):
    def __init__(self, x: int) -> None:
        self.x = x
        super().__init__(f"Duplicate share abscissa x={to_decimal(x)}")


class ExactnessError(ReconstructionError):
    """The interpolated value at x=0 is not an integer.

    ``numerator`` and ``denominator`` hold the accumulated rational so the
    caller can inspect how far off the points are.
    """

    def __init__(self, numerator: int, denominator: int) -> None:
        self.numerator = numerator
        self.denominator = denominator
        super().__init__("Interpolated secret is not an integer; the points do not lie on an integer polynomial")


class ShareDecodeError(ReconstructionError):
    pass


class ShareFileError(ShareDecodeError):
    pass


class ShareCountMismatchError(ReconstructionError):
    def __init__(self, declared: int, found: int) -> None:
        self.declared = declared
        self.found = found
        super().__init__(f"Share file declares n={to_decimal(declared)} but contains {found} shares")


__all__ = [
    "ReconstructionError",
    "InsufficientSharesError",
    "DuplicateAbscissaError",
    "ExactnessError",
    "ShareDecodeError",
    "ShareFileError",
    "ShareCountMismatchError",
]
