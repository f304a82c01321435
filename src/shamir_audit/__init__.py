# SPDX-FileCopyrightText: 2025 shamir-audit contributors
# SPDX-License-Identifier: MIT

"""Threshold secret reconstruction with detection of corrupted shares."""

from __future__ import annotations

from .codec import decode_digits
from .consistency import reconstruct, reconstruct_by_consensus
from .errors import (
    DuplicateAbscissaError,
    ExactnessError,
    InsufficientSharesError,
    ReconstructionError,
    ShareCountMismatchError,
    ShareDecodeError,
    ShareFileError,
)
from .interpolation import interpolate
from .loader import load_bundle, parse_bundle
from .shares import ReconstructionResult, Share, ShareBundle, point_set

__version__ = "0.1.0"

__all__ = [
    "interpolate",
    "reconstruct",
    "reconstruct_by_consensus",
    "decode_digits",
    "load_bundle",
    "parse_bundle",
    "point_set",
    "Share",
    "ShareBundle",
    "ReconstructionResult",
    "ReconstructionError",
    "InsufficientSharesError",
    "DuplicateAbscissaError",
    "ExactnessError",
    "ShareDecodeError",
    "ShareFileError",
    "ShareCountMismatchError",
]
