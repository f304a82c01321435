# SPDX-FileCopyrightText: 2025 shamir-audit contributors
# SPDX-License-Identifier: MIT

"""Read share files.

A share file is a JSON object with a ``keys`` entry holding the declared
share count ``n`` and threshold ``k``; every other entry maps a decimal
``x`` to ``{"base": ..., "value": ...}``.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from . import policy as _policy
from .codec import decode_digits
from .errors import ShareCountMismatchError, ShareDecodeError, ShareFileError
from .numerals import to_decimal
from .shares import Share, ShareBundle, point_set

_logger = logging.getLogger(__name__)

KEYS_ENTRY = "keys"


def _read_count(keys: Mapping[str, Any], name: str) -> int:
    value = keys.get(name)
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ShareFileError(f"'{KEYS_ENTRY}.{name}' must be an integer")
    try:
        return int(value)
    except ValueError as exc:
        raise ShareFileError(f"'{KEYS_ENTRY}.{name}' must be an integer, got {value!r}") from exc


def _read_share(key: str, entry: Any) -> Share:
    if not isinstance(entry, Mapping):
        raise ShareFileError(f"Share {key!r} must be an object with 'base' and 'value'")
    missing = [field for field in ("base", "value") if field not in entry]
    if missing:
        raise ShareFileError(f"Share {key!r} is missing {', '.join(missing)}")
    try:
        x = decode_digits(10, key)
        y = decode_digits(entry["base"], entry["value"])
    except ShareDecodeError as exc:
        raise ShareFileError(f"Share {key!r}: {exc}") from exc
    return Share(x, y)


def parse_bundle(document: Any, *, strict: Optional[bool] = None) -> ShareBundle:
    """Build a :class:`ShareBundle` from an already decoded JSON document."""
    if not isinstance(document, Mapping):
        raise ShareFileError("Share file must contain a JSON object")
    keys = document.get(KEYS_ENTRY)
    if not isinstance(keys, Mapping):
        raise ShareFileError(f"Share file has no '{KEYS_ENTRY}' object")

    n = _read_count(keys, "n")
    k = _read_count(keys, "k")
    shares = point_set(_read_share(key, entry) for key, entry in document.items() if key != KEYS_ENTRY)

    if n != len(shares):
        enforce = _policy.policy.strict if strict is None else strict
        if enforce:
            raise ShareCountMismatchError(n, len(shares))
        _logger.warning("Share file declares n=%s but contains %d shares", to_decimal(n), len(shares))
    _logger.info("Loaded %d shares with threshold k=%s", len(shares), to_decimal(k))
    return ShareBundle(n=n, k=k, shares=shares)


def load_bundle(path: os.PathLike[str] | str, *, strict: Optional[bool] = None) -> ShareBundle:
    """Read and parse the share file at ``path``."""
    try:
        document = json.loads(Path(path).read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise ShareFileError(f"{path}: not UTF-8 text ({exc})") from exc
    except ValueError as exc:
        raise ShareFileError(f"{path}: invalid JSON ({exc})") from exc
    return parse_bundle(document, strict=strict)


__all__ = ["load_bundle", "parse_bundle", "KEYS_ENTRY"]
