# SPDX-FileCopyrightText: 2025 shamir-audit contributors
# SPDX-License-Identifier: MIT

"""Centralised runtime configuration.

Every tunable can be overridden through a ``SHAMIR_AUDIT_*`` environment
variable. Malformed values fall back to the default so that a typo in the
environment never prevents a reconstruction from running.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

STRATEGIES = ("first", "consensus")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in ("1", "true", "yes", "on"):
        return True
    if normalized in ("0", "false", "no", "off"):
        return False
    return default


def _load_choice(name: str, default: str, choices: tuple[str, ...], *, upper: bool = False) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    normalized = value.strip().upper() if upper else value.strip().lower()
    return normalized if normalized in choices else default


@dataclass(frozen=True)
class AuditPolicy:
    """Holds runtime tunables for reconstruction and auditing."""

    strategy: str = "first"
    max_bases: int = 2000
    strict: bool = False
    log_level: str = "WARNING"
    audit_dir: Optional[str] = None


def load_policy() -> AuditPolicy:
    """Load the policy considering environment overrides."""

    max_bases = _load_int("SHAMIR_AUDIT_MAX_BASES", 2000)
    return AuditPolicy(
        strategy=_load_choice("SHAMIR_AUDIT_STRATEGY", "first", STRATEGIES),
        max_bases=max_bases if max_bases > 0 else 2000,
        strict=_load_bool("SHAMIR_AUDIT_STRICT", False),
        log_level=_load_choice("SHAMIR_AUDIT_LOG_LEVEL", "WARNING", LOG_LEVELS, upper=True),
        audit_dir=os.environ.get("SHAMIR_AUDIT_DIR") or None,
    )


policy = load_policy()


__all__ = ["AuditPolicy", "policy", "load_policy", "STRATEGIES", "LOG_LEVELS"]
