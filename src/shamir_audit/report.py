# SPDX-FileCopyrightText: 2025 shamir-audit contributors
# SPDX-License-Identifier: MIT

"""Text and JSON renderings of a :class:`ReconstructionResult`."""

from __future__ import annotations

import json

from .numerals import to_decimal
from .shares import ReconstructionResult


def to_hex(value: int) -> str:
    return f"-{-value:x}" if value < 0 else f"{value:x}"


def render_report(result: ReconstructionResult) -> str:
    lines = [
        f"Reconstructed secret (decimal): {to_decimal(result.secret)}",
        f"Reconstructed secret (hex): {to_hex(result.secret)}",
    ]
    if result.consistent:
        lines.append("All shares consistent.")
    else:
        lines.append("Possibly corrupt shares:")
        lines.extend(f"  {share}" for share in result.bad_shares)
    return "\n".join(lines)


def render_json(result: ReconstructionResult) -> str:
    # integers as strings
    payload = {
        "secret": to_decimal(result.secret),
        "secret_hex": to_hex(result.secret),
        "bad_shares": [{"x": to_decimal(share.x), "y": to_decimal(share.y)} for share in result.bad_shares],
    }
    return json.dumps(payload, ensure_ascii=False, indent=2)


__all__ = ["render_report", "render_json", "to_hex"]
