"""Test configuration helpers."""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest


def _ensure_src_on_path() -> None:
    src = Path(__file__).resolve().parent.parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


_ensure_src_on_path()


def line_shares(secret: int, slope: int, xs):
    return [(x, secret + slope * x) for x in xs]


@pytest.fixture
def line_points():
    """Shares of P(x) = 5 + 3x at x = 1, 2, 3."""
    return line_shares(5, 3, [1, 2, 3])


@pytest.fixture
def share_file(tmp_path):
    def _write(document) -> Path:
        path = tmp_path / "input.json"
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write
