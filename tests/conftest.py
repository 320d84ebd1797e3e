"""Shared fixtures: gzip input files built in a temp directory."""

from __future__ import annotations

import gzip
from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

SCENARIO_LINES = [
    "a;b;c",
    "a;d;e",
    "f;b;g",
    "h;i;j",
]


@pytest.fixture
def make_gzip(tmp_path: Path) -> Callable[[Iterable[str]], Path]:
    """Return a factory writing lines to a gzip file under tmp_path."""
    counter = 0

    def _make(lines: Iterable[str], name: str | None = None) -> Path:
        nonlocal counter
        counter += 1
        path = tmp_path / (name or f"input_{counter}.txt.gz")
        with gzip.open(path, "wt", encoding="utf-8") as fh:
            for line in lines:
                fh.write(f"{line}\n")
        return path

    return _make


@pytest.fixture
def scenario_lines() -> list[str]:
    """Lines 0-2 are linked through shared fields, line 3 is isolated."""
    return list(SCENARIO_LINES)
