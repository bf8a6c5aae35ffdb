"""
Shared test fixtures.

Provides pytest fixtures for common test resources including:
- An isolated working directory and environment for configuration
- A CSV writer for building input files
- Sample score ranges
"""

import csv
import os
from pathlib import Path
from typing import Iterable, Sequence

import pytest

from responsive_text.models.entities import ScoreRange


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch):
    """
    Run every test from a temporary directory with no RESPONSIVE_TEXT_*
    variables, so no stray .env, responsive.yaml or environment leaks
    into Config.
    """
    for key in list(os.environ):
        if key.upper().startswith("RESPONSIVE_TEXT_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def write_csv(tmp_path: Path):
    """
    Factory writing a headed CSV file into the temporary directory.

    Returns:
        Callable (rows, header=("token", "score", "keep"), name="input.csv") -> Path
    """
    def _write(
        rows: Iterable[Sequence[str]],
        header: Sequence[str] = ("token", "score", "keep"),
        name: str = "input.csv",
        delimiter: str = ",",
    ) -> Path:
        path = tmp_path / name
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f, delimiter=delimiter)
            writer.writerow(header)
            writer.writerows(rows)
        return path

    return _write


@pytest.fixture
def foo_bar_baz_csv(write_csv) -> Path:
    """The three-token example: foo=1, bar=5, baz=10, none ignored."""
    return write_csv([
        ("foo", "1.0", "y"),
        ("bar", "5.0", "y"),
        ("baz", "10.0", "y"),
    ])


@pytest.fixture
def one_to_ten() -> ScoreRange:
    return ScoreRange(min=1.0, max=10.0)
