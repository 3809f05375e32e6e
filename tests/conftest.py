"""Shared test fixtures for scalgo.

Sample documents shared by the parser, formatter, serializer and CLI
tests.
"""
from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_SOURCE = "Label 1: 3.14 years\nLabel 2: 42 days\nLabel 3: 1.5 hours"


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "scalgo"


@pytest.fixture()
def expected_version() -> str:
    """Version string that ``scalgo.__version__`` must report."""
    return "0.1.0"


@pytest.fixture()
def sample_source() -> str:
    """Three time records, not in sorted order."""
    return SAMPLE_SOURCE


@pytest.fixture()
def sample_file(tmp_path: Path) -> Path:
    """``sample_source`` written to a temporary file."""
    path = tmp_path / "durations.txt"
    path.write_text(SAMPLE_SOURCE + "\n", encoding="utf-8")
    return path
