"""Shared fixtures for the test suite."""

import re
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove ANSI color escapes from rendered output."""
    return ANSI_ESCAPE_RE.sub("", text)


@pytest.fixture
def showcase_path() -> Path:
    """Path to a small Rust file with nested functions and modules."""
    return FIXTURES / "showcase.rs"
