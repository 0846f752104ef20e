"""Tests for parsing Rust source."""

import pytest

from rustdoc_term.errors import SourceParseError
from rustdoc_term.parse_source import parse_source


def test_parse_source_valid() -> None:
    """Verify valid source parses into a source_file tree."""
    tree = parse_source("fn main() {}\n")
    assert tree.root_node.type == "source_file"
    assert not tree.root_node.has_error


def test_parse_source_invalid_reports_position() -> None:
    """Verify invalid syntax raises with a 1-based position."""
    with pytest.raises(SourceParseError) as excinfo:
        parse_source("fn ok() {}\n\nfn broken( {\n")
    err = excinfo.value
    assert err.line >= 1
    assert err.column >= 1
    assert f"line {err.line}, column {err.column}" in str(err)
