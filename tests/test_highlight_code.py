"""Tests for terminal syntax highlighting."""

import pytest
from conftest import strip_ansi
from pygments.token import Keyword, Text

from rustdoc_term.errors import ConfigError
from rustdoc_term.highlight_code import (
    get_formatter,
    highlight_lines,
    iter_token_lines,
    soften_reset,
)


def test_iter_token_lines_splits_on_newlines() -> None:
    """Verify tokens spanning lines are split and keep their newlines."""
    tokens = [(Keyword, "let"), (Text, " a\nb"), (Text, "c\n")]
    assert list(iter_token_lines(tokens)) == [
        [(Keyword, "let"), (Text, " a\n")],
        [(Text, "b"), (Text, "c\n")],
    ]


def test_iter_token_lines_without_trailing_newline() -> None:
    """Verify a last line without a newline is still yielded."""
    assert list(iter_token_lines([(Text, "x")])) == [[(Text, "x")]]


def test_highlight_lines_one_escaped_line_per_source_line() -> None:
    """Verify each source line is highlighted separately with 24-bit color."""
    lines = list(highlight_lines("let a = 1;\nlet b = 2;\n", "rust", "monokai"))
    assert len(lines) == 2
    assert all("\x1b[38;2;" in line for line in lines)
    assert [strip_ansi(line) for line in lines] == ["let a = 1;\n", "let b = 2;\n"]


def test_highlight_lines_unknown_language() -> None:
    """Verify an unknown language name is a configuration error."""
    with pytest.raises(ConfigError):
        list(highlight_lines("x\n", "no-such-language", "monokai"))


def test_get_formatter_unknown_theme() -> None:
    """Verify an unknown style name is a configuration error."""
    with pytest.raises(ConfigError):
        get_formatter("no-such-theme")


def test_soften_reset() -> None:
    """Verify only a full `00` reset is replaced by attribute resets."""
    assert soften_reset("\x1b[39;00m") == "\x1b[39;22;23;24m"
    assert soften_reset("\x1b[00m") == "\x1b[22;23;24m"
    assert soften_reset("\x1b[39m") == "\x1b[39m"
    assert soften_reset("") == ""


def test_highlight_lines_bold_theme_has_no_full_reset() -> None:
    """Verify bold tokens are closed without resetting everything."""
    out = "".join(highlight_lines("let x = 1;\n", "rust", "nord"))
    assert ";00m" not in out
    assert "[00m" not in out
    assert "\x1b[0m" not in out
    assert "22;23;24" in out
    assert strip_ansi(out) == "let x = 1;\n"


def test_highlight_lines_empty_code() -> None:
    """Verify an empty block yields no lines."""
    assert list(highlight_lines("", "rust", "monokai")) == []
