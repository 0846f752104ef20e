"""Syntax highlighting of code blocks as 24-bit ANSI terminal text."""

from collections.abc import Iterable, Iterator
from functools import lru_cache
from typing import Any

from pygments.formatters import TerminalTrueColorFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from rustdoc_term.errors import ConfigError

ANSI_RESET = "\x1b[0m"

TokenLine = list[tuple[Any, str]]


@lru_cache(maxsize=None)
def get_lexer(language: str) -> Lexer:
    """Return the lexer for a language name, keeping blank lines intact."""
    try:
        return get_lexer_by_name(language, stripnl=False)
    except ClassNotFound as exc:
        msg = f"Unknown highlight language: {language!r}"
        raise ConfigError(msg) from exc


@lru_cache(maxsize=None)
def get_formatter(theme: str) -> TerminalTrueColorFormatter:
    """Return a 24-bit color terminal formatter for a Pygments style name."""
    try:
        return TerminalTrueColorFormatter(style=theme)
    except ClassNotFound as exc:
        msg = f"Unknown highlight theme: {theme!r}"
        raise ConfigError(msg) from exc


def iter_token_lines(
    tokens: Iterable[tuple[Any, str]],
) -> Iterator[TokenLine]:
    """Split a token stream into lines, each keeping its trailing newline."""
    line: TokenLine = []
    for ttype, value in tokens:
        parts = value.split("\n")
        for part in parts[:-1]:
            line.append((ttype, part + "\n"))
            yield line
            line = []
        if parts[-1]:
            line.append((ttype, parts[-1]))
    if line:
        yield line


def soften_reset(off: str) -> str:
    """Turn a token's closing escape into one that leaves other styling alone.

    Pygments ends bold, italic and underlined tokens with `00`, a full reset;
    only the attributes themselves are switched off here.
    """
    if not off:
        return off
    attrs = off[2:-1].split(";")
    if "00" not in attrs:
        return off
    attrs = [a for a in attrs if a != "00"] + ["22", "23", "24"]
    return "\x1b[" + ";".join(attrs) + "m"


def token_escapes(
    formatter: TerminalTrueColorFormatter, ttype: Any
) -> tuple[str, str]:
    """Return the opening and closing escapes for a token type, or empty strings."""
    while ttype:
        escapes = formatter.style_string.get(str(ttype))
        if escapes is not None:
            on, off = escapes
            return on, soften_reset(off)
        ttype = ttype.parent
    return "", ""


def format_line(line: TokenLine, formatter: TerminalTrueColorFormatter) -> str:
    """Write one line of tokens with 24-bit color escapes."""
    out = []
    for ttype, value in line:
        text = value.rstrip("\n")
        if text:
            on, off = token_escapes(formatter, ttype)
            out.append(f"{on}{text}{off}")
        out.append(value[len(text) :])
    return "".join(out)


def highlight_lines(code: str, language: str, theme: str) -> Iterator[str]:
    """Highlight a code block, yielding one escaped terminal line at a time."""
    if not code:
        return
    formatter = get_formatter(theme)
    for line in iter_token_lines(get_lexer(language).get_tokens(code)):
        yield format_line(line, formatter)
