"""Flatten markdown-it tokens into a simple start/end/text event stream."""

from collections.abc import Iterator
from dataclasses import dataclass

from markdown_it import MarkdownIt
from markdown_it.token import Token

START = "start"
END = "end"
TEXT = "text"
UNSUPPORTED = "unsupported"

PARAGRAPH = "paragraph"
HEADING = "heading"
CODE_BLOCK = "code_block"

# Leaf constructs whose content is still shown when they are skipped.
TEXT_BEARING = {"code_inline", "image"}

# Friendlier names for the constructs that are reported as unsupported.
CONSTRUCT_NAMES = {
    "code_inline": "inline code",
    "html_inline": "inline html",
    "html_block": "html block",
    "softbreak": "soft break",
    "hardbreak": "hard break",
    "hr": "horizontal rule",
}

_md = MarkdownIt("commonmark")


@dataclass(frozen=True)
class MarkdownEvent:
    """One step of a parsed Markdown document."""

    kind: str  # start/end/text/unsupported
    tag: str = ""  # paragraph/heading/code_block, or the unsupported construct
    level: int = 0  # heading level
    text: str = ""


def iter_markdown_events(text: str) -> Iterator[MarkdownEvent]:
    """Parse Markdown and yield its events in document order."""
    for token in _md.parse(text):
        if token.type == "inline":
            yield from _inline_events(token.children or [])
        elif token.type in ("fence", "code_block"):
            yield MarkdownEvent(START, CODE_BLOCK)
            yield MarkdownEvent(TEXT, text=token.content)
            yield MarkdownEvent(END, CODE_BLOCK)
        elif token.type == "paragraph_open":
            yield MarkdownEvent(START, PARAGRAPH)
        elif token.type == "paragraph_close":
            yield MarkdownEvent(END, PARAGRAPH)
        elif token.type == "heading_open":
            yield MarkdownEvent(START, HEADING, level=_heading_level(token))
        elif token.type == "heading_close":
            yield MarkdownEvent(END, HEADING, level=_heading_level(token))
        else:
            yield from _unsupported(token)


def _inline_events(children: list[Token]) -> Iterator[MarkdownEvent]:
    for child in children:
        if child.type == "text":
            yield MarkdownEvent(TEXT, text=child.content)
        else:
            yield from _unsupported(child)


def _unsupported(token: Token) -> Iterator[MarkdownEvent]:
    # Containers are reported once, at their opening token.
    if token.nesting < 0:
        return
    name = CONSTRUCT_NAMES.get(token.type, token.type.removesuffix("_open"))
    yield MarkdownEvent(UNSUPPORTED, name)
    if token.type in TEXT_BEARING and token.content:
        yield MarkdownEvent(TEXT, text=token.content)


def _heading_level(token: Token) -> int:
    """Turn a heading tag such as `h2` into its level."""
    return int(token.tag[1:])
