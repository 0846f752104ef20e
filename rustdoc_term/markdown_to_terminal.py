"""Convert doc comment Markdown into terminal text.

Only paragraphs, headings and code blocks are rendered. Code blocks are buffered
until they end and then highlighted as a whole; everything else is copied through.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from rustdoc_term.errors import UnsupportedMarkdownError
from rustdoc_term.highlight_code import ANSI_RESET, highlight_lines
from rustdoc_term.load_config import DEFAULT_CONFIG
from rustdoc_term.markdown_events import (
    CODE_BLOCK,
    END,
    HEADING,
    PARAGRAPH,
    START,
    TEXT,
    MarkdownEvent,
    iter_markdown_events,
)

logger = logging.getLogger(__name__)

SEPARATOR = "\n\n"


@dataclass
class MarkdownRenderState:
    """Whether we are inside a code block, and the code seen so far."""

    in_code_block: bool = False
    code: list[str] = field(default_factory=list)

    def target(self, out: list[str]) -> list[str]:
        """Return the buffer that text goes to in the current state."""
        return self.code if self.in_code_block else out


def markdown_to_terminal(doc: str, config: dict[str, Any] | None = None) -> str:
    """Render a raw doc string for the terminal."""
    config = config or DEFAULT_CONFIG
    marker = config["markdown"]["heading_marker"]
    on_unsupported = config["markdown"]["on_unsupported"]
    language = config["highlight"]["language"]
    theme = config["highlight"]["theme"]

    state = MarkdownRenderState()
    out: list[str] = []

    for event in iter_markdown_events(doc):
        if event.kind == TEXT:
            state.target(out).append(event.text)
        elif event.kind == START and event.tag == PARAGRAPH:
            pass
        elif event.kind == END and event.tag == PARAGRAPH:
            state.target(out).append(SEPARATOR)
        elif event.kind == START and event.tag == HEADING:
            out.append(f"{SEPARATOR}{marker * event.level} ")
        elif event.kind == END and event.tag == HEADING:
            out.append(SEPARATOR)
        elif event.kind == START and event.tag == CODE_BLOCK:
            state.in_code_block = True
        elif event.kind == END and event.tag == CODE_BLOCK:
            state.in_code_block = False
            out.extend(highlight_lines("".join(state.code), language, theme))
            out.append(ANSI_RESET + SEPARATOR)
            state.code.clear()
        else:
            _handle_unsupported(event, on_unsupported)

    out.append(SEPARATOR)
    return "".join(out)


def _handle_unsupported(event: MarkdownEvent, on_unsupported: str) -> None:
    if on_unsupported == "skip":
        logger.warning("Skipping unsupported Markdown construct: %s", event.tag)
        return
    raise UnsupportedMarkdownError(event.tag)
