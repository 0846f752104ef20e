"""Logic for rendering collected doc items as terminal text blocks."""

import logging
from typing import Any

from rustdoc_term.doc_item import DocItem, FunctionDoc, ModuleDoc
from rustdoc_term.load_config import DEFAULT_CONFIG
from rustdoc_term.markdown_to_terminal import SEPARATOR, markdown_to_terminal

logger = logging.getLogger(__name__)


def heading_label(item: DocItem) -> str:
    """Return the text shown in an item's heading bar."""
    match item:
        case FunctionDoc():
            return "function"
        case ModuleDoc(ident=ident):
            return f"module {ident}"


def center_heading(label: str, width: int, fill: str) -> str:
    """Center a label in a bar of fill characters; odd padding goes right."""
    return f"{label:{fill}^{width}}"


def render_doc_item(item: DocItem, config: dict[str, Any] | None = None) -> str:
    """Render one item: heading bar, signature for functions, then the doc body."""
    config = config or DEFAULT_CONFIG
    heading = center_heading(
        heading_label(item),
        config["render"]["heading_width"],
        config["render"]["heading_fill"],
    )
    logger.debug("Rendering %s", heading_label(item))
    match item:
        case FunctionDoc(signature=signature, doc=doc):
            body = markdown_to_terminal(doc, config)
            return f"{heading}{SEPARATOR}{signature}{SEPARATOR}{body}"
        case ModuleDoc(doc=doc):
            return f"{heading}{SEPARATOR}{markdown_to_terminal(doc, config)}"


def render_docs(items: list[DocItem], config: dict[str, Any] | None = None) -> str:
    """Render every item in traversal order."""
    return "".join(render_doc_item(item, config) for item in items)
