"""Orchestration logic for documenting one Rust source file."""

from pathlib import Path
from typing import Any

from rustdoc_term.parse_source import parse_source
from rustdoc_term.render_doc_item import render_docs
from rustdoc_term.walk_items import walk_items


def document_source(source: str, config: dict[str, Any] | None = None) -> str:
    """Parse Rust source and render the docs of its functions and modules."""
    tree = parse_source(source)
    return render_docs(walk_items(tree), config)


def document_file(path: Path, config: dict[str, Any] | None = None) -> str:
    """Read a Rust file and render its documentation."""
    return document_source(path.read_text(encoding="utf-8"), config)
