"""Data models for documented Rust declarations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FunctionDoc:
    """Documentation attached to a free function."""

    signature: str  # e.g. "fn main()"
    doc: str  # raw Markdown, one line per doc attribute


@dataclass(frozen=True)
class ModuleDoc:
    """Documentation attached to a module declaration."""

    ident: str
    doc: str


DocItem = FunctionDoc | ModuleDoc

# Items in the order the walker visits them.
DocCollection = list[DocItem]
