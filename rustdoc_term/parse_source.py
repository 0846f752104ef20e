"""Logic for parsing Rust source into a tree-sitter syntax tree."""

import logging

import tree_sitter_rust
from tree_sitter import Language, Node, Parser, Tree

from rustdoc_term.errors import SourceParseError

logger = logging.getLogger(__name__)

RUST_LANGUAGE = Language(tree_sitter_rust.language())


def parse_source(source: str) -> Tree:
    """Parse Rust source, raising SourceParseError if it is not valid syntax."""
    parser = Parser(RUST_LANGUAGE)
    tree = parser.parse(source.encode("utf-8"))
    if tree.root_node.has_error:
        raise _parse_error(tree.root_node)
    logger.debug("Parsed %d bytes of Rust source", len(source.encode("utf-8")))
    return tree


def _parse_error(root: Node) -> SourceParseError:
    """Describe the first ERROR or missing node of a tree in pre-order."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            row, column = node.start_point
            if node.is_missing:
                message = f"missing '{node.type}'"
            else:
                snippet = node.text.decode("utf-8", errors="replace").splitlines()
                message = f"unexpected '{snippet[0] if snippet else ''}'"
            return SourceParseError(message, row + 1, column + 1)
        stack.extend(reversed(node.children))
    row, column = root.start_point
    return SourceParseError("invalid syntax", row + 1, column + 1)
