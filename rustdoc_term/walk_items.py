"""Logic for collecting documentable declarations from a Rust syntax tree."""

import logging

from tree_sitter import Node, Tree

from rustdoc_term.doc_item import DocCollection, FunctionDoc, ModuleDoc
from rustdoc_term.format_doc import format_doc
from rustdoc_term.format_signature import format_signature

logger = logging.getLogger(__name__)

# Functions declared in these bodies are associated items, not free functions.
ASSOCIATED_ITEM_PARENTS = {"impl_item", "trait_item"}


def walk_items(tree: Tree) -> DocCollection:
    """Visit every function and module depth-first, parents before children."""
    docs: DocCollection = []
    stack = [tree.root_node]
    while stack:
        node = stack.pop()
        if node.type == "function_item" and not _is_associated(node):
            docs.append(
                FunctionDoc(signature=format_signature(node), doc=format_doc(node))
            )
        elif node.type == "mod_item":
            name = node.child_by_field_name("name")
            ident = name.text.decode("utf-8") if name is not None else ""
            docs.append(ModuleDoc(ident=ident, doc=format_doc(node)))
        stack.extend(reversed(node.named_children))

    logger.debug("Collected %d documentable items", len(docs))
    return docs


def _is_associated(node: Node) -> bool:
    parent = node.parent
    return (
        parent is not None
        and parent.type == "declaration_list"
        and parent.parent is not None
        and parent.parent.type in ASSOCIATED_ITEM_PARENTS
    )
