"""Utility for rendering a function declaration as a short signature."""

from tree_sitter import Node


def format_signature(node: Node) -> str:
    """Render a function_item as `fn <name>()`.

    Parameters, return types, generics and where clauses are left out.
    """
    name = node.child_by_field_name("name")
    ident = name.text.decode("utf-8") if name is not None else ""
    return f"fn {ident}()"
