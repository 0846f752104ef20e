"""Logic for extracting the outer doc comments attached to a declaration.

Rust turns every doc comment into an attribute of the form `#[doc = "text"]` before
anything else sees it, so `/// Example` and `#[doc = " Example"]` are the same thing.
Outer doc comments (`///`, `/** */`) document the item that follows them; inner doc
comments (`//!`, `/*! */`) document the scope they appear in and are ignored here.

tree-sitter keeps comments and attributes as siblings in front of the item rather
than attaching them, so the attached run is found by scanning backwards.
"""

from tree_sitter import Node

COMMENT_KINDS = {"line_comment", "block_comment", "comment"}
ATTACHED_KINDS = COMMENT_KINDS | {"attribute_item"}

STRING_LITERAL_KINDS = {"string_literal", "raw_string_literal"}

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def format_doc(node: Node) -> str:
    """Concatenate the outer doc lines attached to a declaration, in source order."""
    return "".join(f"{strip_doc_literal(lit)}\n" for lit in outer_doc_literals(node))


def outer_doc_literals(node: Node) -> list[str]:
    """Return the string literals of the outer doc attributes in front of a node."""
    literals: list[str] = []
    sibling = node.prev_named_sibling
    while sibling is not None and sibling.type in ATTACHED_KINDS:
        if sibling.type in COMMENT_KINDS:
            text = sibling.text.decode("utf-8")
            if _is_inner_doc_comment(text):
                break
            body = _outer_doc_comment_body(text)
            if body is not None:
                literals.append(doc_literal(body))
        else:
            literal = _doc_attribute_literal(sibling)
            if literal is not None:
                literals.append(literal)
        sibling = sibling.prev_named_sibling
    literals.reverse()
    return literals


def doc_literal(body: str) -> str:
    """Write a doc comment body the way its `#[doc = ...]` string literal reads."""
    return '"' + "".join(_ESCAPES.get(ch, ch) for ch in body) + '"'


def strip_doc_literal(literal: str) -> str:
    """Strip the quotes and the leading space from a doc string literal.

    The second character is always assumed to be a space, so a comment written
    without one (`///Text`) loses its first real character.
    """
    text = literal[1:]  # opening quote
    text = text[1:]  # leading space
    if text:
        text = text[:-1]  # closing quote
    return text


def _is_inner_doc_comment(text: str) -> bool:
    return text.startswith(("//!", "/*!"))


def _outer_doc_comment_body(text: str) -> str | None:
    """Return the body of an outer doc comment, or None for ordinary comments."""
    if text.startswith("///") and not text.startswith("////"):
        return text[3:].rstrip("\r\n")
    if (
        text.startswith("/**")
        and not text.startswith(("/***", "/**/"))
        and text.endswith("*/")
    ):
        return text[3:-2]
    return None


def _doc_attribute_literal(item: Node) -> str | None:
    """Return the literal of a `#[doc = "..."]` attribute item as written in source."""
    attribute = next((c for c in item.named_children if c.type == "attribute"), None)
    if attribute is None or not attribute.named_children:
        return None
    path = attribute.named_children[0]
    if path.text.decode("utf-8") != "doc":
        return None
    value = attribute.child_by_field_name("value")
    if value is None or value.type not in STRING_LITERAL_KINDS:
        return None
    return value.text.decode("utf-8")
