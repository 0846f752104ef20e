"""Tests for rendering doc items as heading-delimited blocks."""

import copy

from conftest import strip_ansi

from rustdoc_term.doc_item import FunctionDoc, ModuleDoc
from rustdoc_term.load_config import DEFAULT_CONFIG
from rustdoc_term.render_doc_item import (
    center_heading,
    heading_label,
    render_doc_item,
    render_docs,
)

FUNCTION_BAR = "-" * 36 + "function" + "-" * 36


def test_heading_label() -> None:
    """Verify function and module headings."""
    assert heading_label(FunctionDoc(signature="fn main()", doc="")) == "function"
    assert heading_label(ModuleDoc(ident="foo", doc="")) == "module foo"


def test_center_heading_odd_padding_goes_right() -> None:
    """Verify centering matches a left-biased split of the padding."""
    assert center_heading("module ab", 20, "-") == "-----module ab------"
    assert center_heading("function", 80, "-") == FUNCTION_BAR


def test_center_heading_long_label_is_not_truncated() -> None:
    """Verify labels wider than the bar are kept whole."""
    assert center_heading("module very_long_name", 10, "-") == "module very_long_name"


def test_render_function_without_docs() -> None:
    """Verify an undocumented function renders heading, signature, empty body."""
    out = render_doc_item(FunctionDoc(signature="fn main()", doc=""))
    assert out == f"{FUNCTION_BAR}\n\nfn main()\n\n\n\n"


def test_render_module_has_no_signature_line() -> None:
    """Verify a module block is its centered heading followed by the body."""
    out = render_doc_item(ModuleDoc(ident="foo", doc="Module docs.\n"))
    heading = "-" * 35 + "module foo" + "-" * 35
    assert out == f"{heading}\n\nModule docs.\n\n\n\n"
    assert len(out.splitlines()[0]) == 80


def test_render_uses_configured_heading() -> None:
    """Verify heading width and fill come from the configuration."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    config["render"]["heading_width"] = 12
    config["render"]["heading_fill"] = "="
    out = render_doc_item(FunctionDoc(signature="fn f()", doc=""), config)
    assert out.startswith("==function==\n\nfn f()\n\n")


def test_render_docs_concatenates_in_order() -> None:
    """Verify blocks are joined in traversal order without extra separation."""
    items = [
        FunctionDoc(signature="fn first()", doc="One.\n"),
        ModuleDoc(ident="second", doc=""),
        FunctionDoc(signature="fn third()", doc="```\nlet z = 3;\n```\n"),
    ]
    out = render_docs(items)
    assert out == "".join(render_doc_item(item) for item in items)
    plain = strip_ansi(out)
    assert plain.index("fn first()") < plain.index("module second")
    assert plain.index("module second") < plain.index("fn third()")
    assert "let z = 3;" in plain
