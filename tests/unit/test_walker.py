#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_walker.py
"""Unit tests for the tree walker.

The trees here are assembled by hand so that placement, indentation and
node-kind handling can be checked without going through the HTML parser.
"""

import pytest

from htom.dom import DomNode, DomTree, NodeKind
from htom.exceptions import RenderingError
from htom.options import IdStyle, MaudConfig
from htom.renderer import MaudDocument, Placement
from htom.walker import is_void_element, walk


def _element(tree: DomTree, parent: int, name: str, attributes=None) -> int:
    index = tree.add(DomNode(kind=NodeKind.ELEMENT, name=name, attributes=list(attributes or [])))
    tree[parent].children.append(index)
    return index


def _leaf(tree: DomTree, parent: int, kind: NodeKind, content: str) -> int:
    index = tree.add(DomNode(kind=kind, content=content))
    tree[parent].children.append(index)
    return index


def _document() -> DomTree:
    tree = DomTree()
    tree.root = tree.add(DomNode(kind=NodeKind.DOCUMENT))
    return tree


def _skeleton() -> tuple[DomTree, int, int]:
    """Return a document with empty html/head/body elements and the head and body indices."""
    tree = _document()
    html = _element(tree, tree.root, "html")
    head = _element(tree, html, "head")
    body = _element(tree, html, "body")
    return tree, head, body


def _walk(tree: DomTree, config: MaudConfig | None = None) -> MaudDocument:
    doc = MaudDocument()
    walk(config or MaudConfig(), 0, tree, tree.root, doc, Placement.OTHER)
    return doc


@pytest.mark.unit
class TestVoidElements:
    """Tests for the void element set."""

    @pytest.mark.parametrize(
        "tag",
        ["area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "param", "source", "track", "wbr"],
    )
    def test_void(self, tag: str) -> None:
        assert is_void_element(tag)

    @pytest.mark.parametrize("tag", ["div", "p", "script", "textarea", "template", "BR"])
    def test_not_void(self, tag: str) -> None:
        assert not is_void_element(tag)


@pytest.mark.unit
class TestPlacement:
    """Tests for routing lines into the head and body buffers."""

    def test_empty_skeleton_produces_no_lines(self) -> None:
        tree, _, _ = _skeleton()

        doc = _walk(tree)

        assert doc.head == []
        assert doc.body == []

    def test_body_children_start_at_zero_indent(self) -> None:
        tree, _, body = _skeleton()
        paragraph = _element(tree, body, "p")
        _leaf(tree, paragraph, NodeKind.TEXT, "Hello")

        doc = _walk(tree)

        assert doc.body == ["p {", '    "Hello"', "}"]
        assert doc.head == []

    def test_head_children_go_to_head_buffer(self) -> None:
        tree, head, _ = _skeleton()
        title = _element(tree, head, "title")
        _leaf(tree, title, NodeKind.TEXT, "Hi")
        _element(tree, head, "meta", [("charset", "utf-8")])

        doc = _walk(tree)

        assert doc.head == ["title {", '    "Hi"', "}", 'meta charset="utf-8";']
        assert doc.body == []

    def test_lines_outside_head_and_body_are_discarded(self) -> None:
        tree = _document()
        _element(tree, tree.root, "p")

        doc = _walk(tree)

        assert doc.head == []
        assert doc.body == []

    def test_nested_body_restarts_indentation(self) -> None:
        tree = _document()
        outer = _element(tree, tree.root, "section")
        body = _element(tree, outer, "body")
        _element(tree, body, "hr")

        doc = _walk(tree)

        assert doc.body == ["hr;"]

    def test_head_and_body_lines_are_not_emitted(self) -> None:
        tree, head, body = _skeleton()
        _element(tree, body, "br")

        doc = _walk(tree)

        assert all(not line.startswith(("head", "body")) for line in doc.body)


@pytest.mark.unit
class TestElements:
    """Tests for element opening and closing lines."""

    def test_nested_blocks_indent_by_four(self) -> None:
        tree, _, body = _skeleton()
        outer = _element(tree, body, "div", [("id", "a")])
        inner = _element(tree, outer, "span")
        _leaf(tree, inner, NodeKind.TEXT, "x")

        doc = _walk(tree)

        assert doc.body == [
            'div id="a" {',
            "    span {",
            '        "x"',
            "    }",
            "}",
        ]

    def test_void_element_has_no_closing_line(self) -> None:
        tree, _, body = _skeleton()
        _element(tree, body, "img", [("src", "a.png"), ("alt", "")])

        doc = _walk(tree)

        assert doc.body == ['img src="a.png" alt;']

    def test_empty_non_void_element_still_opens_and_closes(self) -> None:
        tree, _, body = _skeleton()
        _element(tree, body, "div")

        doc = _walk(tree)

        assert doc.body == ["div {", "}"]

    def test_config_applies_to_every_element(self) -> None:
        tree, _, body = _skeleton()
        outer = _element(tree, body, "div", [("id", "outer")])
        _element(tree, outer, "div", [("id", "inner")])

        doc = _walk(tree, MaudConfig(id_style=IdStyle.SHORT_NO_DIV))

        assert doc.body == ["#outer {", "    #inner {", "    }", "}"]

    def test_siblings_keep_document_order_across_depths(self) -> None:
        tree, _, body = _skeleton()
        first = _element(tree, body, "ul")
        _leaf(tree, _element(tree, first, "li"), NodeKind.TEXT, "one")
        _leaf(tree, _element(tree, first, "li"), NodeKind.TEXT, "two")
        _element(tree, body, "hr")

        doc = _walk(tree)

        assert doc.body == [
            "ul {",
            "    li {",
            '        "one"',
            "    }",
            "    li {",
            '        "two"',
            "    }",
            "}",
            "hr;",
        ]

    def test_nesting_beyond_recursion_limit(self) -> None:
        depth = 5000
        tree, _, parent = _skeleton()
        for _ in range(depth):
            parent = _element(tree, parent, "span")
        _leaf(tree, parent, NodeKind.TEXT, "deep")

        doc = _walk(tree)

        assert len(doc.body) == 2 * depth + 1
        assert doc.body[depth] == " " * (4 * depth) + '"deep"'
        assert doc.body[-1] == "}"


@pytest.mark.unit
class TestLeafNodes:
    """Tests for text, comment, doctype and processing instruction nodes."""

    def test_text_is_stripped_and_quoted(self) -> None:
        tree, _, body = _skeleton()
        _leaf(tree, body, NodeKind.TEXT, "\n   Hello world  \n")

        doc = _walk(tree)

        assert doc.body == ['"Hello world"']

    def test_whitespace_only_text_is_dropped(self) -> None:
        tree, _, body = _skeleton()
        _leaf(tree, body, NodeKind.TEXT, " \n\t ")

        assert _walk(tree).body == []

    def test_text_is_escaped(self) -> None:
        tree, _, body = _skeleton()
        _leaf(tree, body, NodeKind.TEXT, 'He said "it\'s\\ok"')

        doc = _walk(tree)

        assert doc.body == ['"He said \\"it\\\'s\\\\ok\\""']

    def test_interior_newlines_are_escaped(self) -> None:
        tree, _, body = _skeleton()
        _leaf(tree, body, NodeKind.TEXT, "line one\nline two")

        assert _walk(tree).body == ['"line one\\nline two"']

    def test_comments_and_doctype_are_dropped(self) -> None:
        tree = _document()
        _leaf(tree, tree.root, NodeKind.DOCTYPE, "html")
        html = _element(tree, tree.root, "html")
        body = _element(tree, html, "body")
        _leaf(tree, body, NodeKind.COMMENT, " note ")
        _element(tree, body, "br")

        doc = _walk(tree)

        assert doc.body == ["br;"]

    def test_processing_instruction_raises(self) -> None:
        tree, _, body = _skeleton()
        _leaf(tree, body, NodeKind.PROCESSING_INSTRUCTION, "xml version='1.0'")

        with pytest.raises(RenderingError) as exc_info:
            _walk(tree)

        assert exc_info.value.node_kind == "processing_instruction"
