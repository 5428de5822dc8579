#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_dom.py
"""Unit tests for HTML parsing into the node arena.

Tests cover:
- Implicit html/head/body insertion by the HTML5 tree builder
- Verbatim, ordered attribute values
- Doctype, comment and text nodes
- Dependency and parser failure reporting

"""

import pytest

from htom.dom import DomNode, DomTree, NodeKind, parse_html
from htom.exceptions import DependencyError, ParsingError


def _find(tree: DomTree, name: str) -> DomNode:
    for node in tree.nodes:
        if node.kind is NodeKind.ELEMENT and node.name == name:
            return node
    raise AssertionError(f"no <{name}> element in tree")


def _kinds(tree: DomTree, index: int) -> list[NodeKind]:
    return [child.kind for child in tree.children(index)]


@pytest.mark.unit
class TestDomTree:
    """Tests for the arena container."""

    def test_add_returns_sequential_indices(self) -> None:
        tree = DomTree()

        first = tree.add(DomNode(kind=NodeKind.DOCUMENT))
        second = tree.add(DomNode(kind=NodeKind.TEXT, content="x"))

        assert (first, second) == (0, 1)
        assert len(tree) == 2
        assert tree[1].content == "x"

    def test_children_yields_records(self) -> None:
        tree = DomTree()
        tree.root = tree.add(DomNode(kind=NodeKind.DOCUMENT))
        child = tree.add(DomNode(kind=NodeKind.ELEMENT, name="p"))
        tree[tree.root].children.append(child)

        assert [node.name for node in tree.children(tree.root)] == ["p"]


@pytest.mark.unit
class TestParseHtml:
    """Tests for parse_html."""

    def test_fragment_gets_document_skeleton(self) -> None:
        tree = parse_html("<p>x</p>")

        root = tree[tree.root]
        assert root.kind is NodeKind.DOCUMENT
        html = next(tree.children(tree.root))
        assert html.name == "html"
        assert [child.name for child in tree.children(root.children[0])] == ["head", "body"]

    def test_children_follow_document_order(self) -> None:
        tree = parse_html("<ul><li>one</li><li>two</li><li>three</li></ul>")

        ul = _find(tree, "ul")
        texts = [tree[item.children[0]].content for item in (tree[index] for index in ul.children)]
        assert texts == ["one", "two", "three"]

    def test_attribute_values_are_verbatim(self) -> None:
        tree = parse_html('<p class="  a   b " data-x="&amp;1">x</p>')

        assert _find(tree, "p").attributes == [("class", "  a   b "), ("data-x", "&1")]

    def test_attribute_order_is_preserved(self) -> None:
        tree = parse_html('<a href="/x" title="t" id="i" class="c">x</a>')

        assert [name for name, _ in _find(tree, "a").attributes] == ["href", "title", "id", "class"]

    def test_duplicate_attribute_keeps_first(self) -> None:
        tree = parse_html('<div id="first" id="second"></div>')

        assert _find(tree, "div").attributes == [("id", "first")]

    def test_namespaced_attribute_keeps_prefix(self) -> None:
        tree = parse_html('<svg><use xlink:href="#icon"></use></svg>')

        assert _find(tree, "use").attributes == [("xlink:href", "#icon")]

    def test_empty_attribute_value(self) -> None:
        tree = parse_html("<input disabled>")

        assert _find(tree, "input").attributes == [("disabled", "")]

    def test_tag_names_are_lowercased(self) -> None:
        tree = parse_html("<DIV><SPAN>x</SPAN></DIV>")

        assert _find(tree, "div").kind is NodeKind.ELEMENT
        assert _find(tree, "span").kind is NodeKind.ELEMENT

    def test_doctype_node(self) -> None:
        tree = parse_html("<!DOCTYPE html><p>x</p>")

        assert _kinds(tree, tree.root)[0] is NodeKind.DOCTYPE

    def test_comment_node(self) -> None:
        tree = parse_html("<div><!-- note --></div>")

        div = _find(tree, "div")
        comment = tree[div.children[0]]
        assert comment.kind is NodeKind.COMMENT
        assert comment.content == " note "

    def test_processing_instruction_becomes_comment(self) -> None:
        tree = parse_html('<div><?xml version="1.0"?></div>')

        assert _kinds(tree, tree.root).count(NodeKind.PROCESSING_INSTRUCTION) == 0
        assert all(node.kind is not NodeKind.PROCESSING_INSTRUCTION for node in tree.nodes)

    def test_entities_are_decoded_in_text(self) -> None:
        tree = parse_html("<p>a &amp; b&nbsp;c</p>")

        paragraph = _find(tree, "p")
        assert tree[paragraph.children[0]].content == "a & b\xa0c"

    def test_empty_input(self) -> None:
        tree = parse_html("")

        assert [node.name for node in tree.nodes if node.kind is NodeKind.ELEMENT] == ["html", "head", "body"]

    def test_head_content_stays_in_head(self) -> None:
        tree = parse_html("<title>T</title><p>B</p>")

        head = _find(tree, "head")
        assert [child.name for child in tree.children(tree.nodes.index(head))] == ["title"]


@pytest.mark.unit
class TestParseFailures:
    """Tests for errors raised by parse_html."""

    def test_missing_tree_builder(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from bs4.exceptions import FeatureNotFound

        def fake_soup(*args, **kwargs):
            raise FeatureNotFound("Couldn't find a tree builder with the features you requested: html5lib")

        monkeypatch.setattr("bs4.BeautifulSoup", fake_soup)

        with pytest.raises(DependencyError) as exc_info:
            parse_html("<p>x</p>")

        assert exc_info.value.converter_name == "html parser"
        assert exc_info.value.missing_packages == [("html5lib", "")]

    def test_parser_failure_is_wrapped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fake_soup(*args, **kwargs):
            raise ValueError("boom")

        monkeypatch.setattr("bs4.BeautifulSoup", fake_soup)

        with pytest.raises(ParsingError) as exc_info:
            parse_html("<p>x</p>")

        assert exc_info.value.parsing_stage == "parse"
        assert isinstance(exc_info.value.original_error, ValueError)
        assert "boom" in str(exc_info.value)

    def test_recursion_failure_is_wrapped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fake_soup(*args, **kwargs):
            raise RecursionError("maximum recursion depth exceeded")

        monkeypatch.setattr("bs4.BeautifulSoup", fake_soup)

        with pytest.raises(ParsingError, match="nested too deeply"):
            parse_html("<p>x</p>")
