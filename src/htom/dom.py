#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htom/dom.py
"""HTML parsing into an index-addressed node arena.

The HTML text is parsed by BeautifulSoup with the standards-compliant
html5lib tree builder, then copied into a flat arena of ``DomNode`` records.
Each record holds its kind, its payload and the indices of its children, so
the tree carries no parent pointers and no shared handles. Traversal order is
exactly the parser's document order.

Attribute names are kept as BeautifulSoup reports them. For foreign content
that means the qualified name with its prefix (``xlink:href``, ``xml:lang``)
rather than the bare local name, so the output attribute is the one written
in the source.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

from htom.constants import DEPS_HTML, HTML_PARSER_BACKEND
from htom.exceptions import DependencyError, ParsingError
from htom.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


class NodeKind(Enum):
    """Closed set of node kinds produced by the parser."""

    DOCUMENT = "document"
    DOCTYPE = "doctype"
    TEXT = "text"
    COMMENT = "comment"
    ELEMENT = "element"
    PROCESSING_INSTRUCTION = "processing_instruction"


@dataclass
class DomNode:
    """One node of the arena.

    Parameters
    ----------
    kind : NodeKind
        The node variant
    name : str
        Tag name for elements, empty otherwise
    attributes : list of tuple
        Ordered (name, value) pairs for elements
    content : str
        Text for text, comment, doctype and processing instruction nodes
    children : list of int
        Arena indices of the child nodes, in document order

    """

    kind: NodeKind
    name: str = ""
    attributes: list[tuple[str, str]] = field(default_factory=list)
    content: str = ""
    children: list[int] = field(default_factory=list)


@dataclass
class DomTree:
    """Arena of parsed nodes; ``root`` is the document node's index."""

    nodes: list[DomNode] = field(default_factory=list)
    root: int = 0

    def add(self, node: DomNode) -> int:
        """Append a node and return its index."""
        self.nodes.append(node)
        return len(self.nodes) - 1

    def __getitem__(self, index: int) -> DomNode:
        return self.nodes[index]

    def __len__(self) -> int:
        return len(self.nodes)

    def children(self, index: int) -> Iterator[DomNode]:
        """Iterate the child records of the node at ``index``."""
        for child in self.nodes[index].children:
            yield self.nodes[child]


def _attribute_value(value: Any) -> str:
    # multi_valued_attributes is disabled, but other builders may still hand back lists
    if isinstance(value, (list, tuple)):
        return " ".join(str(part) for part in value)
    return str(value)


def _node_from_soup(item: Any) -> DomNode:
    from bs4 import BeautifulSoup
    from bs4.element import (
        CData,
        Comment,
        Declaration,
        Doctype,
        NavigableString,
        ProcessingInstruction,
        Tag,
    )

    if isinstance(item, BeautifulSoup):
        return DomNode(kind=NodeKind.DOCUMENT)
    if isinstance(item, Tag):
        attributes = [(str(name), _attribute_value(value)) for name, value in item.attrs.items()]
        return DomNode(kind=NodeKind.ELEMENT, name=item.name, attributes=attributes)
    if isinstance(item, Doctype):
        return DomNode(kind=NodeKind.DOCTYPE, content=str(item))
    if isinstance(item, Comment):
        return DomNode(kind=NodeKind.COMMENT, content=str(item))
    if isinstance(item, (ProcessingInstruction, Declaration)):
        return DomNode(kind=NodeKind.PROCESSING_INSTRUCTION, content=str(item))
    if isinstance(item, (CData, NavigableString)):
        return DomNode(kind=NodeKind.TEXT, content=str(item))

    raise ParsingError(f"Unsupported parser node type: {type(item).__name__}", parsing_stage="tree")


def build_tree(soup: Any) -> DomTree:
    """Copy a BeautifulSoup document into a ``DomTree`` arena.

    The copy is iterative, so arbitrarily deep documents do not exhaust the
    interpreter stack here.

    Parameters
    ----------
    soup : BeautifulSoup
        Parsed document

    Returns
    -------
    DomTree
        Arena whose root is the document node

    """
    tree = DomTree()
    tree.root = tree.add(_node_from_soup(soup))

    pending: list[tuple[Any, int]] = [(soup, tree.root)]
    while pending:
        source, index = pending.pop()
        for child in getattr(source, "contents", ()):
            child_index = tree.add(_node_from_soup(child))
            tree[index].children.append(child_index)
            if tree[child_index].kind is NodeKind.ELEMENT:
                pending.append((child, child_index))

    return tree


@requires_dependencies("html parser", DEPS_HTML)
def parse_html(html_text: str) -> DomTree:
    """Parse HTML text into a ``DomTree``.

    Parameters
    ----------
    html_text : str
        The HTML document or fragment. Fragments are completed by the HTML5
        tree construction rules, so ``<p>x</p>`` yields ``html``, ``head``
        and ``body`` elements around the paragraph.

    Returns
    -------
    DomTree
        The parsed arena

    Raises
    ------
    DependencyError
        If BeautifulSoup or html5lib is not installed
    ParsingError
        If the parser fails on the input

    """
    from bs4 import BeautifulSoup
    from bs4.exceptions import FeatureNotFound

    try:
        soup = BeautifulSoup(html_text, HTML_PARSER_BACKEND, multi_valued_attributes=None)
    except FeatureNotFound as e:
        raise DependencyError(
            converter_name="html parser",
            missing_packages=[(HTML_PARSER_BACKEND, "")],
            message=f"BeautifulSoup could not find the {HTML_PARSER_BACKEND} tree builder: {e}",
        ) from e
    except RecursionError as e:
        raise ParsingError(
            "HTML is nested too deeply to parse", parsing_stage="parse", original_error=e
        ) from e
    except Exception as e:
        raise ParsingError(f"Failed to parse HTML: {e}", parsing_stage="parse", original_error=e) from e

    tree = build_tree(soup)
    logger.debug(f"Parsed HTML into {len(tree)} nodes")
    return tree
