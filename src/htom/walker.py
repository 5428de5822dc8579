#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htom/walker.py
"""Depth-first traversal of the parsed tree into Maud lines.

``walk`` visits every node of a ``DomTree`` in document order, carrying the
current indentation and the placement (head, body or neither) on an explicit
stack, and appends formatted lines to a ``MaudDocument``.

Entering ``<head>`` or ``<body>`` switches the placement and restarts the
indentation of their children at zero: the two buffers are re-indented
independently by the renderer, whatever depth those elements sit at in the
source.

"""

from __future__ import annotations

import logging
from typing import NamedTuple

from htom.constants import (
    BLOCK_CLOSE,
    BLOCK_OPEN_TERMINATOR,
    BODY_TAG,
    HEAD_TAG,
    INDENT_WIDTH,
    VOID_ELEMENTS,
    VOID_TERMINATOR,
)
from htom.dom import DomNode, DomTree, NodeKind
from htom.element import Element, format_element
from htom.exceptions import RenderingError
from htom.options import MaudConfig
from htom.renderer import MaudDocument, Placement
from htom.utils.text import escape_string_literal

logger = logging.getLogger(__name__)

_PLACEMENT_BY_TAG = {
    HEAD_TAG: Placement.HEAD,
    BODY_TAG: Placement.BODY,
}


def is_void_element(tag_name: str) -> bool:
    """Return True for elements that take no children and no closing line."""
    return tag_name in VOID_ELEMENTS


def _pad(indent: int) -> str:
    return " " * indent


class _Frame(NamedTuple):
    """One pending step of the traversal; ``node_id`` is None for a block close."""

    node_id: int | None
    indent: int
    placement: Placement


def _push_children(stack: list[_Frame], node: DomNode, indent: int, placement: Placement) -> None:
    # reversed so the first child is popped first
    for child in reversed(node.children):
        stack.append(_Frame(child, indent, placement))


def _walk_text(indent: int, node: DomNode, doc: MaudDocument, placement: Placement) -> None:
    text = node.content.strip()
    if text:
        doc.push(placement, f'{_pad(indent)}"{escape_string_literal(text)}"')


def _open_element(
    config: MaudConfig, stack: list[_Frame], node: DomNode, indent: int, doc: MaudDocument, placement: Placement
) -> None:
    element = Element.from_attributes(node.name, node.attributes)
    void = is_void_element(node.name)

    terminator = VOID_TERMINATOR if void else BLOCK_OPEN_TERMINATOR
    doc.push(placement, f"{_pad(indent)}{format_element(element, config)}{terminator}")

    if not void:
        # popped after every child, into the same buffer as the opening line
        stack.append(_Frame(None, indent, placement))

    child_placement = _PLACEMENT_BY_TAG.get(node.name)
    if child_placement is None:
        _push_children(stack, node, indent + INDENT_WIDTH, placement)
    else:
        _push_children(stack, node, 0, child_placement)


def walk(
    config: MaudConfig, indent: int, tree: DomTree, node_id: int, doc: MaudDocument, placement: Placement
) -> None:
    """Append the Maud lines for the subtree at ``node_id`` to ``doc``.

    The traversal keeps its own stack, so nesting depth is limited only by
    memory, not by the interpreter's recursion limit.

    Parameters
    ----------
    config : MaudConfig
        Active formatting configuration
    indent : int
        Indentation, in spaces, of this node's lines
    tree : DomTree
        The parsed arena
    node_id : int
        Index of the node to visit
    doc : MaudDocument
        Accumulator receiving the lines
    placement : Placement
        Buffer selection inherited from the enclosing node

    Raises
    ------
    RenderingError
        If a processing instruction node is encountered; the HTML parser
        never produces one.

    """
    stack = [_Frame(node_id, indent, placement)]

    while stack:
        frame = stack.pop()
        if frame.node_id is None:
            doc.push(frame.placement, f"{_pad(frame.indent)}{BLOCK_CLOSE}")
            continue

        node = tree[frame.node_id]
        if node.kind is NodeKind.DOCUMENT:
            _push_children(stack, node, frame.indent + INDENT_WIDTH, frame.placement)
        elif node.kind is NodeKind.TEXT:
            _walk_text(frame.indent, node, doc, frame.placement)
        elif node.kind is NodeKind.ELEMENT:
            _open_element(config, stack, node, frame.indent, doc, frame.placement)
        elif node.kind in (NodeKind.DOCTYPE, NodeKind.COMMENT):
            # doctype is emitted by the renderer, comments are dropped
            continue
        else:
            raise RenderingError(f"Unexpected {node.kind.value} node in HTML document", node_kind=node.kind.value)
