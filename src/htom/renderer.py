#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htom/renderer.py
"""Assembly of walked lines into the final Maud document.

The walker appends formatted lines to one of two buffers of a
``MaudDocument``: the head buffer or the body buffer. Once the walk is
complete ``render_document`` wraps the buffers in an ``html! { ... }`` macro,
either as a full document (doctype, ``head`` and ``body`` blocks) or as the
body alone.

The auto render mode looks at the raw input text, not at the parsed tree: it
renders a full document only when one of the literal substrings ``<html>``,
``<head>`` or ``<body>`` occurs in the input. Attributed tags such as
``<body class="x">`` are therefore not detected, and the text ``"<body>"``
inside a paragraph is. This is a deliberate textual heuristic.

An empty buffer contributes no lines, so an empty document renders as
``html! {`` followed directly by ``}``, and an empty head as ``head {`` then
``}``. No blank placeholder line is written inside an empty block; this
differs from joining an empty buffer into a single blank line.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from htom.constants import (
    BODY_ONLY_INDENT,
    BODY_TAG,
    DOCTYPE_TOKEN,
    FULL_DOCUMENT_INDENT,
    HEAD_TAG,
    INDENT_WIDTH,
    MACRO_CLOSE,
    MACRO_OPEN,
    ROOT_ELEMENT_MARKERS,
)
from htom.options import MaudConfig, Render
from htom.utils.text import indent_lines

logger = logging.getLogger(__name__)


class Placement(Enum):
    """Which buffer, if any, receives the lines of a subtree."""

    HEAD = "head"
    BODY = "body"
    OTHER = "other"


@dataclass
class MaudDocument:
    """Line buffers collected during one walk.

    Parameters
    ----------
    source : str
        The original HTML text, inspected by the auto render mode
    head : list of str
        Lines produced inside ``<head>``
    body : list of str
        Lines produced inside ``<body>``

    """

    source: str = ""
    head: list[str] = field(default_factory=list)
    body: list[str] = field(default_factory=list)

    def push(self, placement: Placement, line: str) -> None:
        """Append a line to the buffer selected by ``placement``.

        Lines placed outside both ``<head>`` and ``<body>`` are discarded.
        """
        if placement is Placement.HEAD:
            self.head.append(line)
        elif placement is Placement.BODY:
            self.body.append(line)


def has_root_elements(source: str) -> bool:
    """Return True when the text contains a literal ``<html>``, ``<head>`` or ``<body>``."""
    return any(marker in source for marker in ROOT_ELEMENT_MARKERS)


def resolve_render(doc: MaudDocument, render: Render) -> Render:
    """Resolve ``Render.AUTO`` to a concrete mode for this document."""
    if render is not Render.AUTO:
        return render
    resolved = Render.FULL if has_root_elements(doc.source) else Render.ONLY_BODY
    logger.debug(f"Auto render mode resolved to {resolved.value}")
    return resolved


def _block(opening: str, lines: list[str], width: int) -> list[str]:
    pad = " " * INDENT_WIDTH
    return [f"{pad}{opening} {{", *indent_lines(lines, width), f"{pad}}}"]


def render_full(doc: MaudDocument) -> str:
    """Render the doctype plus ``head`` and ``body`` blocks."""
    lines = [
        MACRO_OPEN,
        f"{' ' * INDENT_WIDTH}{DOCTYPE_TOKEN}",
        *_block(HEAD_TAG, doc.head, FULL_DOCUMENT_INDENT),
        *_block(BODY_TAG, doc.body, FULL_DOCUMENT_INDENT),
        MACRO_CLOSE,
    ]
    return "\n".join(lines)


def render_body(doc: MaudDocument) -> str:
    """Render only the body lines inside the macro."""
    return "\n".join([MACRO_OPEN, *indent_lines(doc.body, BODY_ONLY_INDENT), MACRO_CLOSE])


def render_document(doc: MaudDocument, config: MaudConfig) -> str:
    """Assemble the collected buffers into Maud source text.

    Parameters
    ----------
    doc : MaudDocument
        Buffers filled by the walker
    config : MaudConfig
        Conversion configuration; only ``render`` is consulted

    Returns
    -------
    str
        Lines joined by newlines, without a trailing newline

    """
    if resolve_render(doc, config.render) is Render.FULL:
        return render_full(doc)
    return render_body(doc)
