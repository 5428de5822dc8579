"""htom - convert HTML into Maud markup source.

htom parses an HTML document or fragment with a standards-compliant HTML5
parser and writes the equivalent Maud ``html! { ... }`` macro body: every
element becomes a block (or a ``;``-terminated void element) carrying its id,
classes and attributes, and every non-blank text node becomes a string
literal.

Examples
--------
Basic conversion:

    >>> from htom import convert
    >>> print(convert('<div id="title" class="text-xl">Hello</div>'))
    html! {
        div id="title" class="text-xl" {
            "Hello"
        }
    }

Shorthand ids and classes with an implicit div:

    >>> from htom import ClassStyle, IdStyle, MaudConfig
    >>> config = MaudConfig(id_style=IdStyle.SHORT_NO_DIV, class_style=ClassStyle.SHORT_NO_DIV)
    >>> print(convert('<div id="title" class="text-xl">Hello</div>', config))
    html! {
        #title.text-xl {
            "Hello"
        }
    }

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "htom requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from htom.api import convert
from htom.dom import DomNode, DomTree, NodeKind, parse_html
from htom.element import Element, format_element
from htom.exceptions import (
    DependencyError,
    FileError,
    HtomError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from htom.options import (
    ClassStyle,
    IdStyle,
    MaudConfig,
    Render,
    parse_class_style,
    parse_id_style,
    parse_render,
)
from htom.renderer import MaudDocument, Placement, render_document
from htom.walker import walk

__all__ = [
    "__version__",
    "convert",
    "parse_html",
    "walk",
    "render_document",
    "format_element",
    "Element",
    "DomNode",
    "DomTree",
    "NodeKind",
    "MaudDocument",
    "Placement",
    "MaudConfig",
    "Render",
    "IdStyle",
    "ClassStyle",
    "parse_render",
    "parse_id_style",
    "parse_class_style",
    "HtomError",
    "ValidationError",
    "FileError",
    "ParsingError",
    "RenderingError",
    "DependencyError",
]
