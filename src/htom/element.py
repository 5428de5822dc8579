#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htom/element.py
"""Element head-token formatting.

An ``Element`` gathers what the formatter needs from one HTML element: the
tag name, its ids, its whitespace-split classes and every other attribute in
source order. ``format_element`` turns it into the single-line Maud head
token, e.g. ``div#main.card data-x="1"``, according to the active
``MaudConfig``.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from htom.constants import CLASS_ATTRIBUTE, DIV_TAG, ID_ATTRIBUTE, SHORTHAND_QUOTE_CHARS
from htom.options import ClassStyle, IdStyle, MaudConfig


@dataclass
class Element:
    """Attributes of one element, split by role.

    Parameters
    ----------
    tag_name : str
        Element tag name
    ids : list of str
        Every id attribute value in source order. Only the first is written.
    classes : list of str
        Class names from every class attribute, split on whitespace, order
        and duplicates preserved
    attributes : list of tuple
        Remaining (name, value) pairs in source order

    """

    tag_name: str
    ids: list[str] = field(default_factory=list)
    classes: list[str] = field(default_factory=list)
    attributes: list[tuple[str, str]] = field(default_factory=list)

    @classmethod
    def from_attributes(cls, tag_name: str, attributes: Iterable[tuple[str, str]]) -> Element:
        """Build an element from its tag name and ordered attribute pairs."""
        element = cls(tag_name=tag_name)
        for name, value in attributes:
            if name == ID_ATTRIBUTE:
                element.ids.append(value)
            elif name == CLASS_ATTRIBUTE:
                element.classes.extend(value.split())
            else:
                element.attributes.append((name, value))
        return element

    @property
    def first_id(self) -> str | None:
        return self.ids[0] if self.ids else None


def shorthand_requires_quotes(token: str) -> bool:
    """Return True when a shorthand token has a numeric character or a colon."""
    return any(char.isnumeric() or char in SHORTHAND_QUOTE_CHARS for char in token)


def shorthand_quote(token: str) -> str:
    """Wrap a shorthand id/class token in double quotes when it needs them."""
    if shorthand_requires_quotes(token):
        return f'"{token}"'
    return token


def _omit_tag_name(element: Element, config: MaudConfig) -> bool:
    if element.tag_name != DIV_TAG:
        return False
    if element.ids and config.id_style is IdStyle.SHORT_NO_DIV:
        return True
    if element.classes and config.class_style is ClassStyle.SHORT_NO_DIV:
        return True
    return False


def _format_tag_name(element: Element, config: MaudConfig) -> str:
    return "" if _omit_tag_name(element, config) else element.tag_name


def _format_id(element: Element, id_style: IdStyle) -> str:
    first_id = element.first_id
    if first_id is None:
        return ""
    if id_style is IdStyle.FULL:
        return f'id="{first_id}"'
    return f"#{shorthand_quote(first_id)}"


def _format_classes(element: Element, class_style: ClassStyle) -> str:
    if not element.classes:
        return ""
    if class_style is ClassStyle.FULL:
        return f'class="{" ".join(element.classes)}"'
    return "".join(f".{shorthand_quote(name)}" for name in element.classes)


def _format_attribute(name: str, value: str) -> str:
    if not value:
        return name
    return f'{name}="{value}"'


def _format_attributes(element: Element) -> str:
    return " ".join(_format_attribute(name, value) for name, value in element.attributes)


def format_element(element: Element, config: MaudConfig) -> str:
    """Render an element's Maud head token.

    The token is the space-joined concatenation of the non-empty segments
    tag name, id, classes and other attributes, in that order. A shorthand
    id and shorthand classes form one segment (``#title.card``).

    Parameters
    ----------
    element : Element
        The element to format
    config : MaudConfig
        Active id and class styles

    Returns
    -------
    str
        The head token, without indentation or terminator

    Examples
    --------
        >>> element = Element.from_attributes("div", [("id", "title"), ("class", "a b")])
        >>> format_element(element, MaudConfig())
        'div id="title" class="a b"'
        >>> format_element(element, MaudConfig(id_style="shortNoDiv", class_style="short"))
        '#title.a.b'

    """
    id_segment = _format_id(element, config.id_style)
    class_segment = _format_classes(element, config.class_style)
    if id_segment.startswith("#") and class_segment.startswith("."):
        id_segment, class_segment = id_segment + class_segment, ""

    segments = [
        _format_tag_name(element, config),
        id_segment,
        class_segment,
        _format_attributes(element),
    ]
    return " ".join(segment for segment in segments if segment)
