"""The exported API functions for HTML to Maud conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/htom/api.py
import logging
from typing import Optional, Union

from htom.dom import DomTree, parse_html
from htom.exceptions import ParsingError, ValidationError
from htom.options import MaudConfig
from htom.renderer import MaudDocument, Placement, render_document
from htom.utils.decorators import debug_timer
from htom.walker import walk

logger = logging.getLogger(__name__)


def _decode_input(html_text: Union[str, bytes]) -> str:
    if isinstance(html_text, str):
        return html_text
    if isinstance(html_text, (bytes, bytearray)):
        try:
            return bytes(html_text).decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParsingError(f"HTML input is not valid UTF-8: {e}", parsing_stage="decode", original_error=e) from e
    raise ValidationError(
        f"HTML input must be str or bytes, got {type(html_text).__name__}",
        parameter_name="html_text",
        parameter_value=type(html_text),
    )


def _resolve_config(config: Optional[MaudConfig]) -> MaudConfig:
    if config is None:
        return MaudConfig()
    if not isinstance(config, MaudConfig):
        raise ValidationError(
            f"config must be a MaudConfig, got {type(config).__name__}",
            parameter_name="config",
            parameter_value=type(config),
        )
    return config


def walk_tree(tree: DomTree, source: str, config: MaudConfig) -> MaudDocument:
    """Walk a parsed tree and collect its head and body lines.

    Parameters
    ----------
    tree : DomTree
        Parsed arena
    source : str
        Original HTML text, kept for the auto render mode
    config : MaudConfig
        Formatting configuration

    Returns
    -------
    MaudDocument
        The filled accumulator

    """
    doc = MaudDocument(source=source)
    walk(config, 0, tree, tree.root, doc, Placement.OTHER)
    return doc


def convert(html_text: Union[str, bytes], config: Optional[MaudConfig] = None) -> str:
    """Convert HTML to Maud markup source.

    Parameters
    ----------
    html_text : str or bytes
        The HTML document or fragment. Bytes are decoded as UTF-8.
    config : MaudConfig, optional
        Formatting configuration. Defaults to ``MaudConfig()`` (auto render,
        full id and class attributes).

    Returns
    -------
    str
        Maud source text, without a trailing newline

    Raises
    ------
    ParsingError
        If the input cannot be decoded or parsed
    ValidationError
        If the arguments have the wrong types
    DependencyError
        If the HTML parser backend is not installed

    Examples
    --------
        >>> print(convert("<p>Hi</p>"))
        html! {
            p {
                "Hi"
            }
        }

    """
    source = _decode_input(html_text)
    config = _resolve_config(config)

    with debug_timer(logger, "Parsing HTML"):
        tree = parse_html(source)

    with debug_timer(logger, "Walking tree"):
        doc = walk_tree(tree, source, config)

    logger.debug(f"Collected {len(doc.head)} head lines and {len(doc.body)} body lines")
    return render_document(doc, config)
