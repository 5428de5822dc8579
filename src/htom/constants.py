#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the htom library.

This module centralizes the hardcoded values used across htom: the
void-element table, indentation widths, the fixed Maud wrapper tokens, the
auto-detection markers and the dependency tables checked before parsing.

Constants are organized by category:
1. Markup Structure - Void elements and structural tag names
2. Output Layout - Indentation and wrapper tokens
3. Render Detection - Substrings inspected by the auto render mode
4. Dependencies - Packages required by the parser backend and rich output
5. Environment - Variable names read by the command line
"""

from __future__ import annotations

# =============================================================================
# Markup Structure
# =============================================================================

# Elements that never have children nor a closing tag
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

HEAD_TAG = "head"
BODY_TAG = "body"
DIV_TAG = "div"

ID_ATTRIBUTE = "id"
CLASS_ATTRIBUTE = "class"

# Characters that force a shorthand id/class token to be quoted (besides numerics)
SHORTHAND_QUOTE_CHARS = frozenset({":"})

# =============================================================================
# Output Layout
# =============================================================================

INDENT_WIDTH = 4
BODY_ONLY_INDENT = 4
FULL_DOCUMENT_INDENT = 8

MACRO_OPEN = "html! {"
MACRO_CLOSE = "}"
DOCTYPE_TOKEN = "(maud::DOCTYPE)"

VOID_TERMINATOR = ";"
BLOCK_OPEN_TERMINATOR = " {"
BLOCK_CLOSE = "}"

# =============================================================================
# Render Detection
# =============================================================================

ROOT_ELEMENT_MARKERS = ("<html>", "<head>", "<body>")

# =============================================================================
# Dependencies
# =============================================================================

HTML_PARSER_BACKEND = "html5lib"

DEPS_HTML = [("beautifulsoup4", "bs4", ">=4.12.0"), ("html5lib", "html5lib", "")]
DEPS_RICH = [("rich", "rich", "")]

# =============================================================================
# Environment
# =============================================================================

ENV_PREFIX = "HTOM_"
ENV_CONFIG = "HTOM_CONFIG"
