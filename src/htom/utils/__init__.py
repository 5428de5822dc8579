#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htom/utils/__init__.py
"""Utility modules for the htom package."""

from htom.utils.text import escape_string_literal, indent_lines

__all__ = [
    "escape_string_literal",
    "indent_lines",
]
