"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/htom/cli/output.py
import argparse
import sys
from pathlib import Path
from typing import TextIO

from htom.constants import DEPS_RICH
from htom.utils.decorators import requires_dependencies

# Maud markup is Rust macro input, so the Rust lexer highlights it well
SYNTAX_LEXER = "rust"


def should_use_rich_output(args: argparse.Namespace, stream: TextIO | None = None) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    Returns
    -------
    bool
        True if Rich output should be used

    Notes
    -----
    Rich output is used when:
    - The --rich flag is set and standard output is a TTY
    - OR --force-rich is set

    """
    if getattr(args, "force_rich", False):
        return True

    if not args.rich:
        return False

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


@requires_dependencies("rich output", DEPS_RICH)
def print_rich(markup: str) -> None:
    """Print Maud markup with syntax highlighting."""
    from rich.console import Console
    from rich.syntax import Syntax

    Console().print(Syntax(markup, SYNTAX_LEXER, word_wrap=False))


def write_output(markup: str, args: argparse.Namespace) -> None:
    """Write converted markup to ``--out`` or standard output, followed by a newline."""
    if args.out:
        Path(args.out).write_text(markup + "\n", encoding="utf-8")
        return

    if should_use_rich_output(args):
        print_rich(markup)
    else:
        print(markup)
