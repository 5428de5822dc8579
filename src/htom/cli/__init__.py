"""Command-line interface for htom.

Reads HTML from a file or standard input and writes the equivalent Maud
markup to standard output or a file.

Environment Variable Support
----------------------------
The conversion options take defaults from ``HTOM_RENDER``,
``HTOM_ID_STYLE`` and ``HTOM_CLASS_STYLE``, and a configuration file may be
named with ``HTOM_CONFIG``. CLI arguments always override environment
variables, which override configuration files.

Examples
--------
Convert standard input::

    $ echo '<p class="lead">Hi</p>' | htom

Convert a file with shorthand ids and classes::

    $ htom page.html --id-style shortNoDiv --class-style shortNoDiv

Force a full document wrapper and write to a file::

    $ htom page.html --render full --out page.rs

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import os
import sys
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict

from htom.api import convert
from htom.cli.builder import (
    EXIT_SUCCESS,
    create_parser,
    get_exit_code_for_exception,
)
from htom.cli.config import load_config_with_priority
from htom.cli.output import write_output
from htom.constants import ENV_CONFIG
from htom.exceptions import HtomError, InputNotFoundError
from htom.logging_utils import configure_logging
from htom.options import MaudConfig

logger = logging.getLogger(__name__)


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _read_input(source: str) -> str | bytes:
    """Read the whole input, as text from stdin or as bytes from a file."""
    if source == "-":
        return sys.stdin.read()

    path = Path(source)
    if not path.is_file():
        raise InputNotFoundError(source)
    return path.read_bytes()


def build_config(parsed_args: argparse.Namespace) -> MaudConfig:
    """Combine config-file settings with command-line and environment values.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    Returns
    -------
    MaudConfig
        The effective conversion configuration

    Raises
    ------
    argparse.ArgumentTypeError
        If a configuration file cannot be loaded

    """
    settings: Dict[str, Any] = {}
    if not parsed_args.no_config:
        settings.update(load_config_with_priority(parsed_args.config, os.environ.get(ENV_CONFIG)))

    for config_field in fields(MaudConfig):
        value = getattr(parsed_args, config_field.name, None)
        if value is not None:
            settings.pop(config_field.metadata["serialized_name"], None)
            settings[config_field.name] = value

    return MaudConfig.from_dict(settings)


def main(args: list[str] | None = None) -> int:
    """Execute the htom command line and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        config = build_config(parsed_args)
        logger.debug(f"Effective configuration: {config.to_dict()}")
        html_text = _read_input(parsed_args.input)
        markup = convert(html_text, config)
        write_output(markup, parsed_args)
    except (HtomError, argparse.ArgumentTypeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
