#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htom/cli/builder.py
"""Argument parser construction and exit codes for the htom CLI.

Conversion options are generated from the ``MaudConfig`` dataclass fields:
each field becomes a kebab-case flag whose help text and choices come from
the field metadata, and whose default may be supplied by an ``HTOM_<NAME>``
environment variable.
"""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import fields
from typing import Any, Optional, Sequence, Union

from htom import __version__
from htom.constants import ENV_PREFIX
from htom.exceptions import DependencyError, FileError, ParsingError, RenderingError, ValidationError
from htom.options import MaudConfig

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7


class EnvDefaultStoreAction(argparse.Action):
    """Store action whose default may come from an environment variable.

    The variable name is ``HTOM_`` followed by the upper-cased destination,
    e.g. ``HTOM_ID_STYLE`` for ``--id-style``. A value given on the command
    line always wins.
    """

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        nargs: Optional[Union[int, str]] = None,
        default: Optional[Any] = None,
        type: Optional[Any] = None,
        choices: Optional[Sequence[Any]] = None,
        required: bool = False,
        help: Optional[str] = None,
        metavar: Optional[Union[str, tuple[str, ...]]] = None,
    ) -> None:
        """Initialize the action, reading its default from the environment."""
        env_key = f"{ENV_PREFIX}{dest.upper().replace('-', '_').replace('.', '_')}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            try:
                default = type(env_value) if type is not None else env_value
            except (ValueError, TypeError) as e:
                logging.warning(f"Invalid environment variable {env_key}={env_value}: {e}")

        super().__init__(
            option_strings=option_strings,
            dest=dest,
            nargs=nargs,
            default=default,
            type=type,
            choices=choices,
            required=required,
            help=help,
            metavar=metavar,
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        """Store the parsed value."""
        setattr(namespace, self.dest, values)


def snake_to_kebab(name: str) -> str:
    """Convert snake_case to kebab-case."""
    return name.replace("_", "-")


def add_config_arguments(parser: argparse.ArgumentParser) -> None:
    """Add one flag per ``MaudConfig`` field.

    Defaults are left as ``None`` (or the environment value) so the caller
    can tell given values apart from config-file and dataclass defaults.
    Values are not validated here; unrecognized ones fall back leniently
    when the ``MaudConfig`` is built.
    """
    group = parser.add_argument_group("conversion options")
    for config_field in fields(MaudConfig):
        choices = config_field.metadata.get("choices", [])
        group.add_argument(
            f"--{snake_to_kebab(config_field.name)}",
            dest=config_field.name,
            action=EnvDefaultStoreAction,
            default=None,
            metavar="{" + ",".join(choices) + "}",
            help=f"{config_field.metadata.get('help', f'Configure {config_field.name}')} "
            f"(default: {config_field.default.value})",
        )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``htom`` command.

    Returns
    -------
    argparse.ArgumentParser
        The configured parser

    """
    parser = argparse.ArgumentParser(
        prog="htom",
        description="Convert HTML into Maud markup source.",
        epilog="Conversion options may also be set with HTOM_RENDER, HTOM_ID_STYLE and HTOM_CLASS_STYLE.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="HTML file to convert; omit or use '-' to read standard input",
    )
    parser.add_argument("--out", "-o", help="Write output to this file instead of standard output")

    add_config_arguments(parser)

    config_group = parser.add_argument_group("configuration files")
    config_group.add_argument(
        "--config",
        help="Load settings from a .toml, .yaml or .json file (default: HTOM_CONFIG or a discovered .htom.* file)",
    )
    config_group.add_argument(
        "--no-config",
        action="store_true",
        help="Ignore HTOM_CONFIG and discovered configuration files",
    )

    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--rich", action="store_true", help="Syntax-highlight output when writing to a terminal"
    )
    output_group.add_argument(
        "--force-rich", action="store_true", help="Syntax-highlight output even when not writing to a terminal"
    )

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", help="Also write log messages to this file")
    logging_group.add_argument("--verbose", "-v", action="store_true", help="Shortcut for --log-level DEBUG")
    logging_group.add_argument(
        "--trace", action="store_true", help="DEBUG logging with timestamps and logger names"
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, (FileError, OSError)):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR
