#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htom/logging_utils.py
"""Logging setup for the htom command line.

The library itself only creates module loggers; handlers are installed here,
once, by the CLI. BeautifulSoup reports suspicious input (markup that looks
like a file name or URL) through the ``warnings`` module, so warnings are
routed into logging as well and follow the chosen level.
"""

from __future__ import annotations

import logging
import sys

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: int | str) -> int:
    """Turn a level number or name (any case) into a logging level.

    Unknown names resolve to ``logging.INFO``.
    """
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def _formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    return logging.Formatter(CONSOLE_FORMAT)


def _add_handler(logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def configure_logging(log_level: int | str, log_file: str | None = None, trace_mode: bool = False) -> logging.Logger:
    """Install stderr (and optionally file) handlers on the root logger.

    Existing root handlers are replaced, so calling this again reconfigures
    logging instead of duplicating output.

    Parameters
    ----------
    log_level : int or str
        Level number or name, e.g. ``logging.DEBUG`` or ``"warning"``
    log_file : str, optional
        Append log records to this file as well as stderr
    trace_mode : bool, default False
        Include timestamps and logger names in every record

    Returns
    -------
    logging.Logger
        The root logger

    """
    level = resolve_log_level(log_level)
    formatter = _formatter(trace_mode)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    _add_handler(root, logging.StreamHandler(sys.stderr), level, formatter)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as e:
            root.warning(f"Could not open log file {log_file}: {e}")
        else:
            _add_handler(root, file_handler, level, formatter)
            root.debug(f"Logging to file {log_file}")

    logging.captureWarnings(True)
    return root
