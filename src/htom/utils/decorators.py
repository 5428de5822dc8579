#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htom/utils/decorators.py
"""Utility decorators for the htom conversion pipeline.

This module provides the dependency guard applied to the parser entry point
and a DEBUG-level timing context manager used around each conversion stage.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Tuple

from htom.exceptions import DependencyError
from htom.utils.packages import check_version_requirement


def check_dependencies(component_name: str, packages: List[Tuple[str, str, str]]) -> None:
    """Raise ``DependencyError`` unless every package imports and satisfies its version.

    Parameters
    ----------
    component_name : str
        Name used in the error message
    packages : list of tuple
        (install_name, import_name, version_spec) triples

    Raises
    ------
    DependencyError
        Listing every missing package and version mismatch together

    """
    missing: List[Tuple[str, str]] = []
    mismatches: List[Tuple[str, str, str]] = []
    first_import_error: ImportError | None = None

    for install_name, import_name, version_spec in packages:
        try:
            importlib.import_module(import_name)
        except ImportError as e:
            missing.append((install_name, version_spec))
            first_import_error = first_import_error or e
            continue

        if not version_spec:
            continue
        meets_requirement, installed_version = check_version_requirement(install_name, version_spec)
        if not meets_requirement:
            mismatches.append((install_name, version_spec, installed_version or "unknown"))

    if missing or mismatches:
        raise DependencyError(
            converter_name=component_name,
            missing_packages=missing,
            version_mismatches=mismatches,
            original_import_error=first_import_error,
        ) from first_import_error


def requires_dependencies(component_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check required dependencies before the first call of the decorated function.

    Once the check passes it is not repeated; a failing check is retried on
    every call.

    Parameters
    ----------
    component_name : str
        Name of the component (e.g., "html parser"). This appears in error
        messages to help users identify what needs the dependencies.
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples where:
        - install_name: Package name for pip install (e.g., "beautifulsoup4")
        - import_name: Module name for import statement (e.g., "bs4")
        - version_spec: Version requirement (e.g., ">=4.12.0" or "" for any version)

    Returns
    -------
    Callable
        Decorated function that checks dependencies before execution

    Raises
    ------
    DependencyError
        If any required package is missing or has an incompatible version.

    Examples
    --------
        >>> @requires_dependencies("html parser", [("html5lib", "html5lib", "")])
        ... def parse(text):
        ...     import html5lib
        ...     # parsing logic here

    """

    def decorator(func: Callable) -> Callable:
        satisfied = False

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            nonlocal satisfied
            # a passing check stays valid for the life of the process
            if not satisfied:
                check_dependencies(component_name, packages)
                satisfied = True
            return func(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Context manager for timing operations with DEBUG-level logging.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Parsing HTML")

    Examples
    --------
        >>> logger = logging.getLogger(__name__)
        >>> with debug_timer(logger, "Walking tree"):
        ...     walk(config, 0, tree, tree.root, doc, Placement.OTHER)
        ... # Logs: "Walking tree completed in 0.01s" at DEBUG level

    Notes
    -----
    Only measures time when the logger has DEBUG level enabled.

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.2f}s")
    else:
        yield
