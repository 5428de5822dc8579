#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the htom CLI.

This module finds and loads persisted conversion settings from TOML, YAML or
JSON files, or from the ``[tool.htom]`` section of ``pyproject.toml``. The
loaded mapping holds raw values; decoding into a ``MaudConfig`` is lenient
and happens in ``MaudConfig.from_dict``.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Callable, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEDICATED_CONFIG_FILENAMES = [".htom.toml", ".htom.yaml", ".htom.yml", ".htom.json"]
CONFIG_FILENAMES = [*DEDICATED_CONFIG_FILENAMES, "pyproject.toml"]


def _load_pyproject_htom_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.htom] section from a pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        Configuration dictionary from [tool.htom], or empty dict if absent

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get("htom", {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.htom] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up from ``start_dir`` to the filesystem root, checking each
    directory for ``.htom.toml``, ``.htom.yaml``, ``.htom.yml``,
    ``.htom.json`` and finally ``pyproject.toml`` with a ``[tool.htom]``
    section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in DEDICATED_CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_htom_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError:
                logger.debug(f"Skipping unreadable {pyproject_path}")

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file() -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    Searches the working directory and its parents first, then the user's
    home directory.

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    config_in_parents = find_config_in_parents()
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in DEDICATED_CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def _load_toml_config(config_path: Path) -> Any:
    with open(config_path, "rb") as f:
        return tomllib.load(f)


def _load_json_config(config_path: Path) -> Any:
    with open(config_path, "r", encoding="utf-8") as f:
        return json.load(f)


def _load_yaml_config(config_path: Path) -> Any:
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


_LOADERS: Dict[str, Callable[[Path], Any]] = {
    ".toml": _load_toml_config,
    ".json": _load_json_config,
    ".yaml": _load_yaml_config,
    ".yml": _load_yaml_config,
}


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML, or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file. An empty YAML file yields
        an empty dictionary.

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has an invalid format

    Examples
    --------
    >>> config = load_config_file(".htom.toml")
    >>> print(config.get("id_style"))
    short

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")

    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    if config_path.name.lower() == "pyproject.toml":
        return _load_pyproject_htom_section(config_path)

    ext = config_path.suffix.lower()
    loader = _LOADERS.get(ext)
    if loader is None:
        raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")

    try:
        config = loader(config_path)
    except (tomllib.TOMLDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise argparse.ArgumentTypeError(f"Invalid config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"Config file {config_path} must contain a mapping at root level, got {type(config).__name__}"
        )
    return config


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (HTOM_CONFIG)
    3. Auto-discovered config file

    Parameters
    ----------
    explicit_path : str, optional
        Path given on the command line
    env_var_path : str, optional
        Path taken from the environment

    Returns
    -------
    dict
        The loaded configuration, or an empty dict when nothing was found

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered = discover_config_file()
    if discovered:
        logger.debug(f"Using discovered config file {discovered}")
        return load_config_file(discovered)

    return {}
