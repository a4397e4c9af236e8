#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the md2jira CLI.

A configuration file is a flat mapping of option field names to values, for
example ``.md2jira.toml``::

    preserve_raw_html = true
    parse_autolinks = false

The same keys may live in a ``[tool.md2jira]`` table of ``pyproject.toml``.
"""

import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from md2jira.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION
from md2jira.exceptions import ConfigError
from md2jira.options import JiraRendererOptions, MarkdownParserOptions

logger = logging.getLogger(__name__)


def config_keys() -> set[str]:
    """Return every key accepted in a configuration file."""
    return set(MarkdownParserOptions.field_names()) | set(JiraRendererOptions.field_names())


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.md2jira]`` table from pyproject.toml.

    Returns an empty dict when the table is absent.

    Raises
    ------
    ConfigError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}", str(pyproject_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading {pyproject_path}: {e}", str(pyproject_path), e) from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] in {pyproject_path} must be a table, got {type(config).__name__}",
            str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up from ``start_dir`` (default: the current working directory) to
    the filesystem root. In each directory the dedicated files are checked in
    :data:`~md2jira.constants.CONFIG_FILENAMES` order, then ``pyproject.toml``
    when it has a ``[tool.md2jira]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for the search

    Returns
    -------
    Path or None
        First configuration file found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigError as e:
                logger.debug(f"Skipping unreadable {pyproject_path}: {e}")

        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration mapping, keys validated against the option fields

    Raises
    ------
    ConfigError
        If the file is missing, unreadable, malformed, not a mapping, or
        contains unknown keys

    Examples
    --------
    >>> config = load_config_file(".md2jira.toml")
    >>> config.get("preserve_raw_html")
    True

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file does not exist: {config_path}", str(config_path))
    if not config_path.is_file():
        raise ConfigError(f"Configuration path is not a file: {config_path}", str(config_path))

    ext = config_path.suffix.lower()
    if config_path.name.lower() == "pyproject.toml":
        config = _load_pyproject_section(config_path)
    elif ext == ".toml":
        config = _load_with(config_path, "TOML", tomllib.load, binary=True)
    elif ext in (".yaml", ".yml"):
        config = _load_with(config_path, "YAML", yaml.safe_load)
    elif ext == ".json":
        config = _load_with(config_path, "JSON", json.load)
    else:
        raise ConfigError(f"Unsupported config file format: {ext}. Use .toml, .yaml or .json", str(config_path))

    validate_config_keys(config, config_path)
    logger.debug(f"Loaded configuration from {config_path}")
    return config


def _load_with(config_path: Path, fmt: str, loader: Any, binary: bool = False) -> Dict[str, Any]:
    """Run ``loader`` on the open file and check the result is a mapping."""
    try:
        if binary:
            with open(config_path, "rb") as f:
                config = loader(f)
        else:
            with open(config_path, "r", encoding="utf-8") as f:
                config = loader(f)
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Invalid {fmt} in config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading config file {config_path}: {e}", str(config_path), e) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"{fmt} config file must contain a mapping, got {type(config).__name__}", str(config_path)
        )
    return config


def validate_config_keys(config: Dict[str, Any], config_path: Path | str | None = None) -> None:
    """Reject keys that do not name an option field or hold non-boolean values.

    Raises
    ------
    ConfigError
        On the first unknown key or non-boolean value

    """
    known = config_keys()
    path_str = str(config_path) if config_path is not None else None
    for key, value in config.items():
        if key not in known:
            raise ConfigError(
                f"Unknown configuration key '{key}'. Valid keys: {', '.join(sorted(known))}", path_str
            )
        if not isinstance(value, bool):
            raise ConfigError(
                f"Configuration key '{key}' must be true or false, got {type(value).__name__}", path_str
            )


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (MD2JIRA_CONFIG)
    3. Auto-discovered config file (cwd and its parents)

    Returns
    -------
    dict
        Loaded configuration (empty dict if no config found)

    Raises
    ------
    ConfigError
        If a config file is found or named but cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = find_config_in_parents()
    if discovered_path:
        return load_config_file(discovered_path)

    return {}
