#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/careerdoc/cli/config.py
"""Configuration file discovery and loading for the careerdoc CLI.

This module finds a configuration file, loads it from TOML, YAML or JSON,
validates its keys, applies ``CAREERDOC_<KEY>`` environment overrides and
turns the ``[markdown]`` and ``[html]`` tables into options objects.

Example ``.careerdoc.toml``::

    format = "both"
    output_dir = "exports"
    type = "Resume"

    [html]
    language = "de"
    show_toolbar = false

"""

from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, get_args

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from careerdoc.constants import CONFIG_ENV_PREFIX, ExportFormat
from careerdoc.exceptions import ConfigError
from careerdoc.options.base import CloneFrozenMixin
from careerdoc.options.html import HtmlRendererOptions
from careerdoc.options.markdown import MarkdownParserOptions

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = [".careerdoc.toml", ".careerdoc.yaml", ".careerdoc.yml", ".careerdoc.json"]

TOP_LEVEL_KEYS = ("format", "output_dir", "type", "log_level")

OPTION_SECTIONS: Dict[str, type] = {
    "markdown": MarkdownParserOptions,
    "html": HtmlRendererOptions,
}

VALID_FORMATS: tuple[str, ...] = get_args(ExportFormat)


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.careerdoc]`` table from a pyproject.toml file.

    Returns an empty dict when the table is absent.

    Raises
    ------
    ConfigError
        If the file is not valid TOML or the table is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}", config_path=str(pyproject_path), original_error=e) from e
    except OSError as e:
        raise ConfigError(f"Error reading {pyproject_path}: {e}", config_path=str(pyproject_path), original_error=e) from e

    config = data.get("tool", {}).get("careerdoc", {})
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.careerdoc] in {pyproject_path} must be a table, got {type(config).__name__}",
            config_path=str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by walking up from ``start_dir``.

    Each directory is checked for ``.careerdoc.toml``, ``.careerdoc.yaml``,
    ``.careerdoc.yml`` and ``.careerdoc.json`` in that order, then for a
    ``pyproject.toml`` that has a ``[tool.careerdoc]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, defaults to the current working directory

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
            except ConfigError:
                # A broken pyproject.toml that is not ours is not an error
                logger.debug(f"Skipping unreadable {pyproject_path}")

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load a configuration file, choosing the format from its name.

    Parameters
    ----------
    config_path : Path or str
        ``*.toml``, ``*.yaml``/``*.yml``, ``*.json`` or ``pyproject.toml``

    Returns
    -------
    dict
        Raw configuration mapping

    Raises
    ------
    ConfigError
        If the file is missing, unreadable, malformed or not a mapping

    """
    config_path = Path(config_path)
    if not config_path.is_file():
        raise ConfigError(f"Configuration file does not exist: {config_path}", config_path=str(config_path))

    if config_path.name.lower() == "pyproject.toml":
        return _load_pyproject_section(config_path)

    ext = config_path.suffix.lower()
    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ConfigError(
                f"Unsupported config file format: {ext}. Use .toml, .yaml or .json", config_path=str(config_path)
            )
    except ConfigError:
        raise
    except (OSError, ValueError, yaml.YAMLError) as e:
        # TOMLDecodeError and JSONDecodeError are both ValueErrors
        raise ConfigError(f"Error reading config file {config_path}: {e}", config_path=str(config_path), original_error=e) from e

    # An empty YAML file loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"Config file {config_path} must contain a mapping, got {type(config).__name__}",
            config_path=str(config_path),
        )

    logger.debug(f"Loaded configuration from {config_path}")
    return config


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries, recursing into nested tables.

    Examples
    --------
    >>> merge_configs({"html": {"language": "en"}, "type": "Resume"}, {"html": {"show_toolbar": False}})
    {'html': {'language': 'en', 'show_toolbar': False}, 'type': 'Resume'}

    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value
    return result


def validate_config(config: Mapping[str, Any], config_path: Optional[str] = None) -> None:
    """Check configuration keys and value types.

    Raises
    ------
    ConfigError
        On unknown keys, an unknown format, non-table sections or option
        values of the wrong type

    """
    for key, value in config.items():
        if key in OPTION_SECTIONS:
            if not isinstance(value, dict):
                raise ConfigError(f"[{key}] must be a table, got {type(value).__name__}", config_path=config_path)
            _validate_section(key, value, config_path)
        elif key not in TOP_LEVEL_KEYS:
            raise ConfigError(f"Unknown configuration key: {key!r}", config_path=config_path)
        elif not isinstance(value, str):
            raise ConfigError(f"{key} must be a string, got {type(value).__name__}", config_path=config_path)

    fmt = config.get("format")
    if fmt is not None and fmt not in VALID_FORMATS:
        raise ConfigError(
            f"Invalid format {fmt!r}; expected one of {', '.join(VALID_FORMATS)}", config_path=config_path
        )


def _validate_section(section: str, values: Mapping[str, Any], config_path: Optional[str]) -> None:
    option_fields = {f.name: f for f in fields(OPTION_SECTIONS[section])}
    for name, value in values.items():
        option_field = option_fields.get(name)
        if option_field is None:
            raise ConfigError(f"Unknown option {section}.{name}", config_path=config_path)

        default = option_field.default
        if value is None and "None" in str(option_field.type):
            continue
        if isinstance(default, bool) and not isinstance(value, bool):
            raise ConfigError(f"{section}.{name} must be true or false", config_path=config_path)
        if isinstance(default, str) and not isinstance(value, str):
            raise ConfigError(f"{section}.{name} must be a string", config_path=config_path)


def apply_env_overrides(config: Dict[str, Any], environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Override top-level keys from ``CAREERDOC_<KEY>`` environment variables.

    Examples
    --------
    >>> apply_env_overrides({"type": "Resume"}, {"CAREERDOC_TYPE": "CoverLetter"})
    {'type': 'CoverLetter'}

    """
    environ = os.environ if environ is None else environ
    result = dict(config)
    for key in TOP_LEVEL_KEYS:
        env_key = f"{CONFIG_ENV_PREFIX}{key.upper()}"
        env_value = environ.get(env_key)
        if env_value:
            logger.debug(f"Using {env_key} from environment")
            result[key] = env_value
    return result


def load_config_with_priority(
    explicit_path: Optional[str] = None,
    env_var_path: Optional[str] = None,
    start_dir: Optional[Path] = None,
) -> Dict[str, Any]:
    """Load and validate configuration with the CLI's priority rules.

    Priority order (highest to lowest):
    1. Explicit config file path (``--config``)
    2. Path from the ``CAREERDOC_CONFIG`` environment variable
    3. Auto-discovered file in ``start_dir`` or one of its parents

    Returns
    -------
    dict
        Validated configuration (empty dict if no file is found)

    Raises
    ------
    ConfigError
        If a config file is named but cannot be loaded, or is invalid

    """
    path: Optional[Path | str] = explicit_path or env_var_path or find_config_in_parents(start_dir)
    if not path:
        return {}

    config = load_config_file(path)
    validate_config(config, config_path=str(path))
    return config


def build_options(
    config: Mapping[str, Any],
    base: Optional[CloneFrozenMixin] = None,
    section: str = "html",
) -> Any:
    """Build an options object from one section of the configuration.

    Parameters
    ----------
    config : Mapping
        Validated configuration
    base : options instance, optional
        Options to update; defaults to a fresh instance of the section's class
    section : str, default "html"
        ``"markdown"`` or ``"html"``

    Returns
    -------
    MarkdownParserOptions or HtmlRendererOptions

    Raises
    ------
    ConfigError
        If the options reject a value

    """
    if base is None:
        base = OPTION_SECTIONS[section]()
    values = config.get(section) or {}
    if not values:
        return base
    try:
        return base.create_updated(**values)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid [{section}] options: {e}", original_error=e) from e
