"""Configuration file manager for loading, saving, and overriding editor settings."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError

from .schema import EditorSettings

logger = logging.getLogger(__name__)

# Integer settings that can be overridden from the environment
_INT_ENV_OVERRIDES = {
    "MCP_EDITOR_SNIPPET_LINES": ("editor", "snippet_lines"),
    "MCP_EDITOR_TAB_SIZE": ("editor", "tab_size"),
    "MCP_EDITOR_LISTING_DEPTH": ("editor", "listing_depth"),
}


class ConfigurationError(Exception):
    """Raised when configuration operations fail."""

    pass


def get_config_path() -> Path:
    """Get the path to the configuration file.

    Returns:
        Path to ~/.mcp-editor/settings.json
    """
    return Path.home() / ".mcp-editor" / "settings.json"


def load_config(config_path: Path | None = None) -> EditorSettings:
    """Load configuration from JSON file.

    Args:
        config_path: Optional path to config file. Defaults to ~/.mcp-editor/settings.json

    Returns:
        EditorSettings instance loaded from file, or default settings if file doesn't exist

    Raises:
        ConfigurationError: If file exists but is invalid JSON or fails validation

    Example:
        >>> settings = load_config()
        >>> settings.editor.snippet_lines
        4
    """
    if config_path is None:
        config_path = get_config_path()

    # Return defaults if file doesn't exist
    if not config_path.exists():
        return EditorSettings()

    try:
        with open(config_path) as f:
            data = json.load(f)

        return EditorSettings(**data)

    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in configuration file {config_path}: {e}") from e
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed for {config_path}:\n{e}") from e
    except Exception as e:
        raise ConfigurationError(f"Failed to load configuration from {config_path}: {e}") from e


def save_config(settings: EditorSettings, config_path: Path | None = None) -> None:
    """Save configuration to JSON file with minimal formatting.

    Only customized sections are written. Sets restrictive permissions (0o600)
    on POSIX systems.

    Args:
        settings: EditorSettings instance to save
        config_path: Optional path to config file. Defaults to ~/.mcp-editor/settings.json

    Raises:
        ConfigurationError: If save operation fails
    """
    if config_path is None:
        config_path = get_config_path()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            f.write(settings.model_dump_json_minimal())

        if os.name != "nt":  # Not Windows
            os.chmod(config_path, 0o600)

    except Exception as e:
        raise ConfigurationError(f"Failed to save configuration to {config_path}: {e}") from e


def get_env_overrides() -> dict[str, Any]:
    """Collect configuration overrides from environment variables.

    Values from a ``.env`` file located by python-dotenv are loaded first;
    variables already set in the environment win.

    Returns:
        Nested dictionary of overrides, shaped like EditorSettings

    Example:
        >>> os.environ["MCP_EDITOR_SNIPPET_LINES"] = "8"
        >>> get_env_overrides()
        {'editor': {'snippet_lines': 8}}
    """
    load_dotenv()

    env_overrides: dict[str, Any] = {}

    for env_var, (section, key) in _INT_ENV_OVERRIDES.items():
        raw = os.getenv(env_var)
        if not raw:
            continue
        try:
            env_overrides.setdefault(section, {})[key] = int(raw)
        except ValueError:
            logger.warning(f"Ignoring {env_var}={raw!r}: not an integer")

    # Support both MCP_EDITOR_LOG_LEVEL and LOG_LEVEL
    log_level = os.getenv("MCP_EDITOR_LOG_LEVEL") or os.getenv("LOG_LEVEL")
    if log_level:
        env_overrides.setdefault("logging", {})["level"] = log_level

    if os.getenv("MCP_EDITOR_DATA_DIR"):
        env_overrides.setdefault("logging", {})["data_dir"] = os.getenv("MCP_EDITOR_DATA_DIR")

    return env_overrides


def merge_with_env(settings: EditorSettings) -> EditorSettings:
    """Merge configuration file settings with environment variable overrides.

    Environment variables take precedence over file settings.

    Args:
        settings: EditorSettings instance from file

    Returns:
        New EditorSettings with overrides applied

    Raises:
        ConfigurationError: If an override produces invalid settings
    """
    overrides = get_env_overrides()
    if not overrides:
        return settings

    merged = deep_merge(settings.model_dump(), overrides)
    try:
        return EditorSettings(**merged)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid environment override:\n{e}") from e


def load_settings(config_path: Path | None = None) -> EditorSettings:
    """Load settings from file and apply environment overrides."""
    return merge_with_env(load_config(config_path))


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence.

    Args:
        base: Base dictionary
        override: Override dictionary (takes precedence)

    Returns:
        Merged dictionary

    Example:
        >>> base = {"a": 1, "b": {"c": 2}}
        >>> override = {"b": {"d": 3}}
        >>> deep_merge(base, override)
        {'a': 1, 'b': {'c': 2, 'd': 3}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result
