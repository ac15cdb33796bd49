"""Configuration package for mcp-editor."""

from .constants import DEFAULT_LISTING_DEPTH, DEFAULT_SNIPPET_LINES, DEFAULT_TAB_SIZE
from .manager import (
    ConfigurationError,
    deep_merge,
    get_config_path,
    get_env_overrides,
    load_config,
    load_settings,
    merge_with_env,
    save_config,
)
from .schema import EditorConfig, EditorSettings, LoggingConfig, ServerConfig

__all__ = [
    # Constants
    "DEFAULT_SNIPPET_LINES",
    "DEFAULT_TAB_SIZE",
    "DEFAULT_LISTING_DEPTH",
    # Schema
    "EditorSettings",
    "EditorConfig",
    "ServerConfig",
    "LoggingConfig",
    # Manager
    "ConfigurationError",
    "get_config_path",
    "load_config",
    "load_settings",
    "save_config",
    "get_env_overrides",
    "merge_with_env",
    "deep_merge",
]
