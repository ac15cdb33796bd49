"""Configuration constants for mcp-editor.

This module provides a single source of truth for all default configuration values.
Separated from schema.py and manager.py to avoid circular imports.
"""

from pathlib import Path

# Default paths
DEFAULT_DATA_DIR = Path.home() / ".mcp-editor"

# Default editing settings
DEFAULT_SNIPPET_LINES = 4
DEFAULT_TAB_SIZE = 4
DEFAULT_LISTING_DEPTH = 2

# Default server settings
DEFAULT_SERVER_NAME = "mcp-editor"
DEFAULT_SERVER_VERSION = "1.0.0"

# Default logging settings
DEFAULT_LOG_LEVEL = "info"
