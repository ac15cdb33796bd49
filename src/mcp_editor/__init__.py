"""MCP Editor - line-oriented text file editing over the Model Context Protocol."""

from importlib.metadata import PackageNotFoundError, version

# Read version from package metadata (pyproject.toml)
try:
    __version__ = version("mcp-editor")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "0.0.0.dev"

from mcp_editor.history import EditHistory
from mcp_editor.tools.editor import FileEditor

__all__ = ["EditHistory", "FileEditor", "__version__"]
