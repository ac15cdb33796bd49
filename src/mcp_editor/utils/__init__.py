"""Utility modules for MCP Editor."""

from mcp_editor.utils.filesystem import is_directory, list_directory, read_file, write_file
from mcp_editor.utils.rendering import expand_tabs, make_output
from mcp_editor.utils.responses import create_error_response, create_success_response

__all__ = [
    "read_file",
    "write_file",
    "is_directory",
    "list_directory",
    "expand_tabs",
    "make_output",
    "create_success_response",
    "create_error_response",
]
