"""Tool implementations for MCP Editor."""

from mcp_editor.tools.editor import FileEditor
from mcp_editor.tools.paths import Command, validate_path
from mcp_editor.tools.toolset import EditorToolset

__all__ = ["Command", "EditorToolset", "FileEditor", "validate_path"]
