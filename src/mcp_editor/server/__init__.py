"""Transport layer: argument validation, dispatch, and the MCP stdio server."""

from mcp_editor.server.dispatcher import EditorDispatcher
from mcp_editor.server.schemas import TOOL_SPECS, ToolSpec

__all__ = ["EditorDispatcher", "TOOL_SPECS", "ToolSpec"]
