"""MCP server exposing the editor tools over stdio.

Successful calls return a single text content item. Failed calls raise
``ToolCallError`` from the handler, which the MCP server reports as a tool
result flagged ``isError`` whose text is the failure message.
"""

import logging
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from mcp_editor.config.schema import EditorSettings
from mcp_editor.server.dispatcher import EditorDispatcher
from mcp_editor.tools.editor import FileEditor

logger = logging.getLogger(__name__)


class ToolCallError(Exception):
    """A tool call produced an error response.

    Attributes:
        code: Machine-readable error code from the dispatcher
    """

    def __init__(self, message: str, code: str = "tool_error"):
        self.code = code
        super().__init__(message)


def build_tool_list(dispatcher: EditorDispatcher) -> list[types.Tool]:
    """Describe the dispatcher's tools as MCP tool definitions."""
    return [
        types.Tool(name=spec.name, description=spec.description, inputSchema=spec.input_schema())
        for spec in dispatcher.list_tools()
    ]


async def handle_call(
    dispatcher: EditorDispatcher, name: str, arguments: dict[str, Any] | None
) -> list[types.TextContent]:
    """Run one tool call and convert the response to MCP content.

    Raises:
        ToolCallError: The dispatcher returned an error response
    """
    response = await dispatcher.dispatch(name, arguments)
    if not response["success"]:
        raise ToolCallError(response["message"], code=response["error"])

    return [types.TextContent(type="text", text=response["result"])]


def create_server(dispatcher: EditorDispatcher, settings: EditorSettings) -> Server:
    """Create an MCP server wired to ``dispatcher``.

    Args:
        dispatcher: Dispatcher owning the engine and its undo history
        settings: Settings providing the advertised server name and version

    Returns:
        Configured low-level MCP server
    """
    server: Server = Server(settings.server.name, version=settings.server.version)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return build_tool_list(dispatcher)

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        return await handle_call(dispatcher, name, arguments)

    return server


async def run_stdio_server(settings: EditorSettings | None = None) -> None:
    """Serve the editor tools on stdin/stdout until the client disconnects.

    One engine, and therefore one undo history, is shared by every call in
    the session.
    """
    settings = settings or EditorSettings()
    dispatcher = EditorDispatcher(FileEditor(settings))
    server = create_server(dispatcher, settings)

    async with stdio_server() as (read_stream, write_stream):
        logger.info("Editor MCP server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())

    logger.info("Editor MCP server stopped")
