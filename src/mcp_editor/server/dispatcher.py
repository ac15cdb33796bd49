"""Dispatch named tool requests to the editing engine.

The dispatcher is the error boundary of the editor: it validates argument
shapes, invokes the engine, and converts every outcome into a structured
response dict. No exception escapes ``dispatch``.
"""

import logging
from typing import Any

from pydantic import BaseModel, ValidationError

from mcp_editor.config.schema import EditorSettings
from mcp_editor.exceptions import EditorError
from mcp_editor.server.schemas import (
    TOOL_SPECS,
    CreateArgs,
    InsertArgs,
    StringReplaceArgs,
    ToolSpec,
    UndoEditArgs,
    ViewArgs,
)
from mcp_editor.tools.editor import FileEditor
from mcp_editor.utils.responses import create_error_response, create_success_response

logger = logging.getLogger(__name__)


def format_validation_error(error: ValidationError) -> str:
    """Summarize a pydantic ValidationError as ``field: message`` pairs."""
    details = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"]) or "arguments"
        details.append(f"{location}: {err['msg']}")
    return "; ".join(details)


class EditorDispatcher:
    """Route tool calls to a single FileEditor instance.

    Example:
        >>> dispatcher = EditorDispatcher()
        >>> response = await dispatcher.dispatch("view", {"path": "relative.txt"})
        >>> response["success"], response["error"]
        (False, 'not_absolute')
    """

    def __init__(self, editor: FileEditor | None = None, config: EditorSettings | None = None):
        """Initialize dispatcher.

        Args:
            editor: Engine to dispatch to. Created from ``config`` when omitted.
            config: Settings for a newly created engine
        """
        self.editor = editor if editor is not None else FileEditor(config)

    def list_tools(self) -> list[ToolSpec]:
        """Tools this dispatcher accepts, in catalogue order."""
        return list(TOOL_SPECS.values())

    async def dispatch(self, name: str, arguments: dict[str, Any] | None) -> dict:
        """Validate arguments and run the named tool.

        Args:
            name: Tool name (view, create, string_replace, insert, undo_edit)
            arguments: Loosely-typed argument bag from the transport

        Returns:
            Success response whose ``result`` is the engine's text, or an
            error response carrying the failure's code and message
        """
        spec = TOOL_SPECS.get(name)
        if spec is None:
            logger.debug(f"Rejected unknown tool: {name}")
            return create_error_response(error="unknown_tool", message=f"Unknown tool: {name}")

        if not isinstance(arguments, dict):
            return create_error_response(
                error="invalid_arguments",
                message=f"Invalid arguments for {name} command: expected an object",
            )

        try:
            args = spec.args_model.model_validate(arguments)
        except ValidationError as e:
            logger.debug(f"Invalid arguments for {name}: {e}")
            return create_error_response(
                error="invalid_arguments",
                message=f"Invalid arguments for {name} command: {format_validation_error(e)}",
            )

        try:
            result = await self._invoke(args)
        except EditorError as e:
            logger.debug(f"{name} failed ({e.code}): {e}")
            return create_error_response(error=e.code, message=str(e))
        except Exception as e:
            logger.error(f"Unexpected error running {name}: {e}", exc_info=True)
            return create_error_response(
                error="internal_error", message=f"Unexpected error running {name}: {e}"
            )

        return create_success_response(result=result, message=f"{name} completed")

    async def _invoke(self, args: BaseModel) -> str:
        """Call the engine operation matching the argument model."""
        if isinstance(args, ViewArgs):
            return await self.editor.view(args.path, args.view_range)
        if isinstance(args, CreateArgs):
            return await self.editor.create(args.path, args.file_text)
        if isinstance(args, StringReplaceArgs):
            return await self.editor.string_replace(
                args.path, args.old_str, args.new_str, bool(args.replace_all)
            )
        if isinstance(args, InsertArgs):
            return await self.editor.insert(args.path, args.insert_line, args.new_str)
        if isinstance(args, UndoEditArgs):
            return await self.editor.undo_edit(args.path)

        raise TypeError(f"No engine operation for {type(args).__name__}")
