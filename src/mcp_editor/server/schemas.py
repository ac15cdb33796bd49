"""Argument models and tool catalogue for the editor tools.

Each tool receives a loosely-typed argument bag from the transport. These
models check presence and primitive types before the engine is invoked:
strings must be strings, booleans must be booleans, and line numbers must be
whole numbers (``3`` or ``3.0``, never ``"3"`` or ``True``).
"""

from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field, StrictBool, StrictStr

from mcp_editor.tools.paths import Command


def _as_line_number(value: Any) -> Any:
    """Accept JSON numbers that denote a whole line number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("must be a number")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError("must be a whole number")
        return int(value)
    return value


LineNumber = Annotated[int, BeforeValidator(_as_line_number)]


class ViewArgs(BaseModel):
    """Arguments for ``view``."""

    path: StrictStr = Field(description="Absolute path to the file or directory")
    view_range: tuple[LineNumber, LineNumber] | None = Field(
        default=None,
        description="Optional range of lines to view [start, end]. Use -1 as end to read to EOF.",
    )


class CreateArgs(BaseModel):
    """Arguments for ``create``."""

    path: StrictStr = Field(description="Absolute path where file should be created")
    file_text: StrictStr = Field(description="Content to write to the file")


class StringReplaceArgs(BaseModel):
    """Arguments for ``string_replace``."""

    path: StrictStr = Field(description="Absolute path to the file")
    old_str: StrictStr = Field(description="String to replace")
    new_str: StrictStr | None = Field(
        default=None, description="Replacement string (empty string if omitted)"
    )
    replace_all: StrictBool | None = Field(
        default=None, description="If true, replace all occurrences. Defaults to false."
    )


class InsertArgs(BaseModel):
    """Arguments for ``insert``."""

    path: StrictStr = Field(description="Absolute path to the file")
    insert_line: LineNumber = Field(description="Line number after which text is inserted")
    new_str: StrictStr = Field(description="Text to insert")


class UndoEditArgs(BaseModel):
    """Arguments for ``undo_edit``."""

    path: StrictStr = Field(description="Absolute path to the file")


@dataclass(frozen=True)
class ToolSpec:
    """A tool as advertised to clients."""

    command: Command
    description: str
    args_model: type[BaseModel]

    @property
    def name(self) -> str:
        return self.command.value

    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the tool's arguments."""
        return self.args_model.model_json_schema()


TOOL_SPECS: dict[str, ToolSpec] = {
    spec.name: spec
    for spec in (
        ToolSpec(
            Command.VIEW,
            "View file contents with line numbers, or list a directory excluding hidden items",
            ViewArgs,
        ),
        ToolSpec(Command.CREATE, "Create a new file with specified content", CreateArgs),
        ToolSpec(
            Command.STRING_REPLACE,
            "Replace a string in a file with a new string. By default, replaces only if the "
            "string is unique. Use replace_all=true to replace all occurrences.",
            StringReplaceArgs,
        ),
        ToolSpec(Command.INSERT, "Insert text at a specific line in the file", InsertArgs),
        ToolSpec(Command.UNDO_EDIT, "Undo the last edit to a file", UndoEditArgs),
    )
}
