"""Path validation for editor commands."""

import logging
import stat
from enum import Enum
from pathlib import Path

from mcp_editor.exceptions import (
    EditorIOError,
    FileAlreadyExistsError,
    NotAbsoluteError,
    PathIsDirectoryError,
    PathNotFoundError,
)

logger = logging.getLogger(__name__)


class Command(str, Enum):
    """Operations exposed by the editor."""

    VIEW = "view"
    CREATE = "create"
    STRING_REPLACE = "string_replace"
    INSERT = "insert"
    UNDO_EDIT = "undo_edit"


def validate_path(command: Command, path: str) -> None:
    """Check that ``path`` is acceptable for ``command``.

    Rules, applied in order:
        1. The path must be absolute.
        2. Every command except ``create`` needs an existing path.
        3. Only ``view`` may target a directory.
        4. ``create`` must not overwrite an existing file.

    Args:
        command: Command about to run
        path: Path supplied by the caller

    Raises:
        NotAbsoluteError: Path is relative
        PathIsDirectoryError: Non-view command on a directory
        FileAlreadyExistsError: ``create`` on an existing file
        PathNotFoundError: Path does not exist and command is not ``create``
        EditorIOError: Stat failed for another reason (ignored for ``create``)
    """
    command = Command(command)
    target = Path(path)

    if not target.is_absolute():
        suggested = Path.cwd() / target
        raise NotAbsoluteError(
            f"The path {path} is not an absolute path, it should start with `/`. "
            f"Maybe you meant {suggested}?"
        )

    try:
        stats = target.stat()
    except FileNotFoundError:
        if command is not Command.CREATE:
            raise PathNotFoundError(
                f"The path {path} does not exist. Please provide a valid path."
            ) from None
        return
    except OSError as e:
        if command is Command.CREATE:
            logger.debug(f"Ignoring stat failure for create on {path}: {e}")
            return
        raise EditorIOError(f"Failed to access {path}: {e}", path=path, original_error=e) from e

    if stat.S_ISDIR(stats.st_mode) and command is not Command.VIEW:
        raise PathIsDirectoryError(
            f"The path {path} is a directory and only the `view` command can be used on directories"
        )

    if command is Command.CREATE and stat.S_ISREG(stats.st_mode):
        raise FileAlreadyExistsError(
            f"File already exists at: {path}. Cannot overwrite files using command `create`"
        )

    logger.debug(f"Validated {command.value} path {path}")
