"""Filesystem primitives used by the editing engine.

All text is read and written as UTF-8 with newlines left untouched, so a
file round-trips byte for byte. OS-level failures are re-raised as
``EditorIOError`` carrying the path and the original exception.
"""

import logging
import os
import tempfile
from collections import deque
from pathlib import Path

from mcp_editor.exceptions import EditorIOError

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def read_file(path: str | Path) -> str:
    """Read the full text content of ``path``.

    Raises:
        EditorIOError: If the file cannot be read or is not valid UTF-8
    """
    try:
        with open(path, "r", encoding=ENCODING, newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise EditorIOError(f"Failed to read {path}: {e}", path=str(path), original_error=e) from e


def write_file(path: str | Path, content: str) -> None:
    """Write ``content`` to ``path``, replacing any previous content.

    The write goes to a temporary file in the same directory which is then
    renamed over the target, so readers never observe a partial file. A
    symlinked ``path`` is written through: the link stays and the file it
    points to is replaced. Parent directories are not created.

    Raises:
        EditorIOError: If the file cannot be written
    """
    target = Path(os.path.realpath(path))
    try:
        temp_fd, temp_path = tempfile.mkstemp(
            dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
        )
    except OSError as e:
        raise EditorIOError(
            f"Failed to write to {path}: {e}", path=str(path), original_error=e
        ) from e

    try:
        with os.fdopen(temp_fd, "w", encoding=ENCODING, newline="") as f:
            f.write(content)

        # Keep the permissions of the file being replaced
        if target.exists():
            os.chmod(temp_path, target.stat().st_mode & 0o7777)

        os.replace(temp_path, target)
    except (OSError, UnicodeEncodeError) as e:
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise EditorIOError(
            f"Failed to write to {path}: {e}", path=str(path), original_error=e
        ) from e

    logger.debug(f"Wrote {len(content)} characters to {path}")


def is_directory(path: str | Path) -> bool:
    """Return True if ``path`` exists and is a directory."""
    try:
        return Path(path).is_dir()
    except OSError:
        return False


def list_directory(root: str | Path, max_depth: int = 2) -> list[str]:
    """List entries under ``root`` up to ``max_depth`` levels deep.

    Entries whose name starts with ``.`` are skipped, and hidden directories
    are not descended into. The traversal is breadth-first; ``root`` itself is
    the first entry, followed by each level in sorted order.

    Args:
        root: Directory to list
        max_depth: Deepest level to include (1 = direct children only)

    Returns:
        Paths of the listed entries, ``root`` first

    Raises:
        EditorIOError: If a directory cannot be read
    """
    root_path = Path(root)
    entries = [str(root_path)]
    queue: deque[tuple[Path, int]] = deque([(root_path, 0)])

    while queue:
        directory, depth = queue.popleft()
        if depth >= max_depth:
            continue

        try:
            children = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise EditorIOError(
                f"Failed to list {directory}: {e}", path=str(directory), original_error=e
            ) from e

        for child in children:
            if child.name.startswith("."):
                continue
            entries.append(str(child))
            if child.is_dir() and not child.is_symlink():
                queue.append((child, depth + 1))

    return entries
