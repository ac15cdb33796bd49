"""In-memory, per-path undo history.

Each path maps to a stack of snapshots (full file contents). Snapshots are
appended after every successful mutation and popped by undo, most recent
first. History lives for the lifetime of the owning editor and is not
persisted or shared between processes.
"""

import logging
from collections import defaultdict

logger = logging.getLogger(__name__)


class EditHistory:
    """Per-path stacks of file snapshots.

    Example:
        >>> history = EditHistory()
        >>> history.push("/tmp/a.txt", "one\\n")
        >>> history.push("/tmp/a.txt", "two\\n")
        >>> history.pop("/tmp/a.txt")
        'two\\n'
        >>> history.depth("/tmp/a.txt")
        1
    """

    def __init__(self) -> None:
        self._snapshots: defaultdict[str, list[str]] = defaultdict(list)

    def push(self, path: str, content: str) -> None:
        """Record ``content`` as the most recent snapshot for ``path``."""
        self._snapshots[path].append(content)
        logger.debug(f"History push for {path} (depth={len(self._snapshots[path])})")

    def pop(self, path: str) -> str | None:
        """Remove and return the most recent snapshot, or None if there is none."""
        stack = self._snapshots.get(path)
        if not stack:
            return None

        content = stack.pop()
        if not stack:
            del self._snapshots[path]
        logger.debug(f"History pop for {path} (depth={len(stack)})")
        return content

    def peek(self, path: str) -> str | None:
        """Return the most recent snapshot without removing it."""
        stack = self._snapshots.get(path)
        return stack[-1] if stack else None

    def depth(self, path: str) -> int:
        """Number of snapshots recorded for ``path``."""
        return len(self._snapshots.get(path, ()))

    def has_history(self, path: str) -> bool:
        return self.depth(path) > 0
