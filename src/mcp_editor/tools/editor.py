"""Line-oriented file editing tools with per-path undo.

This module provides the editing engine behind the ``view``, ``create``,
``string_replace``, ``insert`` and ``undo_edit`` tools. Each operation:

1. Validates the path for its command
2. Reads the file and validates ranges, matches or line indexes
3. Writes the result (only after every check has passed)
4. Records an undo snapshot
5. Returns a line-numbered preview of the change

Failures raise ``EditorError`` subclasses at the point of detection; nothing
is written and history is untouched when an operation fails.

Undo snapshots:
    ``create`` records the text it wrote, while ``string_replace`` and
    ``insert`` record the content from before the edit. Undoing the first
    edit after a ``create`` therefore restores the created text, and a
    further undo rewrites that same text before history runs out.
"""

import logging
from collections.abc import Sequence

from mcp_editor.config.schema import EditorSettings
from mcp_editor.exceptions import (
    AmbiguousMatchError,
    EndBeforeStartError,
    InvalidLineIndexError,
    InvalidRangeError,
    NoHistoryError,
    NoMatchError,
    RangeOnDirectoryError,
)
from mcp_editor.history import EditHistory
from mcp_editor.tools.paths import Command, validate_path
from mcp_editor.tools.toolset import EditorToolset
from mcp_editor.utils.filesystem import is_directory, list_directory, read_file, write_file
from mcp_editor.utils.rendering import expand_tabs, make_output

logger = logging.getLogger(__name__)

REVIEW_HINT = (
    "Review the changes and make sure they are as expected (correct indentation, "
    "no duplicate lines, etc). Edit the file again if necessary."
)


class FileEditor(EditorToolset):
    """Editing engine for text files addressed by absolute path.

    One instance owns one undo history; history is kept in memory for the
    lifetime of the instance and is not shared between instances.

    Example:
        >>> editor = FileEditor()
        >>> await editor.create("/tmp/a.txt", "one\\ntwo\\nthree\\n")
        'File created successfully at: /tmp/a.txt'
        >>> result = await editor.string_replace("/tmp/a.txt", "two", "TWO")
        >>> "1 replacement made" in result
        True
    """

    def __init__(self, config: EditorSettings | None = None, history: EditHistory | None = None):
        """Initialize FileEditor.

        Args:
            config: Editor settings (snippet size, tab size, listing depth)
            history: Undo history to use. A fresh one is created when omitted.
        """
        super().__init__(config)
        self.history = history if history is not None else EditHistory()

    def get_tools(self) -> list:
        """Get list of editing tools.

        Returns:
            List of editing tool functions
        """
        return [
            self.view,
            self.create,
            self.string_replace,
            self.insert,
            self.undo_edit,
        ]

    @property
    def snippet_lines(self) -> int:
        return self.config.editor.snippet_lines

    @property
    def tab_size(self) -> int:
        return self.config.editor.tab_size

    async def view(self, path: str, view_range: Sequence[int] | None = None) -> str:
        """View a file with line numbers, or list a directory.

        Args:
            path: Absolute path to a file or directory
            view_range: Optional ``[start, end]``, 1-indexed and inclusive.
                ``end == -1`` means through the last line.

        Returns:
            Numbered file content, or the directory listing, with a header

        Raises:
            RangeOnDirectoryError: ``view_range`` given for a directory
            InvalidRangeError: A bound lies outside the file
            EndBeforeStartError: ``end`` is smaller than ``start``
        """
        validate_path(Command.VIEW, path)

        if is_directory(path):
            if view_range is not None:
                raise RangeOnDirectoryError(
                    "The `view_range` parameter is not allowed when `path` points to a directory."
                )
            return self._view_directory(path)

        file_content = read_file(path)
        if view_range is None:
            return self._make_output(file_content, path)

        file_lines = file_content.split("\n")
        start, end = self._check_view_range(view_range, len(file_lines))
        selected = file_lines[start - 1 :] if end == -1 else file_lines[start - 1 : end]

        return self._make_output("\n".join(selected), path, init_line=start)

    async def create(self, path: str, file_text: str) -> str:
        """Create a new file. Existing files are never overwritten.

        Args:
            path: Absolute path of the file to create (parent must exist)
            file_text: Content of the new file

        Returns:
            Confirmation naming the created path
        """
        validate_path(Command.CREATE, path)
        write_file(path, file_text)

        # Baseline snapshot: the created text itself
        self.history.push(path, file_text)
        logger.info(f"Created {path} ({len(file_text)} characters)")

        return f"File created successfully at: {path}"

    async def string_replace(
        self,
        path: str,
        old_str: str,
        new_str: str | None = None,
        replace_all: bool = False,
    ) -> str:
        """Replace a literal string in a file.

        Tabs in ``old_str`` and ``new_str`` are expanded before matching; the
        file itself is matched and rewritten as is, so text outside the
        replaced spans keeps its bytes. Unless ``replace_all`` is set,
        ``old_str`` must occur exactly once.

        Args:
            path: Absolute path to the file
            old_str: Exact text to find
            new_str: Replacement text (empty when omitted)
            replace_all: Replace every occurrence instead of requiring a unique one

        Returns:
            Edit summary with a preview around the first replacement

        Raises:
            NoMatchError: ``old_str`` does not occur in the file
            AmbiguousMatchError: Several occurrences and ``replace_all`` is False
        """
        validate_path(Command.STRING_REPLACE, path)

        file_content = read_file(path)
        old_text = expand_tabs(old_str, self.tab_size)
        new_text = expand_tabs(new_str or "", self.tab_size)

        if not old_text:
            raise NoMatchError(f"No replacement was performed, old_str is empty for {path}.")

        occurrences = file_content.count(old_text)
        if occurrences == 0:
            raise NoMatchError(
                f"No replacement was performed, old_str `{old_str}` did not appear verbatim "
                f"in {path}."
            )

        if occurrences > 1 and not replace_all:
            lines = self._match_lines(file_content, old_text)
            raise AmbiguousMatchError(
                f"No replacement was performed. Multiple occurrences of old_str `{old_str}` "
                f"in lines {', '.join(str(line) for line in lines)}. Add more context, by "
                "including lines around the string to replace in old_str and new_str to "
                "ensure old_str is unique within the file, or set replace_all=true.",
                lines=lines,
            )

        if replace_all:
            new_content = file_content.replace(old_text, new_text)
        else:
            new_content = file_content.replace(old_text, new_text, 1)

        write_file(path, new_content)
        self.history.push(path, file_content)
        logger.info(f"Replaced {occurrences} occurrence(s) in {path}")

        # Preview around the first replacement
        replacement_line = file_content.count("\n", 0, file_content.find(old_text))
        start_line = max(0, replacement_line - self.snippet_lines)
        end_line = replacement_line + self.snippet_lines + new_text.count("\n")
        snippet = "\n".join(new_content.split("\n")[start_line : end_line + 1])

        plural = "s" if occurrences > 1 else ""
        return (
            f"The file {path} has been edited ({occurrences} replacement{plural} made). "
            + self._make_output(snippet, f"a snippet of {path}", init_line=start_line + 1)
            + REVIEW_HINT
        )

    async def insert(self, path: str, insert_line: int, new_str: str) -> str:
        """Insert text after a given number of lines.

        Args:
            path: Absolute path to the file
            insert_line: Number of existing lines to keep above the new text
                (0 inserts at the top, the line count appends at the end)
            new_str: Text to insert

        Returns:
            Edit summary with a preview around the inserted lines

        Raises:
            InvalidLineIndexError: ``insert_line`` is outside ``[0, line_count]``
        """
        validate_path(Command.INSERT, path)

        file_content = read_file(path)
        new_text = expand_tabs(new_str, self.tab_size)
        file_lines = file_content.split("\n")
        n_lines_file = len(file_lines)

        if insert_line < 0 or insert_line > n_lines_file:
            raise InvalidLineIndexError(
                f"Invalid `insert_line` parameter: {insert_line}. It should be within the "
                f"range of lines of the file: [0, {n_lines_file}]"
            )

        new_text_lines = new_text.split("\n")
        new_file_lines = file_lines[:insert_line] + new_text_lines + file_lines[insert_line:]
        snippet_lines = (
            file_lines[max(0, insert_line - self.snippet_lines) : insert_line]
            + new_text_lines
            + file_lines[insert_line : insert_line + self.snippet_lines]
        )

        write_file(path, "\n".join(new_file_lines))
        self.history.push(path, file_content)
        logger.info(f"Inserted {len(new_text_lines)} line(s) into {path} after line {insert_line}")

        return (
            f"The file {path} has been edited. "
            + self._make_output(
                "\n".join(snippet_lines),
                "a snippet of the edited file",
                init_line=max(1, insert_line - self.snippet_lines + 1),
            )
            + REVIEW_HINT
        )

    async def undo_edit(self, path: str) -> str:
        """Restore the most recent snapshot recorded for ``path``.

        Args:
            path: Absolute path to the file

        Returns:
            Confirmation followed by the full restored content

        Raises:
            NoHistoryError: No snapshot is recorded for ``path``
        """
        validate_path(Command.UNDO_EDIT, path)

        if not self.history.has_history(path):
            raise NoHistoryError(f"No edit history found for {path}.")

        snapshot = self.history.peek(path)

        write_file(path, snapshot)
        self.history.pop(path)
        logger.info(f"Undid last edit to {path} (remaining={self.history.depth(path)})")

        return f"Last edit to {path} undone successfully. {self._make_output(snapshot, path)}"

    def _view_directory(self, path: str) -> str:
        depth = self.config.editor.listing_depth
        listing = "\n".join(list_directory(path, max_depth=depth))
        return (
            f"Here's the files and directories up to {depth} levels deep in {path}, "
            f"excluding hidden items:\n{listing}\n"
        )

    @staticmethod
    def _check_view_range(view_range: Sequence[int], n_lines_file: int) -> tuple[int, int]:
        """Validate ``view_range`` against the file's line count."""
        start, end = view_range
        shown = list(view_range)

        if start < 1 or start > n_lines_file:
            raise InvalidRangeError(
                f"Invalid `view_range`: {shown}. Its first element `{start}` should be within "
                f"the range of lines of the file: [1, {n_lines_file}]"
            )

        if end != -1:
            if end > n_lines_file:
                raise InvalidRangeError(
                    f"Invalid `view_range`: {shown}. Its second element `{end}` should be "
                    f"smaller than the number of lines in the file: `{n_lines_file}`"
                )
            if end < start:
                raise EndBeforeStartError(
                    f"Invalid `view_range`: {shown}. Its second element `{end}` should be "
                    f"larger or equal than its first `{start}`"
                )

        return start, end

    @staticmethod
    def _match_lines(content: str, needle: str) -> list[int]:
        """1-indexed line numbers where a non-overlapping match of ``needle`` starts."""
        lines: list[int] = []
        index = content.find(needle)
        while index != -1:
            line = content.count("\n", 0, index) + 1
            if not lines or lines[-1] != line:
                lines.append(line)
            index = content.find(needle, index + len(needle))
        return lines

    def _make_output(self, file_content: str, file_descriptor: str, init_line: int = 1) -> str:
        return make_output(
            file_content, file_descriptor, init_line=init_line, tab_size=self.tab_size
        )
