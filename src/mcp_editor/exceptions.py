"""Custom exceptions for editor errors.

This module provides the hierarchy of exception classes raised by the editing
engine. Every exception is user-facing and recoverable: the dispatcher catches
them and converts them into error-flagged text responses.

Each class carries a machine-readable ``code`` used in error responses, while
``str(exc)`` is the human-friendly message shown to the caller.
"""


class EditorError(Exception):
    """Base exception for all editor errors.

    This is the root of the exception hierarchy. All custom editor exceptions
    should inherit from this class.
    """

    code = "editor_error"


class PathError(EditorError):
    """A path is not acceptable for the requested command."""

    code = "invalid_path"


class NotAbsoluteError(PathError):
    """Path argument is relative."""

    code = "not_absolute"


class PathIsDirectoryError(PathError):
    """A command other than ``view`` targets a directory."""

    code = "is_directory"


class FileAlreadyExistsError(PathError):
    """``create`` targets an existing file."""

    code = "already_exists"


class PathNotFoundError(PathError):
    """A command other than ``create`` targets a missing path."""

    code = "not_found"


class RangeOnDirectoryError(EditorError):
    """``view_range`` was supplied while viewing a directory."""

    code = "range_on_directory"


class ViewRangeError(EditorError):
    """``view_range`` is not valid for the file being viewed."""

    code = "invalid_view_range"


class InvalidRangeError(ViewRangeError):
    """A ``view_range`` bound lies outside the file's lines."""

    code = "invalid_range"


class EndBeforeStartError(ViewRangeError):
    """The ``view_range`` end is smaller than its start."""

    code = "end_before_start"


class NoMatchError(EditorError):
    """``old_str`` does not appear verbatim in the file."""

    code = "no_match"


class AmbiguousMatchError(EditorError):
    """``old_str`` matches several times and ``replace_all`` is not set.

    Attributes:
        lines: 1-indexed line numbers where a match starts
    """

    code = "ambiguous_match"

    def __init__(self, message: str, lines: list[int] | None = None):
        """Initialize AmbiguousMatchError.

        Args:
            message: Error message
            lines: 1-indexed line numbers where a match starts
        """
        self.lines = lines or []
        super().__init__(message)


class InvalidLineIndexError(EditorError):
    """``insert_line`` lies outside ``[0, line_count]``."""

    code = "invalid_line_index"


class NoHistoryError(EditorError):
    """Undo was requested for a path with no recorded edits."""

    code = "no_history"


class EditorIOError(EditorError):
    """Underlying read, write or stat failure.

    Attributes:
        path: Path the operation was acting on
        original_error: Original exception raised by the OS (optional)
    """

    code = "io_error"

    def __init__(
        self,
        message: str,
        path: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize EditorIOError.

        Args:
            message: Error message
            path: Path the operation was acting on
            original_error: Original exception raised by the OS
        """
        self.path = path
        self.original_error = original_error
        super().__init__(message)
