"""Unit tests for mcp_editor.tools.paths module."""

import pytest

from mcp_editor.exceptions import (
    FileAlreadyExistsError,
    NotAbsoluteError,
    PathError,
    PathIsDirectoryError,
    PathNotFoundError,
)
from mcp_editor.tools.paths import Command, validate_path


@pytest.mark.unit
@pytest.mark.tools
class TestValidatePath:
    """Tests for validate_path."""

    def test_relative_path_suggests_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        with pytest.raises(NotAbsoluteError) as exc_info:
            validate_path(Command.VIEW, "notes.txt")

        message = str(exc_info.value)
        assert "The path notes.txt is not an absolute path, it should start with `/`." in message
        assert f"Maybe you meant {tmp_path / 'notes.txt'}?" in message

    @pytest.mark.parametrize("command", list(Command))
    def test_relative_path_rejected_for_every_command(self, command):
        with pytest.raises(NotAbsoluteError):
            validate_path(command, "relative/path.txt")

    @pytest.mark.parametrize(
        "command", [Command.VIEW, Command.STRING_REPLACE, Command.INSERT, Command.UNDO_EDIT]
    )
    def test_missing_path_rejected(self, tmp_path, command):
        missing = tmp_path / "missing.txt"

        with pytest.raises(PathNotFoundError) as exc_info:
            validate_path(command, str(missing))

        assert str(exc_info.value) == (
            f"The path {missing} does not exist. Please provide a valid path."
        )

    def test_create_accepts_missing_path(self, tmp_path):
        validate_path(Command.CREATE, str(tmp_path / "new.txt"))

    def test_create_rejects_existing_file(self, sample_file):
        with pytest.raises(FileAlreadyExistsError) as exc_info:
            validate_path(Command.CREATE, str(sample_file))

        assert str(exc_info.value).startswith(f"File already exists at: {sample_file}.")

    @pytest.mark.parametrize(
        "command", [Command.CREATE, Command.STRING_REPLACE, Command.INSERT, Command.UNDO_EDIT]
    )
    def test_directory_only_for_view(self, sample_tree, command):
        with pytest.raises(PathIsDirectoryError) as exc_info:
            validate_path(command, str(sample_tree))

        assert "only the `view` command can be used on directories" in str(exc_info.value)

    def test_view_accepts_directory_and_file(self, sample_tree, sample_file):
        validate_path(Command.VIEW, str(sample_tree))
        validate_path(Command.VIEW, str(sample_file))

    def test_accepts_command_names(self, sample_file):
        validate_path("view", str(sample_file))

    def test_errors_share_path_error_base(self):
        with pytest.raises(PathError):
            validate_path(Command.VIEW, "relative.txt")
