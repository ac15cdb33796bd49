"""Integration tests for multi-step editing sessions through the dispatcher.

These tests exercise the dispatcher, argument validation, the editing engine,
undo history and the filesystem together, the way an MCP client drives them.
"""

import pytest

from mcp_editor.server.dispatcher import EditorDispatcher
from tests.helpers import assert_error_response, assert_success_response, numbered_lines


async def call(dispatcher: EditorDispatcher, name: str, **arguments) -> dict:
    return await dispatcher.dispatch(name, arguments)


@pytest.mark.integration
class TestViewProperties:
    """Properties of view across files of different shapes."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "content",
        ["", "single", "a\nb\nc", "a\nb\nc\n", "\n\n", "tab\there\n"],
    )
    async def test_full_view_numbers_every_line(self, dispatcher, tmp_path, content):
        path = tmp_path / "file.txt"
        path.write_text(content)

        response = await call(dispatcher, "view", path=str(path))

        assert_success_response(response)
        lines = numbered_lines(response["result"])
        expected = content.replace("\t", "    ").split("\n")
        assert [number for number, _ in lines] == list(range(1, len(expected) + 1))
        assert [text for _, text in lines] == expected

    @pytest.mark.asyncio
    async def test_every_valid_range(self, dispatcher, tmp_path):
        path = tmp_path / "file.txt"
        file_lines = [f"line {i}" for i in range(1, 7)]
        path.write_text("\n".join(file_lines))

        for start in range(1, 7):
            for end in range(start, 7):
                response = await call(dispatcher, "view", path=str(path), view_range=[start, end])

                assert numbered_lines(response["result"]) == [
                    (i, file_lines[i - 1]) for i in range(start, end + 1)
                ]

            response = await call(dispatcher, "view", path=str(path), view_range=[start, -1])
            assert [n for n, _ in numbered_lines(response["result"])] == list(range(start, 7))


@pytest.mark.integration
class TestEditingProperties:
    """Properties of create, string_replace and insert."""

    @pytest.mark.asyncio
    async def test_create_then_view_returns_created_text(self, dispatcher, tmp_path):
        path = tmp_path / "new.py"
        text = "import os\n\nprint(os.getcwd())\n"

        assert_success_response(await call(dispatcher, "create", path=str(path), file_text=text))
        response = await call(dispatcher, "view", path=str(path))

        assert "\n".join(line for _, line in numbered_lines(response["result"])) == text

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "same", "different content\n"])
    async def test_create_on_existing_path_always_fails(self, dispatcher, tmp_path, content):
        path = tmp_path / "existing.txt"
        path.write_text(content)

        response = await call(dispatcher, "create", path=str(path), file_text="same")

        assert_error_response(response, "already_exists")
        assert path.read_text() == content

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "old,new", [("two", "TWO"), ("two", ""), ("t", "TTT"), ("one\ntwo", "1")]
    )
    async def test_unique_replace_changes_length_by_difference(
        self, dispatcher, tmp_path, old, new
    ):
        path = tmp_path / "a.txt"
        path.write_text("one\ntwo\nxyz\n\tcc main.c\n")
        before = len(path.read_bytes())

        response = await call(
            dispatcher, "string_replace", path=str(path), old_str=old, new_str=new
        )

        assert_success_response(response)
        assert len(path.read_bytes()) - before == len(new) - len(old)
        assert path.read_text().endswith("\tcc main.c\n")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("k", [2, 3, 7])
    async def test_replace_all_replaces_every_occurrence(self, dispatcher, tmp_path, k):
        path = tmp_path / "a.txt"
        path.write_text("foo\n" * k)

        response = await call(
            dispatcher,
            "string_replace",
            path=str(path),
            old_str="foo",
            new_str="bar",
            replace_all=True,
        )

        assert_success_response(response)
        assert path.read_text() == "bar\n" * k
        assert f"({k} replacements made)" in response["result"]

    @pytest.mark.asyncio
    async def test_no_match_never_writes(self, dispatcher, sample_file):
        mtime = sample_file.stat().st_mtime_ns

        response = await call(
            dispatcher, "string_replace", path=str(sample_file), old_str="absent", new_str="x"
        )

        assert_error_response(response, "no_match")
        assert sample_file.read_text() == "one\ntwo\nthree\n"
        assert sample_file.stat().st_mtime_ns == mtime

    @pytest.mark.asyncio
    async def test_insert_at_boundaries(self, dispatcher, tmp_path):
        path = tmp_path / "a.txt"
        path.write_text("first\nlast")

        await call(dispatcher, "insert", path=str(path), insert_line=0, new_str="top")
        assert path.read_text() == "top\nfirst\nlast"

        await call(dispatcher, "insert", path=str(path), insert_line=3, new_str="bottom")
        assert path.read_text() == "top\nfirst\nlast\nbottom"


@pytest.mark.integration
class TestUndoSession:
    """Undo behavior across a sequence of edits."""

    @pytest.mark.asyncio
    async def test_documented_example(self, dispatcher, sample_file):
        path = str(sample_file)

        response = await call(dispatcher, "string_replace", path=path, old_str="two", new_str="TWO")
        assert "1 replacement made" in response["result"]
        assert sample_file.read_text() == "one\nTWO\nthree\n"

        assert_success_response(await call(dispatcher, "undo_edit", path=path))
        assert sample_file.read_text() == "one\ntwo\nthree\n"

        await call(dispatcher, "insert", path=path, insert_line=1, new_str="X")
        assert sample_file.read_text() == "one\nX\ntwo\nthree\n"

    @pytest.mark.asyncio
    async def test_create_replace_undo_sequence(self, dispatcher, tmp_path):
        path = str(tmp_path / "session.txt")

        await call(dispatcher, "create", path=path, file_text="alpha\nbeta\n")
        await call(dispatcher, "string_replace", path=path, old_str="beta", new_str="gamma")

        # First undo restores the post-create content
        response = await call(dispatcher, "undo_edit", path=path)
        assert_success_response(response)
        assert (tmp_path / "session.txt").read_text() == "alpha\nbeta\n"

        # Second undo consumes the creation snapshot
        response = await call(dispatcher, "undo_edit", path=path)
        assert_success_response(response)
        assert (tmp_path / "session.txt").read_text() == "alpha\nbeta\n"

        response = await call(dispatcher, "undo_edit", path=path)
        assert_error_response(response, "no_history")

    @pytest.mark.asyncio
    async def test_undo_unwinds_many_edits(self, dispatcher, sample_file):
        path = str(sample_file)
        states = [sample_file.read_text()]

        for i in range(5):
            await call(dispatcher, "insert", path=path, insert_line=0, new_str=f"edit {i}")
            states.append(sample_file.read_text())

        for expected in reversed(states[:-1]):
            assert_success_response(await call(dispatcher, "undo_edit", path=path))
            assert sample_file.read_text() == expected

        assert_error_response(await call(dispatcher, "undo_edit", path=path), "no_history")

    @pytest.mark.asyncio
    async def test_failed_operations_do_not_touch_history(self, dispatcher, sample_file):
        path = str(sample_file)

        await call(dispatcher, "view", path=path)
        await call(dispatcher, "view", path=path, view_range=[9, 10])
        await call(dispatcher, "insert", path=path, insert_line=99, new_str="x")
        await call(dispatcher, "string_replace", path=path, old_str="zzz", new_str="x")
        await call(dispatcher, "create", path=path, file_text="x")

        assert_error_response(await call(dispatcher, "undo_edit", path=path), "no_history")

    @pytest.mark.asyncio
    async def test_separate_dispatchers_have_separate_history(self, sample_file, default_settings):
        first = EditorDispatcher(config=default_settings)
        second = EditorDispatcher(config=default_settings)

        await call(first, "insert", path=str(sample_file), insert_line=0, new_str="x")

        assert_error_response(await call(second, "undo_edit", path=str(sample_file)), "no_history")
        assert_success_response(await call(first, "undo_edit", path=str(sample_file)))
