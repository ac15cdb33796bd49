"""Unit tests for mcp_editor.utils.rendering module."""

import pytest

from mcp_editor.utils.rendering import expand_tabs, make_output, number_lines


@pytest.mark.unit
class TestExpandTabs:
    """Tests for expand_tabs."""

    def test_each_tab_becomes_four_spaces(self):
        assert expand_tabs("\tx\t\ty") == "    x        y"

    def test_custom_tab_size(self):
        assert expand_tabs("\tx", tab_size=2) == "  x"

    def test_not_aligned_to_tab_stops(self):
        """A tab after text still expands to a fixed width."""
        assert expand_tabs("ab\tc") == "ab    c"

    def test_text_without_tabs_unchanged(self):
        assert expand_tabs("plain text\n") == "plain text\n"


@pytest.mark.unit
class TestNumberLines:
    """Tests for number_lines."""

    def test_right_justified_six_wide(self):
        assert number_lines("a\nb") == "     1\ta\n     2\tb"

    def test_starting_line_number(self):
        assert number_lines("x", init_line=120) == "   120\tx"

    def test_trailing_newline_yields_empty_numbered_line(self):
        assert number_lines("a\n") == "     1\ta\n     2\t"


@pytest.mark.unit
class TestMakeOutput:
    """Tests for make_output."""

    def test_header_and_body(self):
        output = make_output("one\ntwo", "/tmp/a.txt")

        assert output == (
            "Here's the result of running `cat -n` on /tmp/a.txt:\n"
            "     1\tone\n"
            "     2\ttwo\n"
        )

    def test_init_line_offsets_numbers(self):
        output = make_output("three", "a snippet of /tmp/a.txt", init_line=3)

        assert output.endswith("     3\tthree\n")
        assert "a snippet of /tmp/a.txt" in output

    def test_tabs_expanded_before_numbering(self):
        output = make_output("\tindented", "f")
        assert "     1\t    indented" in output

    def test_expand_disabled_keeps_tabs(self):
        output = make_output("\tindented", "f", expand=False)
        assert "     1\t\tindented" in output

    def test_empty_content_renders_single_line(self):
        output = make_output("", "empty.txt")
        assert output == "Here's the result of running `cat -n` on empty.txt:\n     1\t\n"
