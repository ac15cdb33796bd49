"""Line-numbered previews of file content.

Output mirrors ``cat -n``: a right-justified line number, a tab, then the
line text. Tabs in the content are expanded before numbering.
"""

DEFAULT_TAB_SIZE = 4
LINE_NUMBER_WIDTH = 6


def expand_tabs(text: str, tab_size: int = DEFAULT_TAB_SIZE) -> str:
    """Replace every tab character with ``tab_size`` spaces.

    Unlike ``str.expandtabs`` this does not align to tab stops, so the same
    snippet expands identically wherever it appears in a line.
    """
    return text.replace("\t", " " * tab_size)


def number_lines(text: str, init_line: int = 1) -> str:
    """Prefix each line of ``text`` with its line number, starting at ``init_line``."""
    return "\n".join(
        f"{i + init_line:>{LINE_NUMBER_WIDTH}}\t{line}" for i, line in enumerate(text.split("\n"))
    )


def make_output(
    file_content: str,
    file_descriptor: str,
    init_line: int = 1,
    expand: bool = True,
    tab_size: int = DEFAULT_TAB_SIZE,
) -> str:
    """Render ``file_content`` as a numbered preview with a descriptive header.

    Args:
        file_content: Text to render
        file_descriptor: What the text is, e.g. a path or "a snippet of <path>"
        init_line: Line number shown for the first line
        expand: Expand tabs before numbering
        tab_size: Spaces per tab when expanding

    Returns:
        Header line followed by the numbered text and a trailing newline

    Example:
        >>> print(make_output("one\\ntwo", "/tmp/a.txt", init_line=3))
        Here's the result of running `cat -n` on /tmp/a.txt:
             3	one
             4	two
    """
    if expand:
        file_content = expand_tabs(file_content, tab_size)

    numbered = number_lines(file_content, init_line)
    return f"Here's the result of running `cat -n` on {file_descriptor}:\n{numbered}\n"
