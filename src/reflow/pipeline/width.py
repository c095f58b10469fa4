"""Visual-width arithmetic for tab-indented text.

Every character occupies one column except tabs, which advance to the next
tab stop. Widths are therefore relative to the column a fragment starts at,
and callers pass that column explicitly.
"""

import re
from collections.abc import Iterable

from reflow.exceptions import InvalidInputError

# Only spaces and tabs count as indentation; other whitespace is content.
_LEADING_WHITESPACE_PATTERN = re.compile(r"^[ \t]*")


def tab_span(start_column: int, tab_width: int) -> int:
    """Columns consumed by a tab starting at a given column.

    Args:
        start_column: Column at which the tab character sits.
        tab_width: Distance between tab stops.

    Returns:
        Number of columns up to the next tab stop (1 to tab_width).
    """
    return tab_width - (start_column % tab_width)


def visual_length(text: str, start_column: int = 0, tab_width: int = 8) -> int:
    """Compute the visual width of a single-line fragment.

    Args:
        text: Fragment to measure. Must not contain line breaks.
        start_column: Column at which the fragment begins.
        tab_width: Distance between tab stops.

    Returns:
        Number of columns the fragment occupies.

    Raises:
        InvalidInputError: If the fragment contains a line break.
    """
    if "\n" in text or "\r" in text:
        raise InvalidInputError(message=f"Cannot measure multi-line text: {text!r}")

    column = start_column
    for char in text:
        if char == "\t":
            column += tab_span(column, tab_width)
        else:
            column += 1
    return column - start_column


def indent_for_width(width: int, tab_width: int, start_column: int = 0) -> str:
    """Build tab-based indentation covering a visual width.

    Args:
        width: Number of columns to cover.
        tab_width: Distance between tab stops.
        start_column: Column at which the indentation begins.

    Returns:
        Tabs followed by the spaces that remain after the last tab stop.
    """
    if start_column % tab_width:
        first_stop = tab_span(start_column, tab_width)
        if width < first_stop:
            return " " * width
        return "\t" + indent_for_width(width - first_stop, tab_width)

    return "\t" * (width // tab_width) + " " * (width % tab_width)


def leading_whitespace(line: str) -> str:
    """Return the run of spaces and tabs at the start of a line."""
    match = _LEADING_WHITESPACE_PATTERN.match(line)
    return match.group(0) if match else ""


def tabs_to_spaces(lines: Iterable[str], tab_width: int, start_column: int = 0) -> list[str]:
    """Rewrite the leading whitespace of each line using spaces only.

    Args:
        lines: Lines to convert.
        tab_width: Distance between tab stops.
        start_column: Column at which every line begins.

    Returns:
        Lines with tab indentation expanded to the equivalent spaces.
    """
    converted: list[str] = []
    for line in lines:
        indent = leading_whitespace(line)
        if "\t" in indent:
            width = visual_length(indent, start_column, tab_width)
            line = " " * width + line[len(indent) :]
        converted.append(line)
    return converted


def spaces_to_tabs(lines: Iterable[str], tab_width: int, start_column: int = 0) -> list[str]:
    """Rewrite the leading whitespace of each line using tabs where possible.

    Args:
        lines: Lines to convert.
        tab_width: Distance between tab stops.
        start_column: Column at which every line begins.

    Returns:
        Lines whose indentation uses tabs followed by any remaining spaces.
    """
    converted: list[str] = []
    for line in lines:
        indent = leading_whitespace(line)
        if indent:
            width = visual_length(indent, start_column, tab_width)
            line = indent_for_width(width, tab_width, start_column) + line[len(indent) :]
        converted.append(line)
    return converted


def strip_visual_indent(line: str, width: int, start_column: int = 0, tab_width: int = 8) -> str:
    """Remove at most `width` columns of leading whitespace from a line.

    Whitespace that would straddle the limit (a tab crossing it) is kept.

    Args:
        line: Line to strip.
        width: Maximum number of columns to remove.
        start_column: Column at which the line begins.
        tab_width: Distance between tab stops.

    Returns:
        The line without its leading indentation, up to the limit.
    """
    column = start_column
    limit = start_column + width
    index = 0
    while index < len(line) and line[index] in " \t":
        step = tab_span(column, tab_width) if line[index] == "\t" else 1
        if column + step > limit:
            break
        column += step
        index += 1
    return line[index:]
