"""Greedy word wrapping of a single paragraph.

The paragraph's lines are joined into one run of text and broken again at
whitespace so that no line extends past the target column. Columns are
absolute: a paragraph nested inside decorations starts at the column where
those decorations end.
"""

import re
from collections.abc import Sequence

from reflow.pipeline.state import ReflowState
from reflow.pipeline.width import visual_length

# A sentence that ends at a line break is followed by two spaces.
_SENTENCE_BREAK_PATTERN = re.compile(r"([.!?])[ \t]*\n\s*")
_LINE_BREAK_PATTERN = re.compile(r"[ \t]*\n\s*")
_SEGMENT_PATTERN = re.compile(r"(\s*)(\S+)")


class ParagraphWrapper:
    """Wraps a paragraph to the target width of a ReflowState.

    Words are never broken: a word wider than the remaining space is placed
    on a line of its own and allowed to overflow.
    """

    def join(self, lines: Sequence[str]) -> str:
        """Join paragraph lines into a single line of text.

        Args:
            lines: Lines of one paragraph.

        Returns:
            The paragraph with line breaks replaced by spaces.
        """
        text = "\n".join(lines)
        text = _SENTENCE_BREAK_PATTERN.sub(r"\1  ", text)
        return _LINE_BREAK_PATTERN.sub(" ", text)

    def wrap(
        self,
        lines: Sequence[str],
        state: ReflowState,
        first_column: int | None = None,
        rest_column: int | None = None,
    ) -> list[str]:
        """Wrap a paragraph.

        Args:
            lines: Lines of one paragraph.
            state: Layout parameters; `line_visual_width` is the limit.
            first_column: Column where the first output line starts.
                Defaults to `state.start_column`.
            rest_column: Column where continuation lines start.
                Defaults to `state.start_column`.

        Returns:
            Wrapped lines without any leading whitespace.
        """
        if first_column is None:
            first_column = state.start_column
        if rest_column is None:
            rest_column = state.start_column

        tab_width = state.tab_visual_width
        text = self.join(lines)

        wrapped: list[str] = []
        current = ""
        line_start = first_column
        column = first_column

        for match in _SEGMENT_PATTERN.finditer(text):
            space, word = match.groups()

            if not current:
                # Leading whitespace of an output line is dropped
                current = word
                column = line_start + visual_length(word, line_start, tab_width)
                continue

            end = column + visual_length(space + word, column, tab_width)
            if end > state.line_visual_width:
                wrapped.append(current)
                line_start = rest_column
                current = word
                column = line_start + visual_length(word, line_start, tab_width)
            else:
                current += space + word
                column = end

        if current:
            wrapped.append(current)

        return wrapped
