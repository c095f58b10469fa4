"""Recursive block segmentation and reflow.

The segmenter walks a run of lines, splits it into blocks, and reflows each
block according to its shape:

- A decoration shared by every line (``# ``, ``// ``, indentation) is
  stripped, the remainder reflowed, and the decoration repeated on each
  output line.
- A list item (leading-only decoration) absorbs the lines indented deeper
  than its marker. The marker is stripped, the item reflowed, and the
  marker restored on the first line with blank space under it after.
- Everything else is a paragraph, wrapped as a unit.

Blocks never cross blank lines. Every recursive call strips a non-empty
decoration, so the start column grows and the text shrinks at each level.
"""

import logging
import re
from collections.abc import Sequence

from reflow.exceptions import InternalInconsistencyError, NestingTooDeepError
from reflow.pipeline.classifier import LineClassification, classify_line
from reflow.pipeline.prefix import common_prefix
from reflow.pipeline.state import ReflowState
from reflow.pipeline.width import strip_visual_indent, visual_length
from reflow.pipeline.wrapper import ParagraphWrapper

logger = logging.getLogger(__name__)

# Each level strips one decoration; real text nests a handful deep.
MAX_NESTING_DEPTH = 100

_BLANK_LINE_PATTERN = re.compile(r"^\s*$")


class BlockSegmenter:
    """Splits lines into blocks and reflows each block recursively.

    Example:
        segmenter = BlockSegmenter()
        state = ReflowState(
            tab_visual_width=8, line_visual_width=40, start_column=0, use_soft_tabs=True
        )
        output = segmenter.reflow_lines(["# A long comment ..."], state)
    """

    def __init__(self, wrapper: ParagraphWrapper | None = None) -> None:
        """Initialize the segmenter.

        Args:
            wrapper: Paragraph wrapper to use. Defaults to a new ParagraphWrapper.
        """
        self._wrapper = wrapper if wrapper is not None else ParagraphWrapper()

    def reflow_lines(self, lines: Sequence[str], state: ReflowState) -> list[str]:
        """Reflow a run of lines.

        Args:
            lines: Lines to reflow, with tabs in leading whitespace expanded.
            state: Layout parameters for this level.

        Returns:
            The reflowed lines, in order.

        Raises:
            NestingTooDeepError: If decorations nest past MAX_NESTING_DEPTH.
            InternalInconsistencyError: If a block fails to consume any line.
        """
        if state.depth > MAX_NESTING_DEPTH:
            raise NestingTooDeepError(
                message="Decorations nested too deeply",
                depth=state.depth,
                limit=MAX_NESTING_DEPTH,
            )

        lines = list(lines)

        prefix = common_prefix(lines)
        if prefix:
            logger.debug("Common prefix %r across %d lines", prefix, len(lines))
            return self.retry_without_prefix(prefix, lines, state)

        output: list[str] = []
        start = 0
        while start < len(lines):
            end = self._reflow_block(lines, start, state, output)
            if end <= start:
                raise InternalInconsistencyError(
                    message="Block segmenter did not advance",
                    line_index=start,
                )
            start = end

        return output

    def retry_without_prefix(
        self, prefix: str, lines: Sequence[str], state: ReflowState
    ) -> list[str]:
        """Strip a decoration from every line, reflow, and repeat it on each result.

        Args:
            prefix: Decoration shared by the lines (comment marker or indentation).
            lines: Lines carrying the decoration.
            state: Layout parameters for this level.

        Returns:
            Reflowed lines, each starting with `prefix`.
        """
        width = visual_length(prefix, state.start_column, state.tab_visual_width)
        stripped = [self._remove_decoration(prefix, width, line, state) for line in lines]
        reflowed = self.reflow_lines(stripped, state.indented(width))
        return [prefix + line for line in reflowed]

    def retry_without_leading(
        self, leading: str, lines: Sequence[str], state: ReflowState
    ) -> list[str]:
        """Strip a first-line decoration, reflow, and restore it.

        The decoration goes back on the first result line; continuation
        lines get blank space of the same visual width.

        Args:
            leading: Decoration of the first line (list marker or comment opener,
                including the whitespace around it).
            lines: The first line followed by its continuation lines.
            state: Layout parameters for this level.

        Returns:
            Reflowed lines with the decoration restored.
        """
        width = visual_length(leading, state.start_column, state.tab_visual_width)
        stripped = [self._remove_decoration(leading, width, line, state) for line in lines]
        reflowed = self.reflow_lines(stripped, state.indented(width))

        padding = " " * width
        result: list[str] = []
        for index, line in enumerate(reflowed):
            if index == 0:
                result.append(leading + line)
            elif line:
                result.append(padding + line)
            else:
                result.append(line)
        return result

    def _remove_decoration(
        self, decoration: str, width: int, line: str, state: ReflowState
    ) -> str:
        """Remove a decoration, or up to its width of indentation, from a line."""
        if line.startswith(decoration):
            return line[len(decoration) :]
        return strip_visual_indent(line, width, state.start_column, state.tab_visual_width)

    def _reflow_block(
        self, lines: list[str], start: int, state: ReflowState, output: list[str]
    ) -> int:
        """Reflow the block beginning at `start`.

        Appends the reflowed lines to `output` and returns the index of the
        first line not consumed.
        """
        if _BLANK_LINE_PATTERN.match(lines[start]):
            output.append(lines[start])
            return start + 1

        blank_end = start + 1
        while blank_end < len(lines) and not _BLANK_LINE_PATTERN.match(lines[blank_end]):
            blank_end += 1
        block = lines[start:blank_end]

        if len(block) > 1:
            prefix = common_prefix(block)
            if prefix:
                logger.debug("Block prefix %r for lines %d-%d", prefix, start, blank_end - 1)
                output.extend(self.retry_without_prefix(prefix, block, state))
                return blank_end

        matches = [classify_line(line) for line in block]
        first = matches[0]

        if len(block) == 1:
            output.extend(self._reflow_single_line(first, state))
            return start + 1

        if first.decoration_kind == "LEADING_ONLY":
            consumed = self._reflow_list_item(block, matches, state, output)
        else:
            consumed = self._reflow_run(block, matches, state, output)
        return start + consumed

    def _reflow_single_line(self, match: LineClassification, state: ReflowState) -> list[str]:
        """Reflow a block made of one line, dispatching on its decoration."""
        kind = match.decoration_kind

        if kind == "LEADING_ONLY":
            return self.retry_without_leading(match.leading, [match.raw_line], state)

        if kind == "EXTENDING":
            return self.retry_without_prefix(match.leading, [match.raw_line], state)

        if match.leading:
            # Block-style indentation: keep it on every wrapped line
            return self.retry_without_prefix(match.leading, [match.raw_line], state)

        return self._wrapper.wrap([match.raw_line], state)

    def _reflow_list_item(
        self,
        block: list[str],
        matches: list[LineClassification],
        state: ReflowState,
        output: list[str],
    ) -> int:
        """Reflow a multi-line block whose first line is a list item.

        Returns:
            Number of lines consumed from the block.
        """
        first = matches[0]
        start_indent = first.indent

        item_end = 1
        while item_end < len(block) and matches[item_end].indent > start_indent:
            item_end += 1

        if item_end > 1:
            logger.debug("List item %r with %d continuation lines", first.decoration_token, item_end - 1)
            output.extend(self.retry_without_leading(first.leading, block[:item_end], state))
            return item_end

        # A later line at the same indentation without a marker means the
        # marker was a word that happened to land at the start of a line.
        para_end = self._last_paragraph_line(matches, start_indent, lowest=1)
        if para_end is None:
            logger.debug("Single-line list item %r", first.decoration_token)
            output.extend(self.retry_without_leading(first.leading, block[:1], state))
            return 1

        logger.debug("Marker %r read as paragraph text", first.decoration_token)
        output.extend(self._reflow_paragraph(block[: para_end + 1], matches, para_end, state))
        return para_end + 1

    def _reflow_run(
        self,
        block: list[str],
        matches: list[LineClassification],
        state: ReflowState,
        output: list[str],
    ) -> int:
        """Reflow a multi-line block whose first line is not a list item.

        Returns:
            Number of lines consumed from the block.
        """
        start_indent = matches[0].indent

        # The first line always qualifies as a paragraph end
        maybe_end = self._last_paragraph_line(matches, start_indent, lowest=1)
        if maybe_end is None:
            maybe_end = 0

        # Misindented lines after it are rewrap damage; a decorated line is
        # the start of something else.
        para_end = maybe_end + 1
        while para_end < len(block) and matches[para_end].decoration_kind == "NONE":
            para_end += 1

        output.extend(self._reflow_paragraph(block[:para_end], matches, maybe_end, state))
        return para_end

    def _last_paragraph_line(
        self, matches: list[LineClassification], start_indent: int, lowest: int
    ) -> int | None:
        """Find the last line that can end a paragraph begun at the first line.

        Scans backward for a line no deeper than the first line that is not
        itself a list item.
        """
        for index in range(len(matches) - 1, lowest - 1, -1):
            match = matches[index]
            if match.indent <= start_indent and match.decoration_kind != "LEADING_ONLY":
                return index
        return None

    def _reflow_paragraph(
        self,
        lines: list[str],
        matches: list[LineClassification],
        consistent_end: int,
        state: ReflowState,
    ) -> list[str]:
        """Wrap lines as one paragraph, keeping first-line and block indentation.

        The first line keeps its own indentation. Continuation lines take the
        second line's indentation when that line is part of the consistently
        indented run (index <= consistent_end), and the first line's otherwise.
        """
        first_indent = matches[0].leading_whitespace_before
        if len(lines) > 1 and consistent_end >= 1:
            rest_indent = matches[1].leading_whitespace_before
        else:
            rest_indent = first_indent

        tab_width = state.tab_visual_width
        first_column = state.start_column + visual_length(first_indent, state.start_column, tab_width)
        rest_column = state.start_column + visual_length(rest_indent, state.start_column, tab_width)

        wrapped = self._wrapper.wrap(lines, state, first_column=first_column, rest_column=rest_column)
        if not wrapped:
            return list(lines)

        return [first_indent + wrapped[0]] + [rest_indent + line for line in wrapped[1:]]
