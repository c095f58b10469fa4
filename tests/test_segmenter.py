"""Tests for the BlockSegmenter component."""

import pytest

from reflow import BlockSegmenter, InternalInconsistencyError, NestingTooDeepError, ReflowState
from reflow.pipeline.segmenter import MAX_NESTING_DEPTH


def _state(width: int, start_column: int = 0) -> ReflowState:
    """Create a state for segmentation tests."""
    return ReflowState(
        tab_visual_width=8,
        line_visual_width=width,
        start_column=start_column,
        use_soft_tabs=True,
    )


class _StuckSegmenter(BlockSegmenter):
    """Segmenter whose blocks never consume a line."""

    def _reflow_block(self, lines, start, state, output):  # type: ignore[override]
        return start


class TestRetry:
    """Prefix-stripped recursion tests."""

    def test_prefix_repeated_on_every_line(self) -> None:
        """A stripped prefix is restored on each output line."""
        segmenter = BlockSegmenter()
        result = segmenter.retry_without_prefix("# ", ["# one two three"], _state(12))

        assert result == ["# one two", "# three"]

    def test_leading_restored_on_first_line_only(self) -> None:
        """A leading decoration is replaced by spaces on continuation lines."""
        segmenter = BlockSegmenter()
        result = segmenter.retry_without_leading("- ", ["- one two three"], _state(12))

        assert result == ["- one two", "  three"]

    def test_misaligned_continuation_tolerated(self) -> None:
        """Continuation lines lose at most the decoration's width of indentation."""
        segmenter = BlockSegmenter()
        result = segmenter.retry_without_leading("1. ", ["1. alpha beta", " gamma"], _state(40))

        assert result == ["1. alpha beta gamma"]

    def test_prefix_with_blank_lines(self) -> None:
        """Blank lines inside a prefixed run keep the prefix."""
        segmenter = BlockSegmenter()
        result = segmenter.retry_without_prefix("#", ["# a", "#", "# b"], _state(40))

        assert result == ["# a", "#", "# b"]


class TestReflowLines:
    """Block segmentation tests."""

    def test_blank_lines_emitted_unchanged(self) -> None:
        """Blank and whitespace-only lines separate blocks verbatim."""
        segmenter = BlockSegmenter()
        result = segmenter.reflow_lines(["a", "", "  ", "b"], _state(40))

        assert result == ["a", "", "  ", "b"]

    def test_empty_input(self) -> None:
        """No lines produce no output."""
        segmenter = BlockSegmenter()

        assert segmenter.reflow_lines([], _state(40)) == []

    def test_paragraph_joined(self) -> None:
        """A run of plain lines is one paragraph."""
        segmenter = BlockSegmenter()
        result = segmenter.reflow_lines(["one", "two", "three"], _state(40))

        assert result == ["one two three"]

    def test_list_item_with_continuation(self) -> None:
        """Deeper lines after a bullet belong to its item."""
        segmenter = BlockSegmenter()
        result = segmenter.reflow_lines(["- one", "  two", "- three"], _state(40))

        assert result == ["- one two", "- three"]

    def test_sibling_items_kept_apart(self) -> None:
        """Consecutive bullets at the same depth stay separate."""
        segmenter = BlockSegmenter()
        result = segmenter.reflow_lines(["- one", "- two", "- three"], _state(40))

        assert result == ["- one", "- two", "- three"]

    def test_marker_followed_by_plain_line_is_paragraph(self) -> None:
        """A marker whose next line is undecorated at the same depth is text."""
        segmenter = BlockSegmenter()
        result = segmenter.reflow_lines(["1. this is a para", "item broken up"], _state(24))

        assert result == ["1. this is a para item", "broken up"]

    def test_paragraph_ends_at_decorated_line(self) -> None:
        """A following list item terminates the paragraph."""
        segmenter = BlockSegmenter()
        result = segmenter.reflow_lines(["some text", "more text", "- item"], _state(40))

        assert result == ["some text more text", "- item"]

    def test_misindented_lines_folded_into_paragraph(self) -> None:
        """Deeper undecorated lines after a paragraph are rewrap damage."""
        segmenter = BlockSegmenter()
        result = segmenter.reflow_lines(["some text", "    more text"], _state(40))

        assert result == ["some text more text"]

    def test_first_line_and_block_indentation(self) -> None:
        """First-line indentation and continuation indentation are kept."""
        segmenter = BlockSegmenter()
        result = segmenter.reflow_lines(
            ["  This is the first line.", "This is the second line."], _state(12)
        )

        assert result == ["  This is", "the first", "line.  This", "is the", "second line."]

    def test_start_column_respected(self) -> None:
        """Wrapping accounts for text already to the left."""
        segmenter = BlockSegmenter()
        result = segmenter.reflow_lines(["abcd efgh"], _state(11, start_column=3))

        assert result == ["abcd", "efgh"]


class TestFailureModes:
    """Guard tests."""

    def test_no_progress_raises(self) -> None:
        """A block that consumes nothing is an internal error."""
        segmenter = _StuckSegmenter()

        with pytest.raises(InternalInconsistencyError) as exc_info:
            segmenter.reflow_lines(["text"], _state(40))

        assert exc_info.value.line_index == 0

    def test_depth_limit(self) -> None:
        """A state past the depth limit is rejected."""
        segmenter = BlockSegmenter()
        state = ReflowState(
            tab_visual_width=8,
            line_visual_width=80,
            start_column=0,
            use_soft_tabs=True,
            depth=MAX_NESTING_DEPTH + 1,
        )

        with pytest.raises(NestingTooDeepError):
            segmenter.reflow_lines(["text"], state)

    def test_pathological_nesting(self) -> None:
        """Hundreds of stacked bullets fail closed instead of overflowing."""
        segmenter = BlockSegmenter()

        with pytest.raises(NestingTooDeepError):
            segmenter.reflow_lines(["- " * 300 + "word"], _state(10_000))

    def test_indented_state_advances(self) -> None:
        """Each derived state moves right and one level deeper."""
        state = _state(40, start_column=2)
        inner = state.indented(3)

        assert inner.start_column == 5
        assert inner.depth == 1
        assert inner.line_visual_width == 40
