"""Tests for the ParagraphWrapper component."""

from reflow import ParagraphWrapper, ReflowState


def _state(width: int, start_column: int = 0, tab_width: int = 8) -> ReflowState:
    """Create a state for wrapping tests."""
    return ReflowState(
        tab_visual_width=tab_width,
        line_visual_width=width,
        start_column=start_column,
        use_soft_tabs=True,
    )


class TestJoin:
    """Line joining tests."""

    def test_line_breaks_become_spaces(self) -> None:
        """Ordinary line breaks collapse to one space."""
        wrapper = ParagraphWrapper()

        assert wrapper.join(["one", "  two", "three"]) == "one two three"

    def test_sentence_end_gets_two_spaces(self) -> None:
        """A break after sentence punctuation becomes two spaces."""
        wrapper = ParagraphWrapper()

        assert wrapper.join(["Done.", "Next?", "Yes!", "ok"]) == "Done.  Next?  Yes!  ok"

    def test_trailing_whitespace_absorbed(self) -> None:
        """Trailing whitespace before a break does not add spacing."""
        wrapper = ParagraphWrapper()

        assert wrapper.join(["end.   ", "more  ", "text"]) == "end.  more text"

    def test_inner_spacing_kept(self) -> None:
        """Spacing within a line is preserved."""
        wrapper = ParagraphWrapper()

        assert wrapper.join(["one.  two"]) == "one.  two"


class TestWrap:
    """Greedy wrapping tests."""

    def test_short_line_unchanged(self) -> None:
        """Text that fits stays on one line."""
        wrapper = ParagraphWrapper()

        assert wrapper.wrap(["This is a short line."], _state(80)) == ["This is a short line."]

    def test_wraps_at_width(self) -> None:
        """Lines break before the word that would pass the width."""
        wrapper = ParagraphWrapper()
        result = wrapper.wrap(["This is a much longer line, with more text."], _state(30))

        assert result == ["This is a much longer line,", "with more text."]

    def test_exact_fit(self) -> None:
        """A line may end exactly at the width."""
        wrapper = ParagraphWrapper()

        assert wrapper.wrap(["abcd efgh"], _state(9)) == ["abcd efgh"]
        assert wrapper.wrap(["abcd efgh"], _state(8)) == ["abcd", "efgh"]

    def test_long_word_overflows(self) -> None:
        """A word wider than the line is placed alone and overflows."""
        wrapper = ParagraphWrapper()
        result = wrapper.wrap(
            ["This IsAReallyLongWordThatDoesntFit in a single line."], _state(20)
        )

        assert result == ["This", "IsAReallyLongWordThatDoesntFit", "in a single line."]

    def test_start_column_reduces_room(self) -> None:
        """Wrapping compares absolute columns against the width."""
        wrapper = ParagraphWrapper()

        assert wrapper.wrap(["abcd efgh"], _state(12, start_column=3)) == ["abcd efgh"]
        assert wrapper.wrap(["abcd efgh"], _state(11, start_column=3)) == ["abcd", "efgh"]

    def test_separate_first_and_rest_columns(self) -> None:
        """First and continuation lines can start at different columns."""
        wrapper = ParagraphWrapper()
        result = wrapper.wrap(
            ["This is the first line.", "This is the second line."],
            _state(12),
            first_column=2,
            rest_column=0,
        )

        assert result == ["This is", "the first", "line.  This", "is the", "second line."]

    def test_leading_whitespace_dropped(self) -> None:
        """Whitespace at the start of an output line is discarded."""
        wrapper = ParagraphWrapper()

        assert wrapper.wrap(["   indented words"], _state(40)) == ["indented words"]

    def test_sentence_spacing_not_carried_to_next_line(self) -> None:
        """Double spacing at a break point disappears."""
        wrapper = ParagraphWrapper()
        result = wrapper.wrap(["One two.", "Three four."], _state(10))

        assert result == ["One two.", "Three", "four."]

    def test_no_words(self) -> None:
        """Whitespace-only input wraps to nothing."""
        wrapper = ParagraphWrapper()

        assert wrapper.wrap(["   "], _state(10)) == []
