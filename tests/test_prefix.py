"""Tests for common-prefix detection."""

from reflow import common_prefix


class TestCommonPrefix:
    """Shared decoration detection tests."""

    def test_fewer_than_two_lines(self) -> None:
        """A single line has no common prefix."""
        assert common_prefix([]) == ""
        assert common_prefix(["# comment"]) == ""

    def test_comment_prefix(self) -> None:
        """A shared comment marker and its space are found."""
        assert common_prefix(["# one", "# two"]) == "# "

    def test_stops_at_word_characters(self) -> None:
        """Identical words are content, not prefix."""
        assert common_prefix(["// same start", "// same end"]) == "// "

    def test_shorter_line_stops_extension(self) -> None:
        """A bare marker line limits the prefix to the marker."""
        assert common_prefix(["# one", "#", "# two"]) == "#"

    def test_indentation(self) -> None:
        """Shared indentation is a prefix."""
        assert common_prefix(["    one", "  two", "   three"]) == "  "

    def test_indented_comment(self) -> None:
        """Indentation and marker are found together."""
        assert common_prefix(["    ;; one", "    ;; two"]) == "    ;; "

    def test_no_shared_characters(self) -> None:
        """Lines that differ immediately share nothing."""
        assert common_prefix(["/* one", "   two"]) == ""

    def test_sibling_bullets_are_not_a_prefix(self) -> None:
        """List markers repeated on each line are not shared decoration."""
        assert common_prefix(["- one", "- two"]) == ""
        assert common_prefix(["* one", "* two"]) == ""

    def test_indentation_before_bullets(self) -> None:
        """Indentation before sibling bullets is still shared."""
        assert common_prefix(["  - one", "  - two"]) == "  "

    def test_comment_around_bullets(self) -> None:
        """A comment marker is shared even when list items follow it."""
        assert common_prefix(["# - one", "# - two"]) == "# "

    def test_partial_token_is_cut(self) -> None:
        """A prefix that ends inside a token is cut back."""
        assert common_prefix(["(a) one", "(a) two"]) == ""
        assert common_prefix(["## one", "# two"]) == ""

    def test_blank_line_has_no_prefix(self) -> None:
        """An empty line in the run means no prefix."""
        assert common_prefix(["# one", "", "# two"]) == ""
