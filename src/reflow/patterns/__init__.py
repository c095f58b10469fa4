"""Pattern tables for decoration classification."""

from reflow.patterns.decorations import (
    EXTENDING_MARKERS,
    LIST_STYLE_PATTERNS,
    NON_EXTENDING_OPENERS,
    PUNCTUATION_CHARACTERS,
    is_list_marker,
    is_punctuation_token,
    starts_extending,
    starts_non_extending,
)

__all__ = [
    "EXTENDING_MARKERS",
    "LIST_STYLE_PATTERNS",
    "NON_EXTENDING_OPENERS",
    "PUNCTUATION_CHARACTERS",
    "is_list_marker",
    "is_punctuation_token",
    "starts_extending",
    "starts_non_extending",
]
