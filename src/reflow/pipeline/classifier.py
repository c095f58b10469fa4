"""Line classification: split a line into decoration and content.

A line is read as leading whitespace, a candidate token, the whitespace
after it, and the remaining text. The candidate token is a decoration only
if it looks like a list marker or consists of punctuation; otherwise it is
folded back into the content.
"""

import re
from dataclasses import dataclass
from typing import Literal

from reflow.patterns.decorations import (
    is_list_marker,
    is_punctuation_token,
    starts_extending,
    starts_non_extending,
)

# Candidate token must be followed by whitespace; a lone token is content.
_CANDIDATE_PATTERN = re.compile(r"^(\s*)(\S+)(\s+)(.*)$")
_LEADING_SPACE_PATTERN = re.compile(r"^\s*")

# How a decoration behaves when its block is wrapped:
# NONE: no decoration; LEADING_ONLY: first wrapped line only;
# EXTENDING: repeated on every wrapped line.
DecorationKind = Literal["NONE", "LEADING_ONLY", "EXTENDING"]

DECORATION_KINDS: tuple[DecorationKind, ...] = ("NONE", "LEADING_ONLY", "EXTENDING")


@dataclass(frozen=True, slots=True)
class LineClassification:
    """A line split into its decoration and content.

    Attributes:
        raw_line: The line as given.
        leading: Everything before the content (whitespace, token, whitespace),
            or only the leading whitespace when there is no decoration.
        leading_whitespace_before: Whitespace before the decoration token.
        decoration_token: The decoration itself, empty when there is none.
        whitespace_after_token: Whitespace separating the token from the content.
        decoration_kind: Classification of the token.
        remaining_text: Content after the decoration.
    """

    raw_line: str
    leading: str
    leading_whitespace_before: str
    decoration_token: str
    whitespace_after_token: str
    decoration_kind: DecorationKind
    remaining_text: str

    @property
    def indent(self) -> int:
        """Number of whitespace characters before the decoration."""
        return len(self.leading_whitespace_before)


def classify_token(token: str) -> DecorationKind:
    """Classify a candidate decoration token.

    Rules, in order:
    1. List markers are leading-only.
    2. Punctuation tokens are leading-only when they open a block comment,
       extending when they start a line comment, and otherwise extending
       if a single character, leading-only if longer.
    3. Anything else is ordinary text.

    Args:
        token: A single whitespace-free token.

    Returns:
        The decoration kind for the token.
    """
    if is_list_marker(token):
        return "LEADING_ONLY"

    if is_punctuation_token(token):
        if starts_non_extending(token):
            return "LEADING_ONLY"
        if starts_extending(token):
            return "EXTENDING"
        if len(token) == 1:
            return "EXTENDING"
        return "LEADING_ONLY"

    return "NONE"


def classify_line(line: str) -> LineClassification:
    """Split a line into decoration and content.

    Never fails: any line, including an empty one, has a classification.

    Args:
        line: A single line of text without its line terminator.

    Returns:
        LineClassification describing the line.
    """
    match = _CANDIDATE_PATTERN.match(line)
    if match:
        before, token, after, rest = match.groups()
        kind = classify_token(token)
        if kind != "NONE":
            return LineClassification(
                raw_line=line,
                leading=before + token + after,
                leading_whitespace_before=before,
                decoration_token=token,
                whitespace_after_token=after,
                decoration_kind=kind,
                remaining_text=rest,
            )

    space_match = _LEADING_SPACE_PATTERN.match(line)
    before = space_match.group(0) if space_match else ""
    return LineClassification(
        raw_line=line,
        leading=before,
        leading_whitespace_before=before,
        decoration_token="",
        whitespace_after_token="",
        decoration_kind="NONE",
        remaining_text=line[len(before) :],
    )
