"""Decoration pattern tables for line classification.

A decoration is the first whitespace-delimited token on a line when that
token is structure rather than prose: a list bullet or number, a comment
sigil, or an opening comment delimiter. The tables here decide which
tokens count and how they behave when a line is wrapped:

- Leading-only decorations appear on the first wrapped line of a block and
  are replaced by blank space on continuation lines (``-``, ``1.``, ``/*``).
- Extending decorations are repeated on every wrapped line (``#``, ``//``).
"""

import re
import string

# List markers. Numerals are bounded to 3 digits and letters to 2 so that
# ordinary words ending a sentence ("end.") are not mistaken for markers.
LIST_STYLE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"[-+*]"),  # Bullets
    re.compile(r"[0-9]{1,3}\."),  # 1. 10. 100.
    re.compile(r"[a-z]{1,2}\."),  # a. ab.
    re.compile(r"[A-Z]{1,2}\."),  # A. AB.
    re.compile(r"\([0-9]{1,3}\)"),  # (1)
    re.compile(r"\([a-z]{1,2}\)"),  # (a)
    re.compile(r"\([A-Z]{1,2}\)"),  # (A)
)

# Comment openers whose closing delimiter ends the block, so they must not
# be repeated on continuation lines.
NON_EXTENDING_OPENERS: tuple[str, ...] = ("<!--", "/*", "(*")

# Line comment markers that are repeated on every line.
EXTENDING_MARKERS: tuple[str, ...] = ("#", "//", ";", "--")

PUNCTUATION_CHARACTERS = frozenset(string.punctuation)


def is_list_marker(token: str) -> bool:
    """Check if a token is a list bullet or an ordinal marker.

    Args:
        token: A single whitespace-free token.

    Returns:
        True if the token matches one of the list styles.
    """
    return any(pattern.fullmatch(token) for pattern in LIST_STYLE_PATTERNS)


def is_punctuation_token(token: str) -> bool:
    """Check if a token consists only of punctuation characters."""
    return bool(token) and all(char in PUNCTUATION_CHARACTERS for char in token)


def starts_non_extending(token: str) -> bool:
    """Check if a token begins with a block comment opener."""
    return token.startswith(NON_EXTENDING_OPENERS)


def starts_extending(token: str) -> bool:
    """Check if a token begins with a line comment marker."""
    return token.startswith(EXTENDING_MARKERS)
