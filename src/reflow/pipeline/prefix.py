"""Detection of decorations shared by every line of a run.

A block of ``# ``-prefixed comment lines has a common prefix that can be
stripped, the content reflowed as plain text, and the prefix put back on
every output line.
"""

import re
from collections.abc import Sequence

from reflow.pipeline.classifier import classify_token

_WORD_CHARACTER_PATTERN = re.compile(r"\w")
_TOKEN_PATTERN = re.compile(r"(\s*)(\S+)")
_TRAILING_TOKEN_PATTERN = re.compile(r"\S+$")


def common_prefix(lines: Sequence[str]) -> str:
    """Find the longest decoration shared by all lines.

    The prefix:
    - is empty for fewer than two lines,
    - never extends into a word character (letters, digits, underscore),
    - stops where any line is shorter or differs,
    - ends on a token boundary in every line, so ``(a)`` and ``(b)`` do not
      share ``(``,
    - stops before the first leading-only token, so sibling bullets such as
      ``- one`` and ``- two`` do not share ``- ``.

    Args:
        lines: Lines to compare.

    Returns:
        The shared prefix, or an empty string.
    """
    if len(lines) < 2:
        return ""

    first = lines[0]
    length = 0
    while length < len(first):
        char = first[length]
        if _WORD_CHARACTER_PATTERN.match(char):
            break
        if any(len(line) <= length or line[length] != char for line in lines[1:]):
            break
        length += 1

    prefix = first[:length]
    if not prefix:
        return ""

    # Cut a partial token back to the preceding whitespace
    if not prefix[-1].isspace() and any(
        len(line) > length and not line[length].isspace() for line in lines
    ):
        prefix = _TRAILING_TOKEN_PATTERN.sub("", prefix)

    for match in _TOKEN_PATTERN.finditer(prefix):
        if classify_token(match.group(2)) == "LEADING_ONLY":
            return prefix[: match.start(2)]

    return prefix
