"""Editor integration helpers.

A host editor supplies a document, an optional selection, and the cursor
line. The span to reflow is the selection if it is non-empty, otherwise the
paragraph under the cursor: the run of non-blank lines containing it.
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from reflow.config import ReflowConfig
from reflow.reflower import Reflower

logger = logging.getLogger(__name__)

_LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True, slots=True)
class TextSpan:
    """A span of a document as character offsets.

    Attributes:
        start: Offset of the first character.
        end: Offset one past the last character.
    """

    start: int
    end: int

    @property
    def is_empty(self) -> bool:
        """Whether the span covers no characters."""
        return self.end <= self.start


def line_spans(document: str) -> list[TextSpan]:
    """Compute the span of every line, excluding line terminators."""
    spans: list[TextSpan] = []
    position = 0
    for match in _LINE_BREAK_PATTERN.finditer(document):
        spans.append(TextSpan(start=position, end=match.start()))
        position = match.end()
    spans.append(TextSpan(start=position, end=len(document)))
    return spans


def find_paragraph_span(document: str, cursor_line: int) -> TextSpan | None:
    """Find the paragraph containing a line.

    Args:
        document: Full document text.
        cursor_line: Zero-based line index of the cursor.

    Returns:
        Span from the start of the paragraph's first line to the end of its
        last line, or None if the line is blank or out of range.
    """
    spans = line_spans(document)
    if not 0 <= cursor_line < len(spans):
        return None

    def is_blank(index: int) -> bool:
        span = spans[index]
        return not document[span.start : span.end].strip()

    if is_blank(cursor_line):
        return None

    first = cursor_line
    while first > 0 and not is_blank(first - 1):
        first -= 1

    last = cursor_line
    while last + 1 < len(spans) and not is_blank(last + 1):
        last += 1

    return TextSpan(start=spans[first].start, end=spans[last].end)


def reflow_span(
    document: str,
    selection: TextSpan | None = None,
    cursor_line: int | None = None,
    config: ReflowConfig | Mapping[str, Any] | None = None,
) -> str | None:
    """Reflow the selection, or the paragraph under the cursor.

    Args:
        document: Full document text.
        selection: Selected span, if any.
        cursor_line: Zero-based cursor line, used when the selection is empty.
        config: Reflow configuration.

    Returns:
        The document with the span replaced, or None when there is nothing
        to reflow (no selection and no paragraph under the cursor).
    """
    span: TextSpan | None = None
    if selection is not None and not selection.is_empty:
        span = selection
    elif cursor_line is not None:
        span = find_paragraph_span(document, cursor_line)

    if span is None:
        logger.debug("Nothing to reflow")
        return None

    replacement = Reflower(config).reflow(document[span.start : span.end])
    return document[: span.start] + replacement + document[span.end :]
