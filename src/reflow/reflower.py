"""Reflower - Main public interface for re-wrapping text.

Provides:
- reflow(): Module-level convenience function
- Reflower.reflow(): Strict reflow, raises on internal failure
- Reflower.reflow_safe(): Returns the input unchanged on failure
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

from reflow.config import ReflowConfig
from reflow.exceptions import ReflowError
from reflow.pipeline.segmenter import BlockSegmenter
from reflow.pipeline.state import ReflowState
from reflow.pipeline.width import spaces_to_tabs, tabs_to_spaces

logger = logging.getLogger(__name__)

# Leading/trailing whitespace runs are kept verbatim only when they contain
# a line break; indentation of the first line belongs to the body.
_HEAD_PATTERN = re.compile(r"^\s*(?:\r\n|\r|\n)")
_TAIL_PATTERN = re.compile(r"(?:\r\n|\r|\n)\s*\Z")
_LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")


def split_head_body_tail(text: str) -> tuple[str, str, str]:
    """Split text into leading blank lines, body, and trailing blank lines.

    Args:
        text: Text to split.

    Returns:
        Tuple of (head, body, tail) whose concatenation is `text`.
    """
    head_match = _HEAD_PATTERN.match(text)
    head = head_match.group(0) if head_match else ""

    rest = text[len(head) :]
    tail_match = _TAIL_PATTERN.search(rest)
    tail = tail_match.group(0) if tail_match else ""

    return head, rest[: len(rest) - len(tail)], tail


def _coerce_config(config: ReflowConfig | Mapping[str, Any] | None) -> ReflowConfig:
    if config is None:
        return ReflowConfig()
    if isinstance(config, ReflowConfig):
        return config
    return ReflowConfig.from_mapping(config)


class Reflower:
    """Re-wraps text to a visual width while preserving its decorations.

    The pipeline:
    1. Split off leading and trailing blank lines (kept verbatim)
    2. Split the body into lines and expand tab indentation
    3. Segment into blocks and reflow each one recursively
    4. Restore tab indentation if the body used tabs and soft tabs are off
    5. Rejoin with newlines between the original head and tail

    Example:
        reflower = Reflower(ReflowConfig(line_visual_width=72))

        # Strict (raises ReflowError on internal failure)
        text = reflower.reflow(selection)

        # Safe (returns the input unchanged on failure)
        text = reflower.reflow_safe(selection)
    """

    def __init__(self, config: ReflowConfig | Mapping[str, Any] | None = None) -> None:
        """Initialize the reflower.

        Args:
            config: A ReflowConfig, a mapping of configuration keys, or None
                for the defaults.

        Raises:
            InvalidInputError: If the configuration is invalid.
        """
        self._config = _coerce_config(config)
        self._segmenter = BlockSegmenter()

    @property
    def config(self) -> ReflowConfig:
        """The configuration in use."""
        return self._config

    def reflow(self, text: str) -> str:
        """Reflow text.

        Args:
            text: Text to reflow. Any text is accepted.

        Returns:
            The reflowed text.

        Raises:
            NestingTooDeepError: If decorations nest unreasonably deep.
            InternalInconsistencyError: If segmentation fails to progress.
        """
        config = self._config
        head, body, tail = split_head_body_tail(text)
        uses_tabs = "\t" in body

        lines = _LINE_BREAK_PATTERN.split(body)
        lines = tabs_to_spaces(lines, config.tab_visual_width, config.start_column)

        state = ReflowState(
            tab_visual_width=config.tab_visual_width,
            line_visual_width=config.line_visual_width,
            start_column=config.start_column,
            use_soft_tabs=config.use_soft_tabs,
        )
        output = self._segmenter.reflow_lines(lines, state)

        if uses_tabs and not config.use_soft_tabs:
            output = spaces_to_tabs(output, config.tab_visual_width, config.start_column)

        logger.debug("Reflowed %d lines into %d", len(lines), len(output))
        return head + "\n".join(output) + tail

    def reflow_safe(self, text: str) -> str:
        """Reflow text, returning it unchanged on any reflow failure.

        Args:
            text: Text to reflow.

        Returns:
            The reflowed text, or `text` itself if reflowing failed.
        """
        try:
            return self.reflow(text)
        except ReflowError:
            logger.exception("Reflow failed; leaving text unchanged")
            return text


def reflow(text: str, config: ReflowConfig | Mapping[str, Any] | None = None) -> str:
    """Reflow text with the given configuration.

    Args:
        text: Text to reflow.
        config: A ReflowConfig, a mapping with any of ``line_visual_width``,
            ``tab_visual_width``, ``start_column`` and ``use_soft_tabs``, or
            None for the defaults (80, 8, 0, True).

    Returns:
        The reflowed text.
    """
    return Reflower(config).reflow(text)
