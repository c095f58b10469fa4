"""Pipeline components for reflowing text."""

from reflow.pipeline.classifier import (
    DECORATION_KINDS,
    DecorationKind,
    LineClassification,
    classify_line,
    classify_token,
)
from reflow.pipeline.prefix import common_prefix
from reflow.pipeline.segmenter import MAX_NESTING_DEPTH, BlockSegmenter
from reflow.pipeline.state import ReflowState
from reflow.pipeline.width import (
    indent_for_width,
    spaces_to_tabs,
    tab_span,
    tabs_to_spaces,
    visual_length,
)
from reflow.pipeline.wrapper import ParagraphWrapper

__all__ = [
    "BlockSegmenter",
    "DECORATION_KINDS",
    "DecorationKind",
    "LineClassification",
    "MAX_NESTING_DEPTH",
    "ParagraphWrapper",
    "ReflowState",
    "classify_line",
    "classify_token",
    "common_prefix",
    "indent_for_width",
    "spaces_to_tabs",
    "tab_span",
    "tabs_to_spaces",
    "visual_length",
]
