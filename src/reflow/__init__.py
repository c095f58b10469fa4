"""reflow - Re-wrap plain text while preserving indentation, lists and comments."""

from reflow.config import ReflowConfig, Settings
from reflow.editor import TextSpan, find_paragraph_span, reflow_span
from reflow.exceptions import (
    InternalInconsistencyError,
    InvalidInputError,
    NestingTooDeepError,
    ReflowError,
    SettingsError,
)
from reflow.pipeline import (
    BlockSegmenter,
    LineClassification,
    ParagraphWrapper,
    ReflowState,
    classify_line,
    common_prefix,
)
from reflow.reflower import Reflower, reflow

__version__ = "0.1.0"

__all__ = [
    "BlockSegmenter",
    "InternalInconsistencyError",
    "InvalidInputError",
    "LineClassification",
    "NestingTooDeepError",
    "ParagraphWrapper",
    "ReflowConfig",
    "ReflowError",
    "ReflowState",
    "Reflower",
    "Settings",
    "SettingsError",
    "TextSpan",
    "classify_line",
    "common_prefix",
    "find_paragraph_span",
    "reflow",
    "reflow_span",
]
