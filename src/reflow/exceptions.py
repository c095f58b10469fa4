"""Exceptions for reflow text re-wrapping."""

from dataclasses import dataclass


class ReflowError(Exception):
    """Base exception for all reflow errors."""

    pass


@dataclass
class InvalidInputError(ReflowError):
    """A caller violated an input contract.

    Raised when:
    - Multi-line text is passed where a single-line fragment is required
    - A width is not a positive integer
    - A start column is negative
    """

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class InternalInconsistencyError(ReflowError):
    """The block segmenter failed to make progress.

    No input should trigger this; it indicates a defect in the
    segmentation rules rather than a problem with the text.

    Attributes:
        message: Description of the error.
        line_index: Index of the line the segmenter was stuck on.
    """

    message: str
    line_index: int

    def __str__(self) -> str:
        return f"{self.message} (line {self.line_index})"


@dataclass
class NestingTooDeepError(ReflowError):
    """Decorations are nested deeper than the recursion guard allows.

    Attributes:
        message: Description of the error.
        depth: Nesting depth that was reached.
        limit: The configured maximum depth.
    """

    message: str
    depth: int
    limit: int

    def __str__(self) -> str:
        return f"{self.message} (depth: {self.depth}, limit: {self.limit})"


@dataclass
class SettingsError(ReflowError):
    """A settings file could not be read or contains invalid values."""

    message: str

    def __str__(self) -> str:
        return self.message
