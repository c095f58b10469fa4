"""Per-level reflow state passed down the recursive segmenter."""

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class ReflowState:
    """Layout parameters for one level of recursion.

    Each time a decoration is stripped, the segmenter recurses with a
    derived state whose start column has advanced by the decoration's
    visual width. The target width never shrinks; wrapping always compares
    absolute columns against it.

    Attributes:
        tab_visual_width: Columns between tab stops.
        line_visual_width: Maximum column for wrapped lines.
        start_column: Column at which the current (stripped) text begins.
        use_soft_tabs: Whether restored indentation uses spaces only.
        depth: Number of decorations stripped so far.
    """

    tab_visual_width: int
    line_visual_width: int
    start_column: int
    use_soft_tabs: bool
    depth: int = 0

    def indented(self, width: int) -> "ReflowState":
        """Derive the state for text that starts `width` columns further right."""
        return replace(self, start_column=self.start_column + width, depth=self.depth + 1)
