"""Text styles and styled text blocks."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from ..layout.geometry import Size
from .metrics import DEFAULT_FONT_SIZE, EstimatedTextMetrics, metrics_for


VALID_FONTS = {"system", "bold", "italic", "monospace"}
VALID_TEXT_ALIGNMENTS = {"natural", "left", "center", "right", "justified"}


@dataclass(frozen=True)
class TextStyle:
    """Font, size, color and paragraph alignment for a block of text."""

    font: str = "system"
    size: float = DEFAULT_FONT_SIZE
    color: str | None = None  # CSS color, None = inherit
    alignment: str = "natural"

    def __post_init__(self) -> None:
        if self.font not in VALID_FONTS:
            raise ValueError(
                f"Unknown font '{self.font}'. Use one of: {', '.join(sorted(VALID_FONTS))}."
            )
        if self.alignment not in VALID_TEXT_ALIGNMENTS:
            raise ValueError(
                f"Unknown text alignment '{self.alignment}'. "
                f"Use one of: {', '.join(sorted(VALID_TEXT_ALIGNMENTS))}."
            )
        if self.size <= 0:
            raise ValueError(f"Font size must be positive, got {self.size}.")

    def with_(
        self,
        font: str | None = None,
        size: float | None = None,
        color: str | None = None,
        alignment: str | None = None,
    ) -> TextStyle:
        """Copy with the given fields overridden; None keeps the current value."""
        changes = {
            k: v for k, v in
            (("font", font), ("size", size), ("color", color), ("alignment", alignment))
            if v is not None
        }
        return replace(self, **changes)


@dataclass(frozen=True)
class StyledText:
    """A block of text in one style; measurable via estimated font metrics."""

    text: str
    style: TextStyle = TextStyle()
    metrics: EstimatedTextMetrics | None = field(default=None, compare=False)

    @property
    def is_empty(self) -> bool:
        return not self.text

    def bounding_size(self, max_width: float | None = None) -> Size:
        """Size of the wrapped text when constrained to ``max_width``."""
        metrics = self.metrics if self.metrics is not None else metrics_for(self.style)
        return metrics.bounding_size(self.text, max_width)
