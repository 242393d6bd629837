"""TextBlockMeasurer: total size of a vertical stack of text blocks."""

from __future__ import annotations

import math
from typing import Protocol, Sequence

from ..core.validation import validate_number
from ..layout.geometry import Size


class TextMeasurable(Protocol):
    """A block of text that can report its wrapped bounding size."""

    text: str

    def bounding_size(self, max_width: float | None = None) -> Size:
        ...


class TextBlockMeasurer:
    """Sizes a container for text blocks stacked top to bottom."""

    @staticmethod
    def measure(
        blocks: Sequence[TextMeasurable],
        max_width: float,
        spacing: float = 0.0,
        preserve_empty: bool = False,
    ) -> Size:
        """Measure ``blocks`` stacked vertically with ``spacing`` between them.

        Width is the widest block, height the sum of block heights plus the
        gaps; both are rounded up per block. Empty blocks are dropped unless
        ``preserve_empty``, in which case they still take a gap but no space.
        """
        blocks = list(blocks)
        max_width = validate_number(max_width, "max_width", allow_negative=False)
        spacing = validate_number(spacing, "spacing", allow_negative=False)
        if not preserve_empty:
            blocks = [b for b in blocks if b.text]
        if not blocks:
            return Size.ZERO

        width = 0.0
        height = 0.0
        for block in blocks:
            if not block.text:
                continue
            bounds = block.bounding_size(max_width)
            width = max(width, float(math.ceil(bounds.width)))
            height += math.ceil(bounds.height)
        height += spacing * (len(blocks) - 1)
        return Size(width, float(height))


def measure_text_blocks(
    blocks: Sequence[TextMeasurable],
    max_width: float,
    spacing: float = 0.0,
    preserve_empty: bool = False,
) -> Size:
    """Functional form of :meth:`TextBlockMeasurer.measure`."""
    return TextBlockMeasurer.measure(blocks, max_width, spacing, preserve_empty)
