"""box-arrange: deterministic arrangement of boxes along one axis of a frame."""

import logging

from ._version import __version__
from .layout import (
    Alignment,
    ArrangementOrchestrator,
    ArrangementRequest,
    ArrangementResult,
    ArrangementSettings,
    Axis,
    BoxArranger,
    Distribution,
    EdgeInsets,
    LayoutDirection,
    Rect,
    Size,
    arrange_items,
    arrange_sizes,
)
from .text import StyledText, TextBlockMeasurer, TextStyle, measure_text_blocks

logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    "__version__",
    "Alignment",
    "ArrangementOrchestrator",
    "ArrangementRequest",
    "ArrangementResult",
    "ArrangementSettings",
    "Axis",
    "BoxArranger",
    "Distribution",
    "EdgeInsets",
    "LayoutDirection",
    "Rect",
    "Size",
    "StyledText",
    "TextBlockMeasurer",
    "TextStyle",
    "arrange_items",
    "arrange_sizes",
    "measure_text_blocks",
]
