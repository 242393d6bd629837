"""Box arrangement: geometry, options, distribution policies and the arranger."""

from .options import Alignment, Axis, Distribution, LayoutDirection
from .geometry import EdgeInsets, Rect, Size
from .arranger import ArrangementRequest, ArrangementResult, BoxArranger, arrange_sizes
from .orchestrator import ArrangementOrchestrator, arrange_items, measure_items
from .settings import ArrangementSettings

__all__ = [
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
    "arrange_items",
    "arrange_sizes",
    "measure_items",
]
