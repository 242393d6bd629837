"""Text styles and block measurement."""

from .metrics import EstimatedTextMetrics, metrics_for
from .style import StyledText, TextStyle
from .measurer import TextBlockMeasurer, measure_text_blocks

__all__ = [
    "EstimatedTextMetrics",
    "StyledText",
    "TextBlockMeasurer",
    "TextStyle",
    "measure_text_blocks",
    "metrics_for",
]
