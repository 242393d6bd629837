"""Estimated font metrics for sizing text without a rendering backend.

Widths are estimated per character (about 6.5px per character at a 10px
font), and lines wrap greedily at word boundaries.
"""

from __future__ import annotations

import logging
import math

from ..layout.geometry import Size

logger = logging.getLogger(__name__)


DEFAULT_FONT_SIZE = 10.0
CHAR_WIDTH_RATIO = 0.65   # character width / font size
LINE_HEIGHT_RATIO = 1.2   # line height / font size
BOLD_WIDTH_FACTOR = 1.1


class EstimatedTextMetrics:
    """Character-width text metrics for one font configuration."""

    def __init__(self, font: str = "system", size: float = DEFAULT_FONT_SIZE) -> None:
        self._font = font
        self._size = size
        factor = BOLD_WIDTH_FACTOR if font == "bold" else 1.0
        self._char_width = size * CHAR_WIDTH_RATIO * factor
        self._line_height = size * LINE_HEIGHT_RATIO

    @property
    def char_width(self) -> float:
        return self._char_width

    @property
    def line_height(self) -> float:
        return self._line_height

    def text_width(self, text: str) -> float:
        return len(text) * self._char_width

    def wrap(self, text: str, max_width: float | None = None) -> list[str]:
        """Split ``text`` into lines no wider than ``max_width``.

        Explicit newlines always break. Words longer than a line are broken
        at character boundaries. ``max_width`` of None or <= 0 means
        unconstrained.
        """
        if max_width is None or max_width <= 0:
            return text.split("\n")
        per_line = max(1, math.floor(max_width / self._char_width))
        lines = []
        for paragraph in text.split("\n"):
            current = ""
            for word in paragraph.split(" "):
                while len(word) > per_line:
                    if current:
                        lines.append(current)
                        current = ""
                    lines.append(word[:per_line])
                    word = word[per_line:]
                candidate = f"{current} {word}" if current else word
                if len(candidate) <= per_line:
                    current = candidate
                else:
                    lines.append(current)
                    current = word
            lines.append(current)
        return lines

    def bounding_size(self, text: str, max_width: float | None = None) -> Size:
        """Bounding box of ``text`` wrapped to ``max_width``; empty text is zero."""
        if not text:
            return Size.ZERO
        lines = self.wrap(text, max_width)
        width = max(self.text_width(line) for line in lines)
        return Size(width, len(lines) * self._line_height)


# Created on first use per (font, size); never invalidated.
_METRICS_CACHE: dict[tuple[str, float], EstimatedTextMetrics] = {}


def metrics_for(style) -> EstimatedTextMetrics:
    """Shared metrics for a TextStyle's font configuration."""
    key = (style.font, float(style.size))
    metrics = _METRICS_CACHE.get(key)
    if metrics is None:
        logger.debug("creating text metrics for font=%s size=%s", *key)
        metrics = EstimatedTextMetrics(*key)
        _METRICS_CACHE[key] = metrics
    return metrics


def clear_metrics_cache() -> None:
    _METRICS_CACHE.clear()
