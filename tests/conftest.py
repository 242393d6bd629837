"""Shared test fixtures for box-arrange."""

import pytest

from box_arrange.layout.geometry import Rect, Size
from box_arrange.text.metrics import clear_metrics_cache


@pytest.fixture
def three_widths():
    """Three boxes of width 100, 150 and 50, all 20 tall."""
    return [Size(100, 20), Size(150, 20), Size(50, 20)]


@pytest.fixture
def wide_frame():
    """400x50 frame at the origin."""
    return Rect(0, 0, 400, 50)


@pytest.fixture
def tall_frame():
    """100x300 frame at the origin."""
    return Rect(0, 0, 100, 300)


class FakeItem:
    """Arranged item with a fixed natural size that records measurement calls."""

    def __init__(self, width, height):
        self._natural = Size(width, height)
        self.frame = None
        self.candidates = []
        self.natural_calls = 0

    def natural_size(self):
        self.natural_calls += 1
        return self._natural

    def size_needed(self, candidate):
        self.candidates.append(candidate)
        return Size(min(self._natural.width, candidate.width), self._natural.height)


@pytest.fixture
def make_item():
    return FakeItem


@pytest.fixture(autouse=True)
def _fresh_metrics_cache():
    clear_metrics_cache()
    yield
    clear_metrics_cache()
