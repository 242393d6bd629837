"""Tests for box_arrange.layout.orchestrator."""

import pytest

from box_arrange.layout.geometry import Rect, Size
from box_arrange.layout.orchestrator import (
    ArrangementOrchestrator,
    apply_frames,
    arrange_items,
    candidate_size,
    measure_items,
)
from box_arrange.layout.settings import ArrangementSettings


class TestCandidateSize:
    def test_horizontal(self):
        assert candidate_size(Rect(0, 0, 300, 40), 0, 3, "horizontal") == Size(100, 40)

    def test_vertical_with_spacing(self):
        assert candidate_size(Rect(0, 0, 40, 300), 15, 3, "vertical") == Size(40, 90)


class TestMeasureItems:
    def test_equal_partition_strategy(self, make_item):
        items = [make_item(150, 10), make_item(50, 10), make_item(80, 10)]
        sizes = measure_items(items, Rect(0, 0, 300, 40), axis="horizontal")
        assert sizes == [Size(100, 10), Size(50, 10), Size(80, 10)]
        assert all(item.candidates == [Size(100, 40)] for item in items)
        assert all(item.natural_calls == 0 for item in items)

    @pytest.mark.parametrize("distribution", ["fill_proportionally", "equal_centering"])
    def test_natural_strategy(self, make_item, distribution):
        items = [make_item(150, 10), make_item(50, 10)]
        sizes = measure_items(
            items, Rect(0, 0, 300, 40), axis="horizontal", distribution=distribution,
        )
        assert sizes == [Size(150, 10), Size(50, 10)]
        assert all(item.candidates == [] for item in items)
        assert all(item.natural_calls == 1 for item in items)

    def test_missing_capability(self):
        with pytest.raises(TypeError, match="size_needed"):
            measure_items([object()], Rect(0, 0, 10, 10))

    def test_invalid_measurement(self):
        class Broken:
            frame = None

            def size_needed(self, candidate):
                return Size(-5, 10)

        with pytest.raises(ValueError, match="measurement\\[0\\]"):
            measure_items([Broken()], Rect(0, 0, 10, 10))


class TestArrangeItems:
    def test_writes_frames_in_order(self, make_item):
        items = [make_item(100, 20), make_item(150, 20), make_item(50, 20)]
        result = arrange_items(
            items, Rect(0, 0, 400, 50), spacing=10,
            axis="horizontal", distribution="fill_proportionally",
        )
        assert [item.frame for item in items] == result.to_list()
        assert [item.frame.x for item in items] == sorted(item.frame.x for item in items)

    def test_equal_spacing_with_constrained_measurement(self, make_item):
        items = [make_item(100, 20), make_item(150, 20), make_item(50, 20)]
        arrange_items(
            items, Rect(0, 0, 400, 50), spacing=10,
            axis="horizontal", distribution="equal_spacing",
        )
        # share = 410 / 3 - 10 = 126.67, so the 150-wide item is capped
        widths = [item.frame.width for item in items]
        assert widths[0] == 100
        assert widths[2] == 50
        assert widths[1] == 127

    def test_empty(self):
        result = arrange_items([], Rect(0, 0, 10, 10))
        assert len(result) == 0

    def test_apply_frames_length_mismatch(self, make_item):
        with pytest.raises(ValueError, match="Expected 1 frames, got 2"):
            apply_frames([make_item(1, 1)], [Rect(0, 0, 1, 1), Rect(1, 0, 1, 1)])


class TestArrangementOrchestrator:
    def test_default_settings(self):
        orchestrator = ArrangementOrchestrator()
        assert isinstance(orchestrator.settings, ArrangementSettings)
        assert orchestrator.settings.distribution == "standard"

    def test_arrange_uses_settings(self, make_item):
        settings = ArrangementSettings(
            axis="vertical", alignment="center", distribution="fill_equally", spacing=0,
        )
        items = [make_item(20, 500), make_item(40, 500)]
        result = ArrangementOrchestrator(settings).arrange(items, Rect(0, 0, 100, 200))
        assert [item.frame for item in items] == [
            Rect(40, 0, 20, 100),
            Rect(30, 100, 40, 100),
        ]
        assert result.spacing == 0

    def test_arrange_sizes(self):
        settings = ArrangementSettings(axis="horizontal", distribution="equal_spacing")
        result = ArrangementOrchestrator(settings).arrange_sizes(
            [Size(100, 10), Size(100, 10)], Rect(0, 0, 300, 10),
        )
        assert result.spacing == 100
        assert result[1].x == 200
