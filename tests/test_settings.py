"""Tests for box_arrange.layout.settings."""

import pytest

from box_arrange.layout.geometry import Rect, Size
from box_arrange.layout.options import Alignment, Axis, Distribution
from box_arrange.layout.settings import ArrangementSettings


class TestArrangementSettings:
    def test_defaults(self):
        s = ArrangementSettings()
        assert s.axis == "vertical"
        assert s.alignment == "fill"
        assert s.distribution == "standard"
        assert s.direction == "left_to_right"
        assert s.spacing == 0.0
        assert s.slope == 0.0

    def test_accepts_enum_members(self):
        s = ArrangementSettings(axis=Axis.HORIZONTAL, alignment=Alignment.TRAILING)
        assert s.axis == "horizontal"
        assert s.alignment == "trailing"

    def test_rejects_unknown_option(self):
        with pytest.raises(ValueError):
            ArrangementSettings(distribution="stretch")

    def test_rejects_negative_spacing(self):
        with pytest.raises(ValueError):
            ArrangementSettings(spacing=-1)

    def test_request(self):
        s = ArrangementSettings(distribution=Distribution.EQUAL_CENTERING, spacing=8)
        request = s.request([Size(1, 1)], Rect(0, 0, 10, 10))
        assert request.distribution is Distribution.EQUAL_CENTERING
        assert request.spacing == 8

    def test_to_kwargs(self):
        kwargs = ArrangementSettings(slope=0.25).to_kwargs()
        assert kwargs["slope"] == 0.25
        assert set(kwargs) == {
            "spacing", "slope", "axis", "alignment", "distribution", "direction",
        }
