"""Tests for box_arrange.layout.options."""

import pytest

from box_arrange.layout.options import Alignment, Axis, Distribution, LayoutDirection


class TestCoerce:
    def test_member_passthrough(self):
        assert Axis.coerce(Axis.VERTICAL) is Axis.VERTICAL

    def test_string_value(self):
        assert Distribution.coerce("equal_centering") is Distribution.EQUAL_CENTERING
        assert LayoutDirection.coerce("right_to_left") is LayoutDirection.RIGHT_TO_LEFT

    def test_unknown_string(self):
        with pytest.raises(ValueError, match="Unknown alignment 'middle'"):
            Alignment.coerce("middle")

    def test_wrong_type(self):
        with pytest.raises(TypeError):
            Axis.coerce(1)

    def test_str(self):
        assert str(Alignment.CENTER) == "center"


class TestAxis:
    def test_cross(self):
        assert Axis.HORIZONTAL.cross is Axis.VERTICAL
        assert Axis.VERTICAL.cross is Axis.HORIZONTAL
