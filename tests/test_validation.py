"""Tests for box_arrange.core.validation."""

import pytest

from box_arrange.core.validation import (
    validate_frame,
    validate_number,
    validate_same_length,
    validate_size,
    validate_sizes,
)
from box_arrange.layout.geometry import Rect, Size


class TestValidateNumber:
    def test_int_becomes_float(self):
        assert validate_number(3, "x") == 3.0

    def test_bool_rejected(self):
        with pytest.raises(TypeError, match="real number"):
            validate_number(True, "x")

    def test_string_rejected(self):
        with pytest.raises(TypeError):
            validate_number("3", "x")

    def test_infinite_rejected(self):
        with pytest.raises(ValueError, match="finite"):
            validate_number(float("inf"), "x")

    def test_negative(self):
        assert validate_number(-1, "x") == -1.0
        with pytest.raises(ValueError, match="non-negative"):
            validate_number(-1, "x", allow_negative=False)


class TestValidateSize:
    def test_pair(self):
        assert validate_size((3, 4)) == Size(3, 4)

    def test_wrong_shape(self):
        with pytest.raises(TypeError):
            validate_size((1, 2, 3))

    def test_sizes_not_a_sequence(self):
        with pytest.raises(TypeError):
            validate_sizes(Size(1, 1))

    def test_sizes_reports_index(self):
        with pytest.raises(ValueError, match="sizes\\[1\\].height"):
            validate_sizes([Size(1, 1), Size(1, -1)])


class TestValidateFrame:
    def test_not_rect(self):
        with pytest.raises(TypeError, match="Rect"):
            validate_frame((0, 0, 1, 1))

    def test_negative_origin_allowed(self):
        assert validate_frame(Rect(-5, -5, 1, 1)) == Rect(-5, -5, 1, 1)

    def test_negative_extent(self):
        with pytest.raises(ValueError, match="frame.width"):
            validate_frame(Rect(0, 0, -1, 1))


class TestValidateSameLength:
    def test_mismatch(self):
        with pytest.raises(ValueError, match="Expected 2 items, got 1"):
            validate_same_length(2, 1, "items")
