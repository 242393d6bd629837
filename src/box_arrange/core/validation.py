"""Input validation with clear error messages for layout callers."""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Sequence

from ..layout.geometry import Rect, Size


def validate_number(value: Any, name: str, allow_negative: bool = True) -> float:
    """Validate a finite real number and return it as float."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}.")
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}.")
    if not allow_negative and value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}.")
    return value


def validate_size(size: Any, name: str = "size") -> Size:
    """Validate a Size (or a (width, height) pair) with non-negative extents."""
    if isinstance(size, Size):
        width, height = size.width, size.height
    elif isinstance(size, (tuple, list)) and len(size) == 2:
        width, height = size
    else:
        raise TypeError(
            f"{name} must be a Size or a (width, height) pair, "
            f"got {type(size).__name__}."
        )
    return Size(
        validate_number(width, f"{name}.width", allow_negative=False),
        validate_number(height, f"{name}.height", allow_negative=False),
    )


def validate_sizes(sizes: Any) -> tuple[Size, ...]:
    """Validate an ordered sequence of sizes."""
    if isinstance(sizes, (str, bytes)) or not isinstance(sizes, Sequence):
        raise TypeError(
            f"sizes must be a sequence of Size, got {type(sizes).__name__}."
        )
    return tuple(validate_size(s, f"sizes[{i}]") for i, s in enumerate(sizes))


def validate_frame(frame: Any) -> Rect:
    """Validate the bounding frame: finite origin, non-negative extents."""
    if not isinstance(frame, Rect):
        raise TypeError(f"frame must be a Rect, got {type(frame).__name__}.")
    return Rect(
        validate_number(frame.x, "frame.x"),
        validate_number(frame.y, "frame.y"),
        validate_number(frame.width, "frame.width", allow_negative=False),
        validate_number(frame.height, "frame.height", allow_negative=False),
    )


def validate_same_length(expected: int, actual: int, what: str) -> None:
    """Fail fast when two parallel sequences disagree in length."""
    if expected != actual:
        raise ValueError(
            f"Expected {expected} {what}, got {actual}. "
            "Each item must produce exactly one measurement."
        )
