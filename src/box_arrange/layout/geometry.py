"""Geometric primitives for layout computation."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .options import Axis


# Edges accepted by Rect.divided
VALID_EDGES = {"min_x", "max_x", "min_y", "max_y"}


def round_half_away(value: float) -> float:
    """Round to the nearest integer, ties away from zero (0.5 -> 1, -0.5 -> -1)."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def round_up(value: float) -> float:
    return float(math.ceil(value))


@dataclass(frozen=True)
class Size:
    """A width/height pair in pixel space."""

    width: float
    height: float

    def __add__(self, other: Size) -> Size:
        return Size(self.width + other.width, self.height + other.height)

    @property
    def minimum(self) -> float:
        return min(self.width, self.height)

    @property
    def maximum(self) -> float:
        return max(self.width, self.height)

    def main(self, axis: Axis) -> float:
        """Extent along ``axis``."""
        return self.width if axis is Axis.HORIZONTAL else self.height

    def cross(self, axis: Axis) -> float:
        """Extent perpendicular to ``axis``."""
        return self.height if axis is Axis.HORIZONTAL else self.width

    def with_width(self, width: float) -> Size:
        return Size(width, self.height)

    def with_height(self, height: float) -> Size:
        return Size(self.width, height)

    def with_main(self, axis: Axis, value: float) -> Size:
        return self.with_width(value) if axis is Axis.HORIZONTAL else self.with_height(value)

    def with_cross(self, axis: Axis, value: float) -> Size:
        return self.with_height(value) if axis is Axis.HORIZONTAL else self.with_width(value)

    def inset(self, insets: EdgeInsets) -> Size:
        """Shrink by ``insets``, never below zero."""
        return Size(
            max(0.0, self.width - insets.horizontal),
            max(0.0, self.height - insets.vertical),
        )

    def rounded_up(self) -> Size:
        return Size(round_up(self.width), round_up(self.height))

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}


Size.ZERO = Size(0.0, 0.0)


@dataclass(frozen=True)
class EdgeInsets:
    """Insets from each edge of a rectangle."""

    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0

    @classmethod
    def uniform(cls, value: float) -> EdgeInsets:
        return cls(value, value, value, value)

    @classmethod
    def symmetric(cls, vertical: float = 0.0, horizontal: float = 0.0) -> EdgeInsets:
        return cls(top=vertical, left=horizontal, bottom=vertical, right=horizontal)

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in pixel space."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_size(cls, size: Size, x: float = 0.0, y: float = 0.0) -> Rect:
        return cls(x, y, size.width, size.height)

    @classmethod
    def from_center(cls, cx: float, cy: float, size: Size) -> Rect:
        return cls(cx - size.width / 2, cy - size.height / 2, size.width, size.height)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def main_origin(self, axis: Axis) -> float:
        return self.x if axis is Axis.HORIZONTAL else self.y

    def cross_origin(self, axis: Axis) -> float:
        return self.y if axis is Axis.HORIZONTAL else self.x

    def main_end(self, axis: Axis) -> float:
        return self.right if axis is Axis.HORIZONTAL else self.bottom

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px <= self.right and self.y <= py <= self.bottom

    def offset_by(self, dx: float = 0.0, dy: float = 0.0) -> Rect:
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def inset_by(self, dx: float = 0.0, dy: float = 0.0) -> Rect:
        """Shrink symmetrically, keeping the center when the inset exceeds the extent."""
        width = max(0.0, self.width - 2 * dx)
        height = max(0.0, self.height - 2 * dy)
        cx, cy = self.center
        return Rect.from_center(cx, cy, Size(width, height))

    def inset(self, insets: EdgeInsets) -> Rect:
        size = self.size.inset(insets)
        return Rect(self.x + insets.left, self.y + insets.top, size.width, size.height)

    def relative(self, x: float, y: float, size: Size) -> Rect:
        """Place ``size`` at fractional position (x, y) of the leftover space.

        ``relative(0.5, 0.5, s)`` centers; ``relative(1, 0, s)`` pins to the
        top-right corner.
        """
        return Rect(
            self.x + (self.width - size.width) * x,
            self.y + (self.height - size.height) * y,
            size.width,
            size.height,
        )

    def divided(self, distance: float, edge: str = "min_y") -> tuple[Rect, Rect]:
        """Split into (slice, remainder), taking ``distance`` from ``edge``."""
        if edge not in VALID_EDGES:
            raise ValueError(
                f"Unknown edge '{edge}'. Use one of: {', '.join(sorted(VALID_EDGES))}."
            )
        if edge in ("min_x", "max_x"):
            d = min(max(distance, 0.0), self.width)
            rest = self.width - d
            if edge == "min_x":
                return (
                    Rect(self.x, self.y, d, self.height),
                    Rect(self.x + d, self.y, rest, self.height),
                )
            return (
                Rect(self.right - d, self.y, d, self.height),
                Rect(self.x, self.y, rest, self.height),
            )
        d = min(max(distance, 0.0), self.height)
        rest = self.height - d
        if edge == "min_y":
            return (
                Rect(self.x, self.y, self.width, d),
                Rect(self.x, self.y + d, self.width, rest),
            )
        return (
            Rect(self.x, self.bottom - d, self.width, d),
            Rect(self.x, self.y, self.width, rest),
        )

    def cell(self, column: int, columns: int, row: int = 0, rows: int = 1) -> Rect:
        """Return one cell of a uniform ``columns`` x ``rows`` grid."""
        if columns <= 0 or rows <= 0:
            raise ValueError("Grid must have at least one column and one row.")
        w = self.width / columns
        h = self.height / rows
        return Rect(self.x + w * column, self.y + h * row, w, h)

    def rounded(self) -> Rect:
        """Snap to the pixel grid: center to nearest (ties away from zero), size up."""
        cx, cy = self.center
        return Rect.from_center(
            round_half_away(cx),
            round_half_away(cy),
            self.size.rounded_up(),
        )

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}
