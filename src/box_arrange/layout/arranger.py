"""BoxArranger: places an ordered sequence of boxes along one axis of a frame."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Sequence

import numpy as np

from ..core.validation import validate_frame, validate_number, validate_sizes
from .distribution import apply_distribution, equal_share
from .geometry import Rect, Size
from .options import (
    Alignment,
    Axis,
    Distribution,
    LayoutDirection,
    DEFAULT_ALIGNMENT,
    DEFAULT_AXIS,
    DEFAULT_DIRECTION,
    DEFAULT_DISTRIBUTION,
)

logger = logging.getLogger(__name__)


DEFAULT_SPACING = 0.0
DEFAULT_SLOPE = 0.0


@dataclass(frozen=True)
class ArrangementRequest:
    """One arrangement call's inputs, validated on construction.

    ``spacing`` is the caller's baseline gap; distributions may use a
    different spacing internally, but never write it back here.
    """

    sizes: tuple[Size, ...]
    frame: Rect
    spacing: float = DEFAULT_SPACING
    slope: float = DEFAULT_SLOPE
    axis: Axis = DEFAULT_AXIS
    alignment: Alignment = DEFAULT_ALIGNMENT
    distribution: Distribution = DEFAULT_DISTRIBUTION
    direction: LayoutDirection = DEFAULT_DIRECTION

    def __post_init__(self) -> None:
        set_ = object.__setattr__
        set_(self, "sizes", validate_sizes(self.sizes))
        set_(self, "frame", validate_frame(self.frame))
        set_(self, "spacing", validate_number(self.spacing, "spacing", allow_negative=False))
        set_(self, "slope", validate_number(self.slope, "slope"))
        set_(self, "axis", Axis.coerce(self.axis))
        set_(self, "alignment", Alignment.coerce(self.alignment))
        set_(self, "distribution", Distribution.coerce(self.distribution))
        set_(self, "direction", LayoutDirection.coerce(self.direction))

    @property
    def count(self) -> int:
        return len(self.sizes)

    @property
    def equal_share(self) -> float:
        """Main-axis size per item under perfectly equal division."""
        return equal_share(self.frame.size.main(self.axis), self.spacing, self.count)

    def to_dict(self) -> dict:
        return {
            "sizes": [s.to_dict() for s in self.sizes],
            "frame": self.frame.to_dict(),
            "spacing": self.spacing,
            "slope": self.slope,
            "axis": self.axis.value,
            "alignment": self.alignment.value,
            "distribution": self.distribution.value,
            "direction": self.direction.value,
        }


@dataclass(frozen=True)
class ArrangementResult:
    """Arranged frames, one per input size, in input order."""

    frames: tuple[Rect, ...] = ()
    spacing: float = 0.0  # spacing actually applied between items
    axis: Axis = field(default=DEFAULT_AXIS, compare=False)

    def __len__(self) -> int:
        return len(self.frames)

    def __iter__(self) -> Iterator[Rect]:
        return iter(self.frames)

    def __getitem__(self, index: int) -> Rect:
        return self.frames[index]

    def to_list(self) -> list[Rect]:
        return list(self.frames)

    def to_dict(self) -> dict:
        return {
            "frames": [f.to_dict() for f in self.frames],
            "spacing": self.spacing,
            "axis": self.axis.value,
        }

    def to_dataframe(self):
        """Frames as a pandas DataFrame, one row per item."""
        from ..export.serializers import frames_to_dataframe

        return frames_to_dataframe(self.frames)


def _cross_placement(
    alignment: Alignment,
    item_cross: float,
    frame_cross: float,
    mirrored: bool,
) -> tuple[float, float]:
    """Return (offset from the frame's cross origin, cross size)."""
    if alignment is Alignment.FILL:
        return 0.0, frame_cross
    if alignment is Alignment.CENTER:
        return (frame_cross - item_cross) / 2, item_cross
    far = frame_cross - item_cross
    if alignment is Alignment.LEADING:
        return (far if mirrored else 0.0), item_cross
    return (0.0 if mirrored else far), item_cross


def _compose(axis: Axis, main_pos: float, cross_pos: float, main: float, cross: float) -> Rect:
    if axis is Axis.HORIZONTAL:
        return Rect(main_pos, cross_pos, main, cross)
    return Rect(cross_pos, main_pos, cross, main)


class BoxArranger:
    """Computes frames for boxes stacked along one axis.

    Pure and deterministic: sizes and parameters in, one pixel-snapped
    Rect per size out.
    """

    @staticmethod
    def arrange(
        sizes: Sequence[Size],
        frame: Rect,
        spacing: float = DEFAULT_SPACING,
        slope: float = DEFAULT_SLOPE,
        axis: Axis | str = DEFAULT_AXIS,
        alignment: Alignment | str = DEFAULT_ALIGNMENT,
        distribution: Distribution | str = DEFAULT_DISTRIBUTION,
        direction: LayoutDirection | str = DEFAULT_DIRECTION,
    ) -> list[Rect]:
        """Arrange ``sizes`` within ``frame``.

        Parameters
        ----------
        sizes : ordered item sizes
        frame : bounding rectangle
        spacing : minimum gap between adjacent items
        slope : shear; each item's cross position shifts by
                ``slope * (main position - frame main origin)``
        axis : 'horizontal' or 'vertical'
        alignment : 'fill', 'leading', 'center' or 'trailing'
        distribution : 'fill_equally', 'fill_proportionally',
                       'equal_spacing', 'equal_centering' or 'standard'
        direction : 'left_to_right' or 'right_to_left'

        Returns one Rect per size, in order.
        """
        request = ArrangementRequest(
            sizes=tuple(sizes),
            frame=frame,
            spacing=spacing,
            slope=slope,
            axis=axis,
            alignment=alignment,
            distribution=distribution,
            direction=direction,
        )
        return BoxArranger.arrange_request(request).to_list()

    @staticmethod
    def arrange_request(request: ArrangementRequest) -> ArrangementResult:
        """Arrange a validated request."""
        axis = request.axis
        if request.count == 0:
            return ArrangementResult(frames=(), spacing=request.spacing, axis=axis)

        frame = request.frame
        frame_main = frame.size.main(axis)
        frame_cross = frame.size.cross(axis)
        main_origin = frame.main_origin(axis)
        cross_origin = frame.cross_origin(axis)

        natural = np.array([s.main(axis) for s in request.sizes], dtype=np.float64)
        mains, spacing = apply_distribution(
            request.distribution, natural, frame_main, request.spacing,
        )
        logger.debug(
            "arrange %d boxes: axis=%s distribution=%s spacing=%.3f -> %.3f",
            request.count, axis.value, request.distribution.value,
            request.spacing, spacing,
        )

        centering = request.distribution is Distribution.EQUAL_CENTERING
        # Only a vertical stack's cross axis runs along the reading direction.
        mirrored = (
            axis is Axis.VERTICAL
            and request.direction is LayoutDirection.RIGHT_TO_LEFT
        )

        frames = []
        cursor = main_origin
        previous = None
        for size, main in zip(request.sizes, mains.tolist()):
            if centering and previous is not None:
                cursor -= previous / 2 + main / 2
            offset, cross = _cross_placement(
                request.alignment, size.cross(axis), frame_cross, mirrored,
            )
            cross_pos = cross_origin + offset + request.slope * (cursor - main_origin)
            frames.append(_compose(axis, cursor, cross_pos, main, cross).rounded())
            cursor += main + spacing
            previous = main

        return ArrangementResult(frames=tuple(frames), spacing=spacing, axis=axis)


def arrange_sizes(
    sizes: Sequence[Size],
    frame: Rect,
    spacing: float = DEFAULT_SPACING,
    slope: float = DEFAULT_SLOPE,
    axis: Axis | str = DEFAULT_AXIS,
    alignment: Alignment | str = DEFAULT_ALIGNMENT,
    distribution: Distribution | str = DEFAULT_DISTRIBUTION,
    direction: LayoutDirection | str = DEFAULT_DIRECTION,
) -> list[Rect]:
    """Functional form of :meth:`BoxArranger.arrange`."""
    return BoxArranger.arrange(
        sizes, frame, spacing=spacing, slope=slope, axis=axis,
        alignment=alignment, distribution=distribution, direction=direction,
    )
