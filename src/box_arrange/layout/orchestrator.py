"""ArrangementOrchestrator: measure items, arrange them, write frames back."""

from __future__ import annotations

import logging
from typing import Protocol, Sequence, TypeVar

from ..core.validation import validate_frame, validate_same_length, validate_size
from .arranger import (
    ArrangementRequest,
    ArrangementResult,
    BoxArranger,
    DEFAULT_SLOPE,
    DEFAULT_SPACING,
)
from .distribution import equal_share
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
from .settings import ArrangementSettings

logger = logging.getLogger(__name__)


# Distributions that lay items out at their unconstrained size
NATURAL_SIZE_DISTRIBUTIONS = frozenset({
    Distribution.FILL_PROPORTIONALLY,
    Distribution.EQUAL_CENTERING,
})


class SizeProvider(Protocol):
    """Anything that can report the space it needs."""

    def size_needed(self, candidate: Size) -> Size:
        """Size needed when offered ``candidate``."""
        ...

    def natural_size(self) -> Size:
        """Unconstrained preferred size."""
        ...


class FrameSink(Protocol):
    """Anything that accepts a frame."""

    frame: Rect


class ArrangedItem(SizeProvider, FrameSink, Protocol):
    """An item the orchestrator can both measure and place."""


ItemT = TypeVar("ItemT", bound=ArrangedItem)


def _require(item: object, method: str, index: int):
    fn = getattr(item, method, None)
    if not callable(fn):
        raise TypeError(
            f"items[{index}] ({type(item).__name__}) has no {method}() method; "
            "arranged items must provide size_needed() and natural_size()."
        )
    return fn


def candidate_size(
    frame: Rect,
    spacing: float,
    count: int,
    axis: Axis | str,
) -> Size:
    """Box offered to each item under a provisional equal partition."""
    axis = Axis.coerce(axis)
    share = max(0.0, equal_share(frame.size.main(axis), spacing, count))
    return Size.ZERO.with_main(axis, share).with_cross(axis, frame.size.cross(axis))


def measure_items(
    items: Sequence[SizeProvider],
    frame: Rect,
    spacing: float = DEFAULT_SPACING,
    axis: Axis | str = DEFAULT_AXIS,
    distribution: Distribution | str = DEFAULT_DISTRIBUTION,
) -> list[Size]:
    """Measure each item with the strategy ``distribution`` calls for.

    Proportional and equal-centering layouts use natural sizes; the rest
    measure against the equal-share candidate box.
    """
    frame = validate_frame(frame)
    distribution = Distribution.coerce(distribution)
    if distribution in NATURAL_SIZE_DISTRIBUTIONS:
        logger.debug("measuring %d items at natural size", len(items))
        sizes = [_require(item, "natural_size", i)() for i, item in enumerate(items)]
    else:
        candidate = candidate_size(frame, spacing, len(items), axis)
        logger.debug("measuring %d items against %s", len(items), candidate)
        sizes = [
            _require(item, "size_needed", i)(candidate)
            for i, item in enumerate(items)
        ]
    return [validate_size(s, f"measurement[{i}]") for i, s in enumerate(sizes)]


def apply_frames(items: Sequence[FrameSink], frames: Sequence[Rect]) -> None:
    """Assign ``frames[i]`` to ``items[i].frame``."""
    validate_same_length(len(items), len(frames), "frames")
    for item, frame in zip(items, frames):
        item.frame = frame


def arrange_items(
    items: Sequence[ItemT],
    frame: Rect,
    spacing: float = DEFAULT_SPACING,
    slope: float = DEFAULT_SLOPE,
    axis: Axis | str = DEFAULT_AXIS,
    alignment: Alignment | str = DEFAULT_ALIGNMENT,
    distribution: Distribution | str = DEFAULT_DISTRIBUTION,
    direction: LayoutDirection | str = DEFAULT_DIRECTION,
) -> ArrangementResult:
    """Measure, arrange and place ``items`` within ``frame``.

    Each item's ``frame`` attribute is set to its arranged Rect. The result
    is also returned for callers that want the geometry.
    """
    items = list(items)
    request = ArrangementRequest(
        sizes=tuple(measure_items(items, frame, spacing, axis, distribution)),
        frame=frame,
        spacing=spacing,
        slope=slope,
        axis=axis,
        alignment=alignment,
        distribution=distribution,
        direction=direction,
    )
    result = BoxArranger.arrange_request(request)
    apply_frames(items, result.frames)
    return result


class ArrangementOrchestrator:
    """Arranges items using a reusable set of layout settings.

    Parameters
    ----------
    settings : ArrangementSettings, optional
        Defaults to a fresh ``ArrangementSettings()``.
    """

    def __init__(self, settings: ArrangementSettings | None = None) -> None:
        self._settings = settings if settings is not None else ArrangementSettings()

    @property
    def settings(self) -> ArrangementSettings:
        return self._settings

    def arrange(self, items: Sequence[ItemT], frame: Rect) -> ArrangementResult:
        """Measure, arrange and write frames onto ``items``."""
        return arrange_items(items, frame, **self._settings.to_kwargs())

    def arrange_sizes(self, sizes: Sequence[Size], frame: Rect) -> ArrangementResult:
        """Arrange bare sizes with these settings (no write-back)."""
        return BoxArranger.arrange_request(self._settings.request(sizes, frame))
