"""ArrangementSettings: reusable, validated layout parameters."""

from __future__ import annotations

from typing import Sequence

import param

from .arranger import ArrangementRequest, DEFAULT_SLOPE, DEFAULT_SPACING
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


def _values(option) -> list[str]:
    return [m.value for m in option]


class ArrangementSettings(param.Parameterized):
    """Layout parameters shared by repeated arrangements.

    Stored as plain strings so the object can be bound to widgets or
    serialized; enum members are accepted wherever a string is.
    """

    axis = param.Selector(default=DEFAULT_AXIS.value, objects=_values(Axis))
    alignment = param.Selector(default=DEFAULT_ALIGNMENT.value, objects=_values(Alignment))
    distribution = param.Selector(
        default=DEFAULT_DISTRIBUTION.value, objects=_values(Distribution),
    )
    direction = param.Selector(
        default=DEFAULT_DIRECTION.value, objects=_values(LayoutDirection),
    )
    spacing = param.Number(default=DEFAULT_SPACING, bounds=(0, None))
    slope = param.Number(default=DEFAULT_SLOPE)

    def __init__(self, **params):
        # Accept enum members for the selector params.
        for name, option in (
            ("axis", Axis),
            ("alignment", Alignment),
            ("distribution", Distribution),
            ("direction", LayoutDirection),
        ):
            if name in params:
                params[name] = option.coerce(params[name]).value
        super().__init__(**params)

    def to_kwargs(self) -> dict:
        """Keyword arguments for ``BoxArranger.arrange`` / ``arrange_items``."""
        return {
            "spacing": self.spacing,
            "slope": self.slope,
            "axis": self.axis,
            "alignment": self.alignment,
            "distribution": self.distribution,
            "direction": self.direction,
        }

    def request(self, sizes: Sequence[Size], frame: Rect) -> ArrangementRequest:
        """Build a request for ``sizes`` within ``frame``."""
        return ArrangementRequest(sizes=tuple(sizes), frame=frame, **self.to_kwargs())
