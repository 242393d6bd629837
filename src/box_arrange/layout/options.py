"""Enumerated layout options: axis, alignment, distribution, direction.

Every option is a ``str``-valued Enum so callers may pass either the member
or its string value (e.g. ``"equal_spacing"``); ``coerce`` normalizes both.
"""

from __future__ import annotations

from enum import Enum


class _Option(str, Enum):
    """Base for string-valued layout options."""

    @classmethod
    def coerce(cls, value: _Option | str) -> _Option:
        """Return the member for ``value``, accepting members or strings."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(
                    f"Unknown {cls.__name__.lower()} '{value}'. "
                    f"Use one of: {', '.join(repr(m.value) for m in cls)}."
                ) from None
        raise TypeError(
            f"{cls.__name__} must be a {cls.__name__} or str, "
            f"got {type(value).__name__}."
        )

    def __str__(self) -> str:
        return self.value


class Axis(_Option):
    """Primary axis along which items are stacked."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @property
    def cross(self) -> Axis:
        return Axis.VERTICAL if self is Axis.HORIZONTAL else Axis.HORIZONTAL


class Alignment(_Option):
    """Cross-axis placement policy."""

    FILL = "fill"
    LEADING = "leading"
    CENTER = "center"
    TRAILING = "trailing"


class Distribution(_Option):
    """Main-axis sizing and spacing policy.

    ``STANDARD`` grows or shrinks items proportionally to fill the frame.
    """

    FILL_EQUALLY = "fill_equally"
    FILL_PROPORTIONALLY = "fill_proportionally"
    EQUAL_SPACING = "equal_spacing"
    EQUAL_CENTERING = "equal_centering"
    STANDARD = "standard"


class LayoutDirection(_Option):
    """Reading direction; right-to-left mirrors leading/trailing on vertical stacks."""

    LEFT_TO_RIGHT = "left_to_right"
    RIGHT_TO_LEFT = "right_to_left"


DEFAULT_AXIS = Axis.VERTICAL
DEFAULT_ALIGNMENT = Alignment.FILL
DEFAULT_DISTRIBUTION = Distribution.STANDARD
DEFAULT_DIRECTION = LayoutDirection.LEFT_TO_RIGHT
