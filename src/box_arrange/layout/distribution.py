"""Main-axis distribution policies.

Each policy takes the natural main-axis sizes, the frame's main extent and
the caller's spacing, and returns ``(main_sizes, spacing)``: the adjusted
sizes (a new array) and the spacing in effect for this arrangement. The
caller's values are never modified.
"""

from __future__ import annotations

import logging
from typing import Callable

import numpy as np

from .options import Distribution

logger = logging.getLogger(__name__)

PolicyResult = tuple[np.ndarray, float]
Policy = Callable[[np.ndarray, float, float], PolicyResult]


def equal_share(extent: float, spacing: float, count: int) -> float:
    """Main-axis size each of ``count`` items gets under perfectly equal division."""
    if count <= 0:
        return 0.0
    return (extent + spacing) / count - spacing


def _scaled(sizes: np.ndarray, target: float, total: float) -> np.ndarray:
    # All-zero sizes have no ratio to scale by; leave them collapsed.
    if total <= 0:
        return sizes.copy()
    return sizes * (target / total)


def _spread(extent: float, total: float, count: int) -> float:
    """Spacing that spreads the slack evenly between ``count`` items."""
    if count < 2:
        return 0.0
    return (extent - total) / (count - 1)


def fit_sizes(
    sizes: np.ndarray,
    extent: float,
    spacing: float,
    grow: bool = True,
    spread_gaps: bool = False,
) -> PolicyResult:
    """Grow, spread or shrink ``sizes`` so they fit ``extent``.

    Parameters
    ----------
    sizes : main-axis sizes, in order
    extent : frame extent along the main axis
    spacing : caller's baseline spacing
    grow : scale items up when they underfill the space left by spacing
    spread_gaps : skip the grow branch and let the gaps absorb the slack

    Undersized content either grows (keeping ``spacing``), or when growth is
    off keeps its natural sizes. Content that fits the frame only without
    full spacing keeps its sizes with spacing reduced to the slack. Content
    that overflows the frame is shrunk proportionally with zero spacing.
    """
    count = len(sizes)
    total = float(sizes.sum())
    available = extent - (count - 1) * spacing

    if total < available and not spread_gaps:
        if grow:
            logger.debug("grow to fill: %.3f -> %.3f", total, available)
            return _scaled(sizes, available, total), spacing
        return sizes.copy(), spacing
    if total < extent:
        return sizes.copy(), _spread(extent, total, count)
    logger.debug("shrink to fit: %.3f -> %.3f", total, extent)
    return _scaled(sizes, extent, total), 0.0


def fill_equally(sizes: np.ndarray, extent: float, spacing: float) -> PolicyResult:
    """Every item gets the equal share; spacing unchanged."""
    # Spacing wider than the frame leaves no room; collapse rather than go negative.
    share = max(0.0, equal_share(extent, spacing, len(sizes)))
    return np.full(len(sizes), share, dtype=np.float64), spacing


def fill_proportionally(sizes: np.ndarray, extent: float, spacing: float) -> PolicyResult:
    return fit_sizes(sizes, extent, spacing)


def standard(sizes: np.ndarray, extent: float, spacing: float) -> PolicyResult:
    return fit_sizes(sizes, extent, spacing)


def equal_spacing(sizes: np.ndarray, extent: float, spacing: float) -> PolicyResult:
    """Items keep their natural sizes and the gaps absorb the slack."""
    return fit_sizes(sizes, extent, spacing, spread_gaps=True)


def equal_centering(sizes: np.ndarray, extent: float, spacing: float) -> PolicyResult:
    """Equal distance between consecutive item centers.

    The returned spacing is the center-to-center distance; the arranger
    retracts its cursor by half of each neighbour before applying it.
    """
    fitted, _ = fit_sizes(sizes, extent, spacing, grow=False)
    count = len(fitted)
    if count < 2:
        return fitted, 0.0
    span = extent - fitted[0] / 2 - fitted[-1] / 2
    return fitted, float(span / (count - 1))


POLICIES: dict[Distribution, Policy] = {
    Distribution.FILL_EQUALLY: fill_equally,
    Distribution.FILL_PROPORTIONALLY: fill_proportionally,
    Distribution.EQUAL_SPACING: equal_spacing,
    Distribution.EQUAL_CENTERING: equal_centering,
    Distribution.STANDARD: standard,
}


def apply_distribution(
    distribution: Distribution | str,
    sizes: np.ndarray,
    extent: float,
    spacing: float,
) -> PolicyResult:
    """Dispatch to the policy for ``distribution``.

    Returns ``(main_sizes, spacing)``. Empty input yields an empty array and
    the caller's spacing.
    """
    distribution = Distribution.coerce(distribution)
    sizes = np.asarray(sizes, dtype=np.float64)
    if len(sizes) == 0:
        return sizes.copy(), spacing
    return POLICIES[distribution](sizes, extent, spacing)
