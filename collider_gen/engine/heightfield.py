"""Heightfield builder — collapse a boundary into one height per column.

For every distinct x (exact equality; traced points are pixel-integral) the
topmost point wins, i.e. the smallest y, since image y grows downward.
Columns are emitted in the order they are first met in the input, not
sorted: feed points in x order to get a left-to-right heightfield.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from collider_gen.engine.shapes import Heightfield
from collider_gen.utils.geometry import as_points

logger = logging.getLogger(__name__)

# A heightfield needs two samples to span any width.
MIN_COLUMNS = 2


def column_heights(points: NDArray[np.float64] | list[tuple[float, float]]) -> list[float]:
    """Minimal y per distinct x, in first-encounter order of x."""
    pts = as_points(points)
    tops: dict[float, float] = {}
    for x, y in pts:
        key = float(x)
        current = tops.get(key)
        if current is None or y < current:
            tops[key] = float(y)
    return list(tops.values())


def build_heightfield(
    points: NDArray[np.float64] | list[tuple[float, float]],
) -> Heightfield | None:
    """Heights plus ``x_scale = columns - 1``.

    Returns None for fewer than two columns, where the span would be zero or
    negative.
    """
    heights = column_heights(points)
    if len(heights) < MIN_COLUMNS:
        logger.debug("Heightfield needs %d columns, got %d", MIN_COLUMNS, len(heights))
        return None
    return Heightfield(heights=tuple(heights), x_scale=float(len(heights) - 1))
