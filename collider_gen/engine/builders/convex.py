"""Convex polygon / convex hull.

Both kinds take the hull of the outline points. Degenerate input (fewer than
three distinct points, or all collinear) has no area and yields None rather
than a zero-area shape.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray
from scipy.spatial import ConvexHull as QhullHull
from scipy.spatial import QhullError

from collider_gen.engine.context import BoundaryLoop
from collider_gen.engine.registry import shape_builder
from collider_gen.engine.shapes import ConvexHull, ConvexPolygon, Point, ShapeKind
from collider_gen.utils.geometry import is_collinear, rotate_to_min, winding_direction

logger = logging.getLogger(__name__)


def hull_vertices(points: NDArray[np.float64]) -> list[Point] | None:
    """Extreme points of the hull, counter-clockwise (y up), starting at the smallest (x, y).

    Returns None when the hull would have zero area.
    """
    if len(points) < 3:
        return None
    # np.unique sorts lexicographically, so Qhull sees the same input every run.
    unique = np.unique(points, axis=0)
    if len(unique) < 3 or is_collinear(unique):
        return None

    try:
        hull = QhullHull(unique)
    except QhullError as e:
        logger.debug("Qhull rejected %d points: %s", len(unique), e)
        return None

    if hull.volume <= 0.0:  # 2-D volume is area
        return None

    ring = unique[hull.vertices]
    if winding_direction(ring) < 0:
        ring = ring[::-1]
    ring = rotate_to_min(ring)
    return [(float(x), float(y)) for x, y in ring]


@shape_builder(kind=ShapeKind.CONVEX_POLYGON, description="Convex polygon around the outline")
def convex_polygon(loop: BoundaryLoop) -> ConvexPolygon | None:
    vertices = hull_vertices(loop.points)
    if vertices is None:
        return None
    return ConvexPolygon(points=tuple(vertices))


@shape_builder(kind=ShapeKind.CONVEX_HULL, description="Convex hull of the outline points")
def convex_hull(loop: BoundaryLoop) -> ConvexHull | None:
    vertices = hull_vertices(loop.points)
    if vertices is None:
        return None
    return ConvexHull(points=tuple(vertices))
