"""pymunk adaptor — shape descriptors to native pymunk shapes.

Coordinates are passed through untouched; flip or scale them on the body's
side if the space uses y-up world units.
"""

from __future__ import annotations

import logging

import pymunk

from collider_gen.engine.shapes import (
    ConvexHull,
    ConvexPolygon,
    Heightfield,
    Polyline,
    ShapeDescriptor,
)

logger = logging.getLogger(__name__)


def to_pymunk_shapes(
    descriptor: ShapeDescriptor,
    body: pymunk.Body,
    radius: float = 0.0,
) -> list[pymunk.Shape]:
    """Build the pymunk shapes for one descriptor, attached to ``body``.

    Args:
        descriptor: Any shape descriptor.
        body: Body the shapes belong to (static bodies for level geometry).
        radius: Rounding radius for segments and polygons.

    Returns:
        Closed segment chain for polylines, a single Poly for convex kinds,
        an open segment chain for heightfields.
    """
    if isinstance(descriptor, Polyline):
        pairs = descriptor.segments()
        pts = descriptor.points
        return _segments(body, [pts[a] for a, _ in pairs], [pts[b] for _, b in pairs], radius)
    if isinstance(descriptor, (ConvexPolygon, ConvexHull)):
        return [pymunk.Poly(body, list(descriptor.points), radius=radius)]
    if isinstance(descriptor, Heightfield):
        samples = descriptor.sample_points()
        return _segments(body, samples[:-1], samples[1:], radius)
    raise TypeError(f"Unsupported shape descriptor: {type(descriptor).__name__}")


def _segments(
    body: pymunk.Body,
    starts: list[tuple[float, float]],
    ends: list[tuple[float, float]],
    radius: float,
) -> list[pymunk.Shape]:
    shapes: list[pymunk.Shape] = [
        pymunk.Segment(body, a, b, radius) for a, b in zip(starts, ends)
    ]
    if not shapes:
        logger.debug("Descriptor too short for any segment")
    return shapes
