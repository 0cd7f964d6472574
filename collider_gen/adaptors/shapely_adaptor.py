"""shapely adaptor — shape descriptors to shapely geometry for inspection and tests."""

from __future__ import annotations

from shapely.geometry import LinearRing, LineString, Point, Polygon
from shapely.geometry.base import BaseGeometry

from collider_gen.engine.shapes import (
    ConvexHull,
    ConvexPolygon,
    Heightfield,
    Polyline,
    ShapeDescriptor,
)


def to_geometry(descriptor: ShapeDescriptor) -> BaseGeometry:
    """Polyline → LinearRing / LineString / Point, convex kinds → Polygon, heightfield → LineString."""
    if isinstance(descriptor, Polyline):
        pts = list(descriptor.points)
        if len(pts) >= 3:
            return LinearRing(pts)
        if len(pts) == 2:
            return LineString(pts)
        return Point(pts[0])
    if isinstance(descriptor, (ConvexPolygon, ConvexHull)):
        return Polygon(descriptor.points)
    if isinstance(descriptor, Heightfield):
        return LineString(descriptor.sample_points())
    raise TypeError(f"Unsupported shape descriptor: {type(descriptor).__name__}")
