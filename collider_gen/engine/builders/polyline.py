"""Polyline — the outline as-is. Any non-empty loop qualifies."""

from __future__ import annotations

from collider_gen.engine.context import BoundaryLoop
from collider_gen.engine.registry import shape_builder
from collider_gen.engine.shapes import Polyline, ShapeKind


@shape_builder(kind=ShapeKind.POLYLINE, description="Closed chain through every boundary point")
def polyline(loop: BoundaryLoop) -> Polyline | None:
    if loop.is_empty:
        return None
    return Polyline(points=tuple(loop.as_tuples()))
