"""Heightfield — topmost point per column of the outline."""

from __future__ import annotations

from collider_gen.engine.context import BoundaryLoop
from collider_gen.engine.heightfield import build_heightfield
from collider_gen.engine.registry import shape_builder
from collider_gen.engine.shapes import Heightfield, ShapeKind


@shape_builder(kind=ShapeKind.HEIGHTFIELD, description="One height per column, topmost point wins")
def heightfield(loop: BoundaryLoop) -> Heightfield | None:
    return build_heightfield(loop.points)
