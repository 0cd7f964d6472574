"""Coordinate transform between the raw (image) and translated (shape-centered) frames."""

from __future__ import annotations

from collider_gen.engine.context import BoundaryLoop, CoordinateFrame, RegionSet
from collider_gen.utils.geometry import bbox_center


def to_raw(loop: BoundaryLoop) -> BoundaryLoop:
    """Back to image coordinates. Identity for a raw loop."""
    if loop.offset is None:
        return loop
    ox, oy = loop.offset
    return BoundaryLoop(loop.points + (ox, oy), offset=None)


def to_translated(loop: BoundaryLoop) -> BoundaryLoop:
    """Re-center on the loop's bounding-box center. Identity for a translated loop.

    Point order and winding are unchanged.
    """
    if loop.offset is not None:
        return loop
    cx, cy = bbox_center(loop.points)
    return BoundaryLoop(loop.points - (cx, cy), offset=(cx, cy))


def to_frame(loop: BoundaryLoop, frame: CoordinateFrame) -> BoundaryLoop:
    if frame is CoordinateFrame.RAW:
        return to_raw(loop)
    return to_translated(loop)


def regions_to_frame(regions: RegionSet, frame: CoordinateFrame) -> RegionSet:
    """Each region is centered on its own bounding box, not the image's."""
    return [to_frame(loop, frame) for loop in regions]
