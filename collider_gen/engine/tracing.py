"""Boundary tracer — opacity mask to ordered outline loops.

Components are 8-connected so shapes touching only at a corner stay one
region. Each component is walked clockwise on screen from its topmost,
then leftmost pixel; output is identical across runs.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from collider_gen.engine.context import BoundaryLoop, PixelMask, RegionSet
from collider_gen.utils.contour import moore_trace
from collider_gen.utils.morphology import component_slices, connected_components_grid

logger = logging.getLogger(__name__)


def trace_multi(mask: PixelMask) -> RegionSet:
    """One raw-frame loop per connected region, in scan discovery order."""
    return [BoundaryLoop(points) for points in _component_outlines(mask.data)]


def trace_single(mask: PixelMask) -> BoundaryLoop:
    """All region outlines merged into one raw-frame loop.

    Exact for an image holding one shape. With several disjoint shapes the
    result jumps between outlines; use ``trace_multi`` to keep them apart.
    """
    outlines = [pts for pts in _component_outlines(mask.data) if len(pts)]
    if not outlines:
        return BoundaryLoop()
    if len(outlines) > 1:
        logger.debug("trace_single merging %d disjoint regions", len(outlines))
    return BoundaryLoop(np.vstack(outlines))


def _component_outlines(grid: NDArray[np.bool_]) -> list[NDArray[np.float64]]:
    labels, count = connected_components_grid(grid)
    if count == 0:
        return []

    outlines: list[NDArray[np.float64]] = []
    for index, (rows, cols) in enumerate(component_slices(labels, count), start=1):
        # Trace on the component's own bounding box, then shift back.
        component = labels[rows, cols] == index
        walk = moore_trace(component)
        points = np.array(walk, dtype=np.float64).reshape(-1, 2)
        points[:, 0] += cols.start
        points[:, 1] += rows.start
        outlines.append(points)

    logger.debug("Traced %d regions (%d boundary points)", count, sum(len(o) for o in outlines))
    return outlines
