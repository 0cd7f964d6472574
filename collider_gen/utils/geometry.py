"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def as_points(points: NDArray[np.float64] | list[tuple[float, float]]) -> NDArray[np.float64]:
    """Coerce a point sequence to an Nx2 float64 array (empty → shape (0, 2))."""
    arr = np.asarray(points, dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2))
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected Nx2 points, got shape {arr.shape}")
    return arr


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula over the closed ring. Positive = CCW (y up), negative = CW."""
    if len(points) < 3:
        return 0.0
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def winding_direction(points: NDArray[np.float64]) -> int:
    """Return 1 for CCW, -1 for CW, 0 if degenerate."""
    sa = signed_area(points)
    if sa > 0:
        return 1
    elif sa < 0:
        return -1
    return 0


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def bbox_center(points: NDArray[np.float64]) -> tuple[float, float]:
    """Midpoint of the bounding box."""
    xmin, ymin, xmax, ymax = bbox(points)
    return ((xmin + xmax) / 2.0, (ymin + ymax) / 2.0)


def is_collinear(points: NDArray[np.float64]) -> bool:
    """True when every point lies on one line (or fewer than 3 distinct points)."""
    unique = np.unique(points, axis=0)
    if len(unique) < 3:
        return True
    offsets = unique - unique[0]
    return int(np.linalg.matrix_rank(offsets)) < 2


def rotate_to_min(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Rotate a closed ring so it starts at its lexicographically smallest (x, y) point."""
    if len(points) == 0:
        return points
    start = int(np.lexsort((points[:, 1], points[:, 0]))[0])
    return np.roll(points, -start, axis=0)
