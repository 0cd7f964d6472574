"""Binary-grid operations: boundary pixels and connected-component labeling."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy import ndimage
from skimage.measure import label

# 4-connected cross used for the "touches empty space" test.
_CROSS = ndimage.generate_binary_structure(2, 1)


def boundary_mask(grid: NDArray[np.bool_]) -> NDArray[np.bool_]:
    """Filled pixels with at least one empty 4-neighbour or lying on the grid edge."""
    filled = np.asarray(grid, dtype=bool)
    if filled.size == 0:
        return filled.copy()
    # Pixels outside the grid count as empty, hence border_value=0.
    interior = ndimage.binary_erosion(filled, structure=_CROSS, border_value=0)
    return filled & ~interior


def connected_components_grid(grid: NDArray[np.bool_]) -> tuple[NDArray[np.int32], int]:
    """Label 8-connected components.

    Labels are assigned in raster scan order of each component's first pixel,
    so label 1 is the component reached first scanning top-to-bottom,
    left-to-right.
    """
    filled = np.asarray(grid, dtype=bool)
    if filled.size == 0 or not filled.any():
        return np.zeros(filled.shape, dtype=np.int32), 0
    labels, count = label(filled, connectivity=2, background=0, return_num=True)
    return labels.astype(np.int32), int(count)


def component_slices(labels: NDArray[np.int32], count: int) -> list[tuple[slice, slice]]:
    """Bounding-box slices (rows, cols) for labels 1..count, in label order."""
    found = ndimage.find_objects(labels, max_label=count)
    return [s for s in found if s is not None]
