"""Contour extraction — Moore-neighbour boundary walk over a binary grid."""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from collider_gen.utils.morphology import boundary_mask

logger = logging.getLogger(__name__)

# Moore neighbourhood as (dx, dy), clockwise on screen (y grows downward),
# starting from the west neighbour.
_CLOCKWISE: tuple[tuple[int, int], ...] = (
    (-1, 0),   # W
    (-1, -1),  # NW
    (0, -1),   # N
    (1, -1),   # NE
    (1, 0),    # E
    (1, 1),    # SE
    (0, 1),    # S
    (-1, 1),   # SW
)
_DIRECTION_INDEX = {d: i for i, d in enumerate(_CLOCKWISE)}
_WEST = 0


def start_pixel(grid: NDArray[np.bool_]) -> tuple[int, int] | None:
    """Topmost, then leftmost filled pixel as (x, y), or None for an empty grid."""
    rows, cols = np.nonzero(grid)
    if len(rows) == 0:
        return None
    # np.nonzero walks in row-major order, so the first hit is top-left-most.
    return (int(cols[0]), int(rows[0]))


def moore_trace(grid: NDArray[np.bool_]) -> list[tuple[int, int]]:
    """Walk the outer boundary of the single 8-connected shape in ``grid``.

    The walk starts at the topmost-leftmost pixel, proceeds clockwise on
    screen and stops by Jacob's criterion: when the first move out of the
    start pixel is about to be repeated. The start pixel is not repeated at
    the end; the loop is implicitly closed.

    Args:
        grid: 2-D boolean array holding exactly one 8-connected shape.

    Returns:
        Boundary pixels as (x, y) = (col, row) tuples.
    """
    filled = np.asarray(grid, dtype=bool)
    start = start_pixel(filled)
    if start is None:
        return []

    height, width = filled.shape

    def is_filled(x: int, y: int) -> bool:
        return 0 <= x < width and 0 <= y < height and bool(filled[y, x])

    contour = [start]
    current = start
    backtrack_dir = _WEST  # west of the top-left pixel is always empty
    first_move: tuple[tuple[int, int], tuple[int, int]] | None = None
    # Each boundary pixel can be entered at most once per side.
    max_steps = 4 * int(np.count_nonzero(boundary_mask(filled))) + 4

    for _ in range(max_steps):
        for k in range(1, 9):
            direction = (backtrack_dir + k) % 8
            dx, dy = _CLOCKWISE[direction]
            candidate = (current[0] + dx, current[1] + dy)
            if is_filled(*candidate):
                break
        else:
            # Isolated pixel
            return contour

        move = (current, candidate)
        if first_move is None:
            first_move = move
        elif move == first_move:
            break

        # The last empty neighbour examined becomes the new backtrack point.
        bx, by = _CLOCKWISE[(direction - 1) % 8]
        back = (current[0] + bx, current[1] + by)
        backtrack_dir = _DIRECTION_INDEX[(back[0] - candidate[0], back[1] - candidate[1])]
        current = candidate
        contour.append(current)
    else:
        logger.warning("Boundary walk from %s hit the step limit (%d)", start, max_steps)

    # The walk re-entered the start pixel right before stopping.
    if len(contour) > 1 and contour[-1] == contour[0]:
        contour.pop()
    return contour
