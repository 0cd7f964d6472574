"""Data model flowing through the pipeline.

PixelMask → BoundaryLoop / RegionSet → ShapeDescriptor (see shapes.py).
PipelineContext holds the state of one run.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from collider_gen.utils.geometry import as_points, bbox

if TYPE_CHECKING:
    from collider_gen.engine.shapes import ShapeDescriptor, ShapeKind


class CoordinateFrame(enum.Enum):
    RAW = "raw"
    TRANSLATED = "translated"


@dataclass(frozen=True, eq=False)
class PixelMask:
    """Opacity grid: True = opaque (collidable), False = transparent.

    ``data`` is indexed [row, col] and is read-only once the mask exists.
    """

    data: NDArray[np.bool_]

    def __post_init__(self) -> None:
        arr = np.array(self.data, dtype=bool, copy=True)
        if arr.ndim != 2:
            raise ValueError(f"PixelMask needs a 2-D array, got {arr.ndim}-D")
        arr.flags.writeable = False
        object.__setattr__(self, "data", arr)

    @classmethod
    def from_array(cls, array: NDArray) -> PixelMask:
        """Wrap an existing 2-D array; entries strictly greater than zero are opaque."""
        return cls(np.asarray(array) > 0)

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    @property
    def opaque_count(self) -> int:
        return int(np.count_nonzero(self.data))

    @property
    def is_empty(self) -> bool:
        return not self.data.any()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelMask):
            return NotImplemented
        return np.array_equal(self.data, other.data)

    def __hash__(self) -> int:
        return hash((self.data.shape, self.data.tobytes()))


@dataclass(frozen=True, eq=False)
class BoundaryLoop:
    """Closed, ordered outline of one region.

    ``offset`` is the bounding-box center subtracted by ``to_translated``;
    it is None while the loop is in the raw (image) frame.
    """

    points: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2)))
    offset: tuple[float, float] | None = None

    def __post_init__(self) -> None:
        pts = np.array(as_points(self.points), dtype=np.float64, copy=True)
        pts.flags.writeable = False
        object.__setattr__(self, "points", pts)

    @property
    def frame(self) -> CoordinateFrame:
        return CoordinateFrame.RAW if self.offset is None else CoordinateFrame.TRANSLATED

    @property
    def bbox(self) -> tuple[float, float, float, float]:
        return bbox(self.points)

    @property
    def is_empty(self) -> bool:
        return len(self.points) == 0

    def as_tuples(self) -> list[tuple[float, float]]:
        return [(float(x), float(y)) for x, y in self.points]

    def __len__(self) -> int:
        return len(self.points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundaryLoop):
            return NotImplemented
        return self.offset == other.offset and np.array_equal(self.points, other.points)

    def __hash__(self) -> int:
        return hash((self.offset, self.points.tobytes()))


# Connected components in discovery (scan) order.
RegionSet = list[BoundaryLoop]


@dataclass
class PipelineContext:
    """Shared state of one image → colliders run."""

    # Source dimensions
    width: int = 0
    height: int = 0
    # Request
    kind: ShapeKind | None = None
    frame: CoordinateFrame = CoordinateFrame.TRANSLATED
    multi: bool = False
    # Intermediate results
    mask: PixelMask | None = None
    loops: RegionSet = field(default_factory=list)
    # Output: one slot per loop, None where the shape is geometrically impossible
    descriptors: list[ShapeDescriptor | None] = field(default_factory=list)
    # Per-stage wall time in milliseconds
    timings: dict[str, float] = field(default_factory=dict)

    @property
    def num_regions(self) -> int:
        return len(self.loops)

    @property
    def num_absent(self) -> int:
        return sum(1 for d in self.descriptors if d is None)

    @property
    def processing_time_ms(self) -> float:
        return round(sum(self.timings.values()), 3)
