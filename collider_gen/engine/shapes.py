"""Shape descriptors — the contract handed to physics adaptors.

Each variant is a frozen dataclass with a ``kind`` tag. Adaptors pattern-match
on the tag (or the class) and read the geometry fields; nothing here knows
about any physics engine.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar, Union

Point = tuple[float, float]


class ShapeKind(str, enum.Enum):
    POLYLINE = "polyline"
    CONVEX_POLYGON = "convex_polygon"
    CONVEX_HULL = "convex_hull"
    HEIGHTFIELD = "heightfield"


@dataclass(frozen=True)
class Polyline:
    """Closed chain through the boundary points, no convexity requirement."""

    kind: ClassVar[ShapeKind] = ShapeKind.POLYLINE
    points: tuple[Point, ...]

    def segments(self) -> list[tuple[int, int]]:
        """Vertex index pairs, including the closing segment when it is distinct."""
        n = len(self.points)
        if n < 2:
            return []
        pairs = [(i, i + 1) for i in range(n - 1)]
        if n > 2:
            pairs.append((n - 1, 0))
        return pairs


@dataclass(frozen=True)
class ConvexPolygon:
    """Convex polygon; vertices counter-clockwise in y-up terms."""

    kind: ClassVar[ShapeKind] = ShapeKind.CONVEX_POLYGON
    points: tuple[Point, ...]


@dataclass(frozen=True)
class ConvexHull:
    """Convex hull of the boundary; vertices counter-clockwise in y-up terms."""

    kind: ClassVar[ShapeKind] = ShapeKind.CONVEX_HULL
    points: tuple[Point, ...]


@dataclass(frozen=True)
class Heightfield:
    """One height per column plus the span the heights cover.

    ``x_scale`` is ``len(heights) - 1``: the horizontal distance between the
    first and last sample, one unit per column. Heights keep the image
    convention (smaller = higher).
    """

    kind: ClassVar[ShapeKind] = ShapeKind.HEIGHTFIELD
    heights: tuple[float, ...]
    x_scale: float
    y_scale: float = 1.0

    def sample_points(self) -> list[Point]:
        """Heights laid out evenly across [-x_scale/2, x_scale/2]."""
        n = len(self.heights)
        if n < 2:
            return [(0.0, h * self.y_scale) for h in self.heights]
        step = self.x_scale / (n - 1)
        left = -self.x_scale / 2.0
        return [(left + i * step, h * self.y_scale) for i, h in enumerate(self.heights)]


ShapeDescriptor = Union[Polyline, ConvexPolygon, ConvexHull, Heightfield]
