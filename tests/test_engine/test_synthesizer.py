"""Tests for collider synthesis from boundary loops."""

import numpy as np
import pytest
from shapely.geometry import Point, Polygon

from collider_gen.engine.context import BoundaryLoop
from collider_gen.engine.frames import to_translated
from collider_gen.engine.shapes import ConvexHull, ConvexPolygon, Heightfield, Polyline, ShapeKind
from collider_gen.engine.synthesizer import synthesize, synthesize_many
from collider_gen.engine.tracing import trace_multi, trace_single
from collider_gen.utils.geometry import signed_area
from tests.conftest import L_SHAPE, TERRAIN, make_mask

CONVEX_KINDS = [ShapeKind.CONVEX_HULL, ShapeKind.CONVEX_POLYGON]


class TestConvex:
    def test_square_hull_is_its_corners(self, square_mask):
        hull = synthesize(trace_single(square_mask), ShapeKind.CONVEX_HULL)
        assert isinstance(hull, ConvexHull)
        assert hull.points == ((0.0, 0.0), (3.0, 0.0), (3.0, 3.0), (0.0, 3.0))

    def test_polygon_matches_hull(self, square_mask):
        loop = to_translated(trace_single(square_mask))
        polygon = synthesize(loop, ShapeKind.CONVEX_POLYGON)
        hull = synthesize(loop, ShapeKind.CONVEX_HULL)
        assert isinstance(polygon, ConvexPolygon)
        assert polygon.points == hull.points
        assert polygon.points[0] == (-1.5, -1.5)

    @pytest.mark.parametrize("kind", CONVEX_KINDS)
    def test_vertices_are_loop_points_and_contain_the_loop(self, kind):
        loop = trace_single(make_mask(TERRAIN))
        shape = synthesize(loop, kind)
        assert set(shape.points) <= set(loop.as_tuples())
        polygon = Polygon(shape.points)
        assert all(polygon.covers(Point(p)) for p in loop.as_tuples())

    def test_counter_clockwise_y_up(self):
        loop = trace_single(make_mask(L_SHAPE))
        hull = synthesize(loop, ShapeKind.CONVEX_HULL)
        assert signed_area(np.array(hull.points)) > 0
        assert hull.points[0] == min(hull.points)

    @pytest.mark.parametrize("kind", CONVEX_KINDS)
    @pytest.mark.parametrize(
        "points",
        [[], [(0, 0), (1, 1)], [(0, 0), (1, 1), (2, 2)], [(3, 3), (3, 3), (3, 3)]],
    )
    def test_degenerate_is_absent(self, kind, points):
        assert synthesize(BoundaryLoop(points), kind) is None


class TestPolyline:
    def test_keeps_every_point(self, square_mask):
        loop = trace_single(square_mask)
        line = synthesize(loop, ShapeKind.POLYLINE)
        assert isinstance(line, Polyline)
        assert list(line.points) == loop.as_tuples()

    def test_empty_is_absent(self):
        assert synthesize(BoundaryLoop(), ShapeKind.POLYLINE) is None

    def test_single_point(self):
        line = synthesize(BoundaryLoop([(2, 2)]), ShapeKind.POLYLINE)
        assert line.points == ((2.0, 2.0),)


class TestHeightfield:
    def test_terrain(self, terrain_mask):
        hf = synthesize(trace_single(terrain_mask), ShapeKind.HEIGHTFIELD)
        assert isinstance(hf, Heightfield)
        assert len(hf.heights) == 6

    def test_single_column_is_absent(self):
        loop = trace_single(make_mask(["#", "#", "#"]))
        assert synthesize(loop, ShapeKind.HEIGHTFIELD) is None


class TestMany:
    def _loops(self):
        grid_rows = [
            "##....#.....",
            "##....#.....",
            "............",
            "........###.",
            "........###.",
            "........###.",
        ]
        return trace_multi(make_mask(grid_rows))

    def test_one_slot_per_loop_with_absent_slots(self):
        loops = self._loops()
        results = synthesize(loops, ShapeKind.CONVEX_HULL)
        assert len(results) == 3
        assert isinstance(results[0], ConvexHull)
        # The two-pixel column has no area
        assert results[1] is None
        assert isinstance(results[2], ConvexHull)

    @pytest.mark.parametrize("max_workers", [1, 2, 8])
    def test_order_matches_sequential(self, max_workers):
        loops = self._loops() * 5
        sequential = [synthesize(loop, ShapeKind.POLYLINE) for loop in loops]
        assert synthesize(loops, ShapeKind.POLYLINE, max_workers=max_workers) == sequential

    def test_inline_below_threshold(self):
        loops = self._loops()
        inline = synthesize_many(loops, ShapeKind.HEIGHTFIELD, parallel_min_regions=100)
        pooled = synthesize_many(loops, ShapeKind.HEIGHTFIELD, parallel_min_regions=1)
        assert inline == pooled

    def test_empty_sequence(self):
        assert synthesize([], ShapeKind.CONVEX_HULL) == []

    def test_kind_as_string(self, square_mask):
        assert synthesize([trace_single(square_mask)], "polyline")[0] is not None
