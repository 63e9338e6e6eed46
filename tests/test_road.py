"""
Tests for the polyline distance utility.

Run with: pytest tests/test_road.py -v
"""

import math

import numpy as np
import pytest

from shortestpath.road import LineSegment, Road, Vec, default_road, DEFAULT_ROAD_POINTS


class TestVec:

    def test_arithmetic(self):
        assert Vec(1, 2) + Vec(3, 4) == Vec(4, 6)
        assert Vec(5, 5) - Vec(1, 2) == Vec(4, 3)
        assert 2.0 * Vec(1, -1) == Vec(2, -2)
        assert Vec(1, -1) * 3 == Vec(3, -3)

    def test_int_components_become_float(self):
        v = Vec(3, 4)
        assert isinstance(v.x, float)
        assert v == Vec(3.0, 4.0)

    def test_dot_and_distance(self):
        assert Vec(1, 2).dot(Vec(3, 4)) == 11
        assert Vec(0, 0).squared_distance(Vec(3, 4)) == 25
        assert Vec(0, 0).distance(Vec(3, 4)) == 5

    def test_random_in_range(self):
        rng = np.random.default_rng(3)
        for _ in range(50):
            v = Vec.random(rng)
            assert -1 <= v.x < 1
            assert -1 <= v.y < 1

    def test_random_reproducible(self):
        a = Vec.random(np.random.default_rng(11))
        b = Vec.random(np.random.default_rng(11))
        assert a == b


class TestLineSegment:

    def setup_method(self):
        self.segment = LineSegment(Vec(0, 0), Vec(10, 0))

    def test_length(self):
        assert self.segment.length == 10
        assert LineSegment(Vec(0, 0), Vec(3, 4)).length == 5

    def test_call_interpolates(self):
        assert self.segment(0) == Vec(0, 0)
        assert self.segment(1) == Vec(10, 0)
        assert self.segment(0.25) == Vec(2.5, 0)

    def test_closest_point_projection(self):
        assert self.segment.closest_point(Vec(4, 7)) == Vec(4, 0)

    def test_closest_point_before_start(self):
        assert self.segment.closest_point(Vec(-3, 1)) == Vec(0, 0)

    def test_closest_point_after_end(self):
        assert self.segment.closest_point(Vec(14, -2)) == Vec(10, 0)

    def test_degenerate_segment(self):
        point = LineSegment(Vec(2, 2), Vec(2, 2))
        assert point.closest_point(Vec(5, 6)) == Vec(2, 2)
        assert point.squared_distance_to(Vec(5, 6)) == 25

    def test_squared_distance_to(self):
        assert self.segment.squared_distance_to(Vec(4, 3)) == 9


class TestRoad:

    def setup_method(self):
        self.road = Road(Vec(0, 0), Vec(10, 0), Vec(10, 10))

    def test_segments(self):
        assert len(self.road.segments) == 2
        assert self.road.segments[1].a == Vec(10, 0)

    def test_distance_on_first_segment(self):
        assert self.road.distance_from_start(Vec(5, 1)) == pytest.approx(math.sqrt(26))

    def test_distance_on_second_segment(self):
        assert self.road.distance_from_start(Vec(11, 5)) == pytest.approx(10 + math.sqrt(26))

    def test_tie_prefers_earlier_segment(self):
        # The corner is on both segments
        assert self.road.distance_from_start(Vec(10, 0)) == pytest.approx(10)

    def test_point_on_road_measures_arc_length(self):
        assert self.road.distance_from_start(Vec(10, 4)) == pytest.approx(14)

    def test_no_segments_raises(self):
        with pytest.raises(ValueError, match="no segments"):
            Road(Vec(1, 1)).distance_from_start(Vec(0, 0))
        with pytest.raises(ValueError):
            Road().distance_from_start(Vec(0, 0))

    def test_default_road(self):
        road = default_road()
        assert len(road.segments) == len(DEFAULT_ROAD_POINTS) - 1
        start = Vec(*DEFAULT_ROAD_POINTS[0])
        assert road.distance_from_start(start) == 0
