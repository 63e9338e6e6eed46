"""
Road - Distance along a polyline.

Projects a point onto the nearest segment of a polyline and reports how far
along the polyline that segment starts, plus the straight-line distance from
the segment's start to the point. Unrelated to the grid search.
"""

from dataclasses import dataclass
from typing import List, Optional
import math

import numpy as np


def square(x: float) -> float:
    return x * x


@dataclass(frozen=True)
class Vec:
    """2D vector with float components."""
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    def __add__(self, v: 'Vec') -> 'Vec':
        return Vec(self.x + v.x, self.y + v.y)

    def __sub__(self, v: 'Vec') -> 'Vec':
        return Vec(self.x - v.x, self.y - v.y)

    def __mul__(self, k: float) -> 'Vec':
        return Vec(k * self.x, k * self.y)

    __rmul__ = __mul__

    def dot(self, v: 'Vec') -> float:
        return self.x * v.x + self.y * v.y

    def squared_distance(self, p: 'Vec') -> float:
        return square(self.x - p.x) + square(self.y - p.y)

    def distance(self, p: 'Vec') -> float:
        return math.sqrt(self.squared_distance(p))

    @staticmethod
    def random(rng: Optional[np.random.Generator] = None) -> 'Vec':
        """Random vector with both components in [-1, 1)."""
        if rng is None:
            rng = np.random.default_rng()
        return Vec(rng.random() * 2 - 1, rng.random() * 2 - 1)


class LineSegment:
    """Segment from a to b, callable as a map from [0, 1] onto the segment."""

    def __init__(self, a: Vec, b: Vec):
        self.a = a
        self.b = b

    @property
    def length(self) -> float:
        return math.sqrt(self.a.squared_distance(self.b))

    def __call__(self, t: float) -> Vec:
        return (1 - t) * self.a + t * self.b

    def closest_point(self, p: Vec) -> Vec:
        """
        Return the point on this segment closest to p.

        Projects p onto b - a. If the projection falls inside the segment it
        is the answer; otherwise the nearer endpoint is.
        """
        v = self.b - self.a
        vv = v.dot(v)
        if vv == 0:
            return self.a

        u = self.a - p
        t = -v.dot(u) / vv

        if 0.0 <= t <= 1.0:
            return self(t)
        if self.a.squared_distance(p) <= self.b.squared_distance(p):
            return self.a
        return self.b

    def squared_distance_to(self, p: Vec) -> float:
        return p.squared_distance(self.closest_point(p))

    def __repr__(self):
        return f"LineSegment({self.a}, {self.b})"


class Road:
    """Polyline through the given points."""

    def __init__(self, *points: Vec):
        self.points = list(points)
        self.segments: List[LineSegment] = [
            LineSegment(a, b) for a, b in zip(self.points, self.points[1:])
        ]

    def distance_from_start(self, p: Vec) -> float:
        """
        Distance along the road to the segment nearest p, plus the distance
        from that segment's start point to p.

        Raises:
            ValueError: If the road has no segments
        """
        if not self.segments:
            raise ValueError("no segments")

        best_index = min(
            range(len(self.segments)),
            key=lambda i: self.segments[i].squared_distance_to(p)
        )
        best = self.segments[best_index]
        before = sum(s.length for s in self.segments[:best_index])
        return before + best.a.distance(p)


DEFAULT_ROAD_POINTS = [
    (320, 300),
    (480, 425),
    (520, 420),
    (595, 290),
    (570, 180),
    (570, 100),
]


def default_road() -> Road:
    return Road(*(Vec(x, y) for x, y in DEFAULT_ROAD_POINTS))
