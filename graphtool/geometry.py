"""
Edge geometry for drawing and hit-testing.

Turns an entry of the multiplicity matrix into the path(s) painted on the
canvas, and measures how far a point is from those paths. The same functions
serve the renderer and the click handlers, so what is hit is exactly what is
drawn.

Path selection for a vertex pair (i, j) with multiplicity m:
- m == 0: nothing.
- loop (i == j): m cubic Bezier loops fanned evenly around the vertex.
- m == 1: a straight segment.
- m >= 2: m quadratic Bezier curves whose control points step away from the
  chord midpoint.

Curves are sampled at SAMPLE_STEP and treated as polylines.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterator, List, Tuple

import numpy as np

if TYPE_CHECKING:
    from graphtool.graph import Graph

Point = Tuple[float, float]

SAMPLE_STEP = 0.001
SAMPLE_COUNT = int(round(1.0 / SAMPLE_STEP)) + 1

LOOP_CONTROL_DISTANCE = 60.0
LOOP_HALF_SPREAD = math.pi / 10

PARALLEL_STEP = 20.0

_T = np.linspace(0.0, 1.0, SAMPLE_COUNT)


class PathKind(str, Enum):
    LINE = "line"
    QUADRATIC = "quadratic"
    CUBIC = "cubic"


@dataclass(frozen=True)
class EdgePath:
    """
    One drawable instance of an edge.

    `points` are the Bezier control points including both endpoints:
    2 for a line, 3 for a quadratic, 4 for a cubic. `index` is the position
    of this instance inside its bundle of `bundle_size` parallel edges or loops.
    """
    kind: PathKind
    points: Tuple[Point, ...]
    index: int = 0
    bundle_size: int = 1

    def samples(self) -> np.ndarray:
        """(N, 2) array of points along the path."""
        if self.kind is PathKind.LINE:
            return np.asarray(self.points, dtype=float)
        if self.kind is PathKind.QUADRATIC:
            return quadratic_bezier(*self.points)
        return cubic_bezier(*self.points)

    def distance_to(self, point: Point) -> float:
        if self.kind is PathKind.LINE:
            return distance_point_to_segment(point, self.points[0], self.points[1])
        return distance_point_to_curve(point, self.samples())


# -----------------
# SAMPLING
# -----------------

def quadratic_bezier(p0: Point, c: Point, p1: Point) -> np.ndarray:
    """Evaluate B(t) = (1-t)^2 p0 + 2(1-t)t c + t^2 p1 at every sample t."""
    t = _T[:, None]
    u = 1.0 - t
    return u * u * np.asarray(p0) + 2.0 * u * t * np.asarray(c) + t * t * np.asarray(p1)


def cubic_bezier(p0: Point, c1: Point, c2: Point, p1: Point) -> np.ndarray:
    """Evaluate the cubic Bezier with control points c1, c2 at every sample t."""
    t = _T[:, None]
    u = 1.0 - t
    return (u ** 3 * np.asarray(p0)
            + 3.0 * u * u * t * np.asarray(c1)
            + 3.0 * u * t * t * np.asarray(c2)
            + t ** 3 * np.asarray(p1))


# -----------------
# PATH BUILDERS
# -----------------

def loop_angle(index: int, count: int) -> float:
    """Center angle of loop `index` out of `count` loops on one vertex."""
    return index * (2.0 * math.pi / count)


def loop_paths(center: Point, count: int) -> List[EdgePath]:
    """`count` cubic loops starting and ending at `center`, evenly spaced by angle."""
    x, y = center
    paths = []
    for k in range(count):
        theta = loop_angle(k, count)
        left = theta - LOOP_HALF_SPREAD
        right = theta + LOOP_HALF_SPREAD
        c_left = (x + LOOP_CONTROL_DISTANCE * math.cos(left),
                  y + LOOP_CONTROL_DISTANCE * math.sin(left))
        c_right = (x + LOOP_CONTROL_DISTANCE * math.cos(right),
                   y + LOOP_CONTROL_DISTANCE * math.sin(right))
        paths.append(EdgePath(PathKind.CUBIC, (center, c_left, c_right, center), k, count))
    return paths


def parallel_offset(index: int, count: int, step: float = PARALLEL_STEP) -> float:
    # Integer halving keeps the middle instance of an odd bundle on the chord
    return step * (index - count // 2)


def parallel_paths(start: Point, end: Point, count: int) -> List[EdgePath]:
    """`count` quadratic curves between two distinct vertices."""
    mid_x = (start[0] + end[0]) / 2
    mid_y = (start[1] + end[1]) / 2
    paths = []
    for k in range(count):
        offset = parallel_offset(k, count)
        control = (mid_x + offset, mid_y - offset)
        paths.append(EdgePath(PathKind.QUADRATIC, (start, control, end), k, count))
    return paths


def edge_paths(start: Point, end: Point, multiplicity: int, is_loop: bool) -> List[EdgePath]:
    """Apply the path selection rule for one vertex pair."""
    if multiplicity <= 0:
        return []
    if is_loop:
        return loop_paths(start, multiplicity)
    if multiplicity == 1:
        return [EdgePath(PathKind.LINE, (start, end))]
    return parallel_paths(start, end, multiplicity)


# -----------------
# DISTANCES
# -----------------

def distance_point_to_segment(point: Point, a: Point, b: Point) -> float:
    """
    Distance from `point` to segment a-b.

    The projection parameter is clamped to [0, 1]; a zero-length segment is
    treated as the point `a`.
    """
    px, py = point
    x1, y1 = a
    x2, y2 = b
    dx, dy = x2 - x1, y2 - y1

    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return math.hypot(px - x1, py - y1)

    t = max(0.0, min(1.0, ((px - x1) * dx + (py - y1) * dy) / length_sq))
    return math.hypot(px - (x1 + t * dx), py - (y1 + t * dy))


def distance_point_to_curve(point: Point, samples: np.ndarray) -> float:
    """Minimum distance from `point` to any sampled curve point."""
    if len(samples) == 0:
        return math.inf
    d = np.hypot(samples[:, 0] - point[0], samples[:, 1] - point[1])
    return float(d.min())


# -----------------
# GRAPH QUERIES
# -----------------

def iter_drawable_pairs(graph: Graph) -> Iterator[Tuple[int, int]]:
    """
    Yield each vertex pair whose edges are drawn, in hit-test priority order.

    Non-loop pairs come first (undirected: i < j once; directed: every ordered
    pair, row-major), then self-pairs. Pairs with multiplicity 0 are skipped.
    """
    n = graph.vertex_count
    for i in range(n):
        for j in range(n):
            if i == j or (not graph.directed and j < i):
                continue
            if graph.multiplicity(i, j) > 0:
                yield i, j
    for i in range(n):
        if graph.multiplicity(i, i) > 0:
            yield i, i


def paths_for_pair(graph: Graph, i: int, j: int) -> List[EdgePath]:
    """Every path instance for pair (i, j); empty for invalid or unconnected pairs."""
    m = graph.multiplicity(i, j)
    if m == 0:
        return []
    start = graph.vertex(i).position
    end = graph.vertex(j).position
    return edge_paths(start, end, m, i == j)


def distance_to_pair(graph: Graph, i: int, j: int, point: Point) -> float:
    """Smallest distance from `point` to any instance of pair (i, j), or inf."""
    paths = paths_for_pair(graph, i, j)
    if not paths:
        return math.inf
    return min(path.distance_to(point) for path in paths)
