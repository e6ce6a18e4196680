"""
Tests for edge geometry: path selection, Bezier sampling, loop and parallel
edge placement, and point distances.
"""

import math

import numpy as np
import pytest

from graphtool.geometry import (
    SAMPLE_COUNT,
    LOOP_CONTROL_DISTANCE,
    PathKind,
    cubic_bezier,
    distance_point_to_curve,
    distance_point_to_segment,
    distance_to_pair,
    edge_paths,
    iter_drawable_pairs,
    loop_paths,
    parallel_offset,
    parallel_paths,
    paths_for_pair,
)
from graphtool.graph import Graph


def loop_center_angle(path):
    """Angle from the vertex to the midpoint of the loop's two control points."""
    (x, y), c1, c2, _ = path.points
    mx, my = (c1[0] + c2[0]) / 2, (c1[1] + c2[1]) / 2
    return math.atan2(my - y, mx - x) % (2 * math.pi)


class TestSegmentDistance:

    def test_perpendicular(self):
        assert distance_point_to_segment((50, 10), (0, 0), (100, 0)) == pytest.approx(10)

    def test_beyond_end_clamps_to_endpoint(self):
        assert distance_point_to_segment((130, 40), (0, 0), (100, 0)) == pytest.approx(50)

    def test_before_start_clamps_to_startpoint(self):
        assert distance_point_to_segment((-3, -4), (0, 0), (100, 0)) == pytest.approx(5)

    def test_degenerate_segment_is_a_point(self):
        assert distance_point_to_segment((3, 4), (0, 0), (0, 0)) == pytest.approx(5)
        assert distance_point_to_segment((0, 0), (0, 0), (0, 0)) == 0


class TestPathSelection:

    def test_no_edges_no_paths(self):
        assert edge_paths((0, 0), (100, 0), 0, False) == []
        assert edge_paths((0, 0), (0, 0), 0, True) == []

    def test_single_edge_is_straight(self):
        paths = edge_paths((0, 0), (100, 0), 1, False)
        assert len(paths) == 1
        assert paths[0].kind is PathKind.LINE
        assert paths[0].points == ((0, 0), (100, 0))

    def test_parallel_edges_are_quadratics(self):
        paths = edge_paths((0, 0), (100, 0), 3, False)
        assert [p.kind for p in paths] == [PathKind.QUADRATIC] * 3
        assert [p.index for p in paths] == [0, 1, 2]
        assert all(p.bundle_size == 3 for p in paths)

    def test_loops_are_cubics(self):
        paths = edge_paths((10, 10), (10, 10), 2, True)
        assert [p.kind for p in paths] == [PathKind.CUBIC] * 2


class TestParallelEdges:

    def test_offsets_for_three(self):
        assert [parallel_offset(k, 3) for k in range(3)] == [-20, 0, 20]

    def test_middle_of_three_follows_the_chord(self):
        k0, k1, k2 = parallel_paths((0, 0), (100, 0), 3)

        assert k1.points[1] == (50, 0)
        assert np.abs(k1.samples()[:, 1]).max() < 1e-9

        # Outer curves mirror each other around the midpoint
        (c0x, c0y), (c2x, c2y) = k0.points[1], k2.points[1]
        assert (c0x - 50, c0y) == (-(c2x - 50), -c2y)
        assert c0y > 0 > c2y

    def test_quadratic_sample_at_half(self):
        k0 = parallel_paths((0, 0), (100, 0), 2)[0]
        samples = k0.samples()

        assert k0.points[1] == (30, 20)
        assert samples.shape == (SAMPLE_COUNT, 2)
        assert np.allclose(samples[SAMPLE_COUNT // 2], [40, 10])
        assert np.allclose(samples[0], [0, 0])
        assert np.allclose(samples[-1], [100, 0])


class TestLoops:

    @pytest.mark.parametrize("count", [1, 2, 3, 4, 6])
    def test_loops_evenly_spaced(self, count):
        paths = loop_paths((200, 150), count)
        angles = [loop_center_angle(p) for p in paths]

        assert len(paths) == count
        for k, angle in enumerate(angles):
            expected = (k * 2 * math.pi / count) % (2 * math.pi)
            diff = (angle - expected + math.pi) % (2 * math.pi) - math.pi
            assert abs(diff) < 1e-9

    def test_two_loops_are_opposite(self):
        a, b = loop_paths((0, 0), 2)
        assert abs(loop_center_angle(b) - loop_center_angle(a)) == pytest.approx(math.pi)

    def test_loop_control_points(self):
        (path,) = loop_paths((0, 0), 1)
        start, c1, c2, end = path.points

        assert start == end == (0, 0)
        assert math.hypot(*c1) == pytest.approx(LOOP_CONTROL_DISTANCE)
        assert math.hypot(*c2) == pytest.approx(LOOP_CONTROL_DISTANCE)
        assert math.atan2(c1[1], c1[0]) == pytest.approx(-math.pi / 10)
        assert math.atan2(c2[1], c2[0]) == pytest.approx(math.pi / 10)

    def test_loop_starts_and_ends_at_vertex(self):
        samples = loop_paths((5, 7), 3)[1].samples()
        assert np.allclose(samples[0], [5, 7])
        assert np.allclose(samples[-1], [5, 7])


class TestCurveDistance:

    def test_point_on_curve(self):
        k0 = parallel_paths((0, 0), (100, 0), 2)[0]
        assert k0.distance_to((40, 10)) == pytest.approx(0, abs=1e-9)

    def test_coincident_control_points(self):
        samples = cubic_bezier((1, 1), (1, 1), (1, 1), (1, 1))
        assert distance_point_to_curve((4, 5), samples) == pytest.approx(5)

    def test_empty_samples(self):
        assert distance_point_to_curve((0, 0), np.empty((0, 2))) == math.inf


class TestGraphQueries:

    @pytest.fixture
    def graph(self):
        g = Graph()
        g.add_vertex(0, 0)
        g.add_vertex(100, 0)
        g.add_vertex(0, 100)
        return g

    def test_paths_for_pair(self, graph):
        graph.add_edge(0, 1)
        graph.add_edge(1, 0)

        forward = paths_for_pair(graph, 0, 1)
        assert len(forward) == 2
        assert forward[0].points[0] == (0, 0)
        assert paths_for_pair(graph, 0, 2) == []
        assert paths_for_pair(graph, 0, 9) == []

    def test_distance_to_pair(self, graph):
        graph.add_edge(0, 1)
        assert distance_to_pair(graph, 0, 1, (50, 10)) == pytest.approx(10)
        assert distance_to_pair(graph, 1, 2, (50, 10)) == math.inf

    def test_undirected_pairs_visited_once_loops_last(self, graph):
        graph.add_edge(2, 2)
        graph.add_edge(1, 0)
        graph.add_edge(0, 2)

        assert list(iter_drawable_pairs(graph)) == [(0, 1), (0, 2), (2, 2)]

    def test_directed_pairs_visited_per_orientation(self):
        g = Graph(directed=True)
        g.add_vertex(0, 0)
        g.add_vertex(100, 0)
        g.add_edge(1, 0)
        g.add_edge(0, 1)
        g.add_edge(1, 1)

        assert list(iter_drawable_pairs(g)) == [(0, 1), (1, 0), (1, 1)]
