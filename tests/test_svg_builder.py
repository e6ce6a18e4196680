import pytest

from graphtool.edit.constants import EDGE_START_RING_COLOR
from graphtool.graph import Graph
from graphtool.svg_builder import build_svg


@pytest.fixture
def graph():
    g = Graph()
    g.add_vertex(0, 0)
    g.add_vertex(100, 0)
    return g


def test_single_edge_is_a_line(graph):
    graph.add_edge(0, 1)
    svg = build_svg(graph, edge_color="#123456")

    assert svg.count("<line ") == 1
    assert '<line x1="0.0" y1="0.0" x2="100.0" y2="0.0" stroke="#123456"' in svg
    assert "<polyline" not in svg
    assert "marker-end" not in svg


def test_parallel_edges_and_loops_are_polylines(graph):
    graph.add_edge(0, 1)
    graph.add_edge(0, 1)
    graph.add_edge(1, 1)

    svg = build_svg(graph)

    assert svg.count("<polyline") == 3
    assert "<line " not in svg


def test_undirected_pair_drawn_once(graph):
    graph.add_edge(1, 0)
    assert build_svg(graph).count("<line ") == 1


def test_directed_edges_get_arrows(graph):
    g = Graph(directed=True)
    g.add_vertex(0, 0)
    g.add_vertex(100, 0)
    g.add_edge(0, 1)
    g.add_edge(1, 1)

    svg = build_svg(g)

    assert '<marker id="arrow"' in svg
    assert svg.count('marker-end="url(#arrow)"') == 1


def test_vertices_drawn_after_edges_with_escaped_labels(graph):
    graph.add_edge(0, 1)
    graph.set_label(1, "<a&b>")

    svg = build_svg(graph)

    assert svg.index("<line ") < svg.index("<circle")
    assert svg.count("<circle") == 2
    assert "&lt;a&amp;b&gt;" in svg
    assert "<a&b>" not in svg


def test_edge_start_ring(graph):
    assert EDGE_START_RING_COLOR not in build_svg(graph)
    svg = build_svg(graph, edge_start=1)
    assert svg.count(EDGE_START_RING_COLOR) == 1
    assert svg.count("<circle") == 3
