"""
SVG scene builder for the graph canvas.

This module converts a Graph into the SVG overlay shown by ui.interactive_image.
Edges are drawn from the same EdgePath samples used for hit-testing, so a
click lands on exactly what the user sees.
"""

from html import escape
from typing import List, Optional

from graphtool.edit.constants import (
    CURVE_STROKE_WIDTH,
    EDGE_START_RING_COLOR,
    EDGE_STROKE_WIDTH,
    VERTEX_RADIUS,
)
from graphtool.geometry import EdgePath, PathKind, iter_drawable_pairs, paths_for_pair
from graphtool.graph import Graph

ARROW_MARKER_ID = "arrow"


def _arrow_defs(color: str, vertex_radius: float) -> str:
    # Tip stops at the target circle's rim instead of under the vertex
    return (
        '<defs>'
        f'<marker id="{ARROW_MARKER_ID}" viewBox="0 0 10 10" markerWidth="10" markerHeight="10" '
        f'refX="{10 + vertex_radius}" refY="5" orient="auto" markerUnits="userSpaceOnUse">'
        f'<path d="M0,0 L10,5 L0,10 z" fill="{color}" />'
        '</marker>'
        '</defs>'
    )


def path_to_svg(path: EdgePath, color: str, arrow: bool = False) -> str:
    """Render one edge instance as an SVG element."""
    marker = f' marker-end="url(#{ARROW_MARKER_ID})"' if arrow else ""
    if path.kind is PathKind.LINE:
        (x1, y1), (x2, y2) = path.points
        return (f'<line x1="{x1:.1f}" y1="{y1:.1f}" x2="{x2:.1f}" y2="{y2:.1f}" '
                f'stroke="{color}" stroke-width="{EDGE_STROKE_WIDTH}"{marker} />')

    points = " ".join(f"{x:.1f},{y:.1f}" for x, y in path.samples())
    return (f'<polyline points="{points}" fill="none" stroke="{color}" '
            f'stroke-width="{CURVE_STROKE_WIDTH}"{marker} />')


def build_svg(
    graph: Graph,
    edge_color: str = "#ff0000",
    vertex_radius: float = VERTEX_RADIUS,
    edge_start: Optional[int] = None,
) -> str:
    """
    Build the SVG content for the canvas overlay.

    Args:
        graph: Graph to draw
        edge_color: Stroke color for every edge
        vertex_radius: Radius of the vertex circles
        edge_start: Index of the vertex chosen as first endpoint of a new edge, if any

    Returns:
        SVG markup (without the outer <svg> element)
    """
    parts: List[str] = []
    if graph.directed:
        parts.append(_arrow_defs(edge_color, vertex_radius))

    # 1. Edges underneath vertices
    for i, j in iter_drawable_pairs(graph):
        arrow = graph.directed and i != j
        for path in paths_for_pair(graph, i, j):
            parts.append(path_to_svg(path, edge_color, arrow))

    # 2. Vertices with centered labels
    for index, vertex in enumerate(graph.vertices):
        if index == edge_start:
            parts.append(f'<circle cx="{vertex.x:.1f}" cy="{vertex.y:.1f}" r="{vertex_radius + 4}" '
                         f'fill="none" stroke="{EDGE_START_RING_COLOR}" stroke-width="3" />')
        parts.append(f'<circle cx="{vertex.x:.1f}" cy="{vertex.y:.1f}" r="{vertex_radius}" '
                     f'fill="{escape(vertex.color)}" />')
        parts.append(f'<text x="{vertex.x:.1f}" y="{vertex.y:.1f}" text-anchor="middle" '
                     f'dominant-baseline="central" font-size="11" fill="white">'
                     f'{escape(vertex.label)}</text>')

    return "\n".join(parts)
