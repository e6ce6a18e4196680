"""
Plain-text dump of a graph: adjacency matrix, vertex and edge counts, degrees.
"""

from typing import List

from graphtool.graph import Graph

COLUMN_WIDTH = 10


def graph_report(graph: Graph) -> str:
    """
    Build the "Print Info" report.

    Layout:
        Adjacency Matrix:
                  V1        V2
        V1        0         2
        V2        2         0

        # vertices: 2
        # edges: 2
        deg(V0 "V1"): 2
        ...
    """
    w = COLUMN_WIDTH
    vertices = graph.vertices
    matrix = graph.matrix()

    lines: List[str] = ["Adjacency Matrix:"]
    lines.append((" " * w + "".join(f"{v.label:<{w}}" for v in vertices)).rstrip())
    for vertex, row in zip(vertices, matrix):
        lines.append((f"{vertex.label:<{w}}" + "".join(f"{m:<{w}d}" for m in row)).rstrip())

    lines.append("")
    lines.append(f"# vertices: {graph.vertex_count}")
    lines.append(f"# edges: {graph.edge_count()}")
    for index, vertex in enumerate(vertices):
        lines.append(f'deg(V{index} "{vertex.label}"): {graph.degree(index)}')

    return "\n".join(lines)
