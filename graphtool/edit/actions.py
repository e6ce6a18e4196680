"""
Edit Actions - Graph mutations triggered by the editing tools.

Each method performs one concrete change on the Graph and reports what
happened as an EditResult. Hit-testing decides WHAT was clicked; these
methods decide what to do about it.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from graphtool.config import Settings
from graphtool.edit.hit_test import find_edge_at
from graphtool.geometry import Point
from graphtool.graph import Graph, VertexHandle
from graphtool.report import graph_report

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditResult:
    """Outcome of one edit: `changed` is False when the input was ignored."""
    action: str
    changed: bool = False
    detail: str = ""


NOTHING = EditResult("none")


class EditActions:
    """
    Executes editing actions against a Graph.

    Vertex colors come from the settings: new vertices get `vertex_color`,
    the color tool applies `paint_color`.
    """

    def __init__(self, graph: Graph, settings: Optional[Settings] = None):
        self.graph = graph
        self.settings = settings or Settings()

    def add_vertex(self, x: float, y: float) -> EditResult:
        label = self.graph.next_label()
        index = self.graph.add_vertex(x, y, label, self.settings.vertex_color)
        logger.info(f"Added vertex {label} at ({x:.0f}, {y:.0f})")
        return EditResult("add_vertex", True, f"index={index}")

    def connect(self, start: VertexHandle, end_index: int) -> EditResult:
        """Add one edge from the vertex behind `start` to `end_index`."""
        start_index = self.graph.resolve(start)
        if start_index is None:
            logger.debug("Edge start vertex no longer exists; ignoring")
            return NOTHING
        if not self.graph.add_edge(start_index, end_index):
            return NOTHING
        kind = "loop" if start_index == end_index else "edge"
        logger.info(f"Added {kind} ({start_index}, {end_index}); "
                    f"multiplicity {self.graph.multiplicity(start_index, end_index)}")
        return EditResult("add_edge", True, f"{start_index}->{end_index}")

    def delete_vertex(self, index: int) -> EditResult:
        vertex = self.graph.vertex(index)
        if vertex is None or not self.graph.delete_vertex(index):
            return NOTHING
        logger.info(f"Deleted vertex {vertex.label}")
        return EditResult("delete_vertex", True, vertex.label)

    def delete_edge_at(self, point: Point) -> EditResult:
        """Remove one edge from the first pair whose drawn path passes near `point`."""
        hit = find_edge_at(self.graph, point)
        if hit is None:
            return NOTHING
        if not self.graph.delete_edge(hit.source, hit.target):
            return NOTHING
        logger.info(f"Deleted edge ({hit.source}, {hit.target}) instance {hit.instance}; "
                    f"multiplicity now {self.graph.multiplicity(hit.source, hit.target)}")
        return EditResult("delete_edge", True, f"{hit.source}->{hit.target}")

    def move_vertex(self, handle: VertexHandle, x: float, y: float) -> EditResult:
        index = self.graph.resolve(handle)
        if index is None or not self.graph.move_vertex(index, x, y):
            return NOTHING
        return EditResult("move_vertex", True)

    def paint_vertex(self, index: int) -> EditResult:
        if not self.graph.set_color(index, self.settings.paint_color):
            return NOTHING
        return EditResult("color_vertex", True, self.settings.paint_color)

    def rename_vertex(self, handle: VertexHandle, label: str) -> EditResult:
        label = (label or "").strip()
        index = self.graph.resolve(handle)
        if index is None or not label:
            return NOTHING
        old = self.graph.vertex(index).label
        self.graph.set_label(index, label)
        logger.info(f"Renamed vertex {old} -> {label}")
        return EditResult("name_vertex", True, label)

    def report(self) -> EditResult:
        text = graph_report(self.graph)
        logger.info(f"Graph info:\n{text}")
        return EditResult("print_info", False, text)
