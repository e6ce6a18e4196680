"""Graph Tool: build and edit small multigraphs by pointing and clicking."""

__version__ = "0.1.0"

from graphtool.graph import Graph, Vertex, VertexHandle
from graphtool.geometry import EdgePath, PathKind, paths_for_pair, distance_to_pair

__all__ = [
    "Graph",
    "Vertex",
    "VertexHandle",
    "EdgePath",
    "PathKind",
    "paths_for_pair",
    "distance_to_pair",
]
