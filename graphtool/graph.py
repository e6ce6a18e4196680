"""
Graph store for the graph tool.

Vertices live in an ordered list and edges in an N x N multiplicity matrix where
entry (i, j) counts the edges from vertex i to vertex j. Parallel edges and
loops are allowed.

Counting rules:
- Undirected graphs mirror every non-loop edge into (j, i).
- A loop is stored once on the diagonal and counts once towards degree and
  edge count, in both modes.
- delete_edge removes ONE edge (decrement, mirrored for undirected non-loops)
  and never drives an entry below zero.

Vertex indices shift down after a deletion. Code that needs to keep pointing at
a vertex across edits should hold a VertexHandle and resolve it when needed.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import networkx as nx

logger = logging.getLogger(__name__)

DEFAULT_VERTEX_COLOR = "#ff0000"


@dataclass
class Vertex:
    """A drawable vertex. Identity is its position in the graph's vertex list."""
    x: float
    y: float
    label: str
    color: str = DEFAULT_VERTEX_COLOR

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class VertexHandle:
    """Stable reference to a vertex that survives deletion of other vertices."""
    slot: int
    generation: int


class Graph:
    """
    Vertex list plus multiplicity matrix.

    All index based operations are defensive: an out-of-range index makes the
    call a no-op that returns False (or 0 for queries) instead of raising.
    """

    def __init__(self, directed: bool = False):
        self.directed = directed
        self._vertices: List[Vertex] = []
        self._matrix: List[List[int]] = []
        # Handle bookkeeping: _slots[i] is the slot id of the vertex at index i
        self._slots: List[int] = []
        self._generations: List[int] = []

    # -----------------
    # READ ACCESS
    # -----------------

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        return tuple(self._vertices)

    def vertex(self, index: int) -> Optional[Vertex]:
        if not self._valid(index):
            return None
        return self._vertices[index]

    def matrix(self) -> List[List[int]]:
        """Return a copy of the multiplicity matrix."""
        return [row[:] for row in self._matrix]

    def multiplicity(self, i: int, j: int) -> int:
        if not (self._valid(i) and self._valid(j)):
            return 0
        return self._matrix[i][j]

    def next_label(self) -> str:
        return f"V{len(self._vertices) + 1}"

    def _valid(self, index: int) -> bool:
        return isinstance(index, int) and 0 <= index < len(self._vertices)

    # -----------------
    # VERTEX OPERATIONS
    # -----------------

    def add_vertex(self, x: float, y: float, label: Optional[str] = None,
                   color: Optional[str] = None) -> int:
        """
        Append a vertex and grow the matrix by one zero row and column.

        Returns:
            Index of the new vertex (always the last one).
        """
        if label is None:
            label = self.next_label()
        vertex = Vertex(float(x), float(y), label, color or DEFAULT_VERTEX_COLOR)
        self._vertices.append(vertex)

        for row in self._matrix:
            row.append(0)
        self._matrix.append([0] * len(self._vertices))

        self._generations.append(0)
        self._slots.append(len(self._generations) - 1)

        index = len(self._vertices) - 1
        logger.debug(f"Added vertex {index} '{label}' at ({vertex.x:.1f}, {vertex.y:.1f})")
        return index

    def delete_vertex(self, index: int) -> bool:
        """
        Remove a vertex together with every edge incident to it.

        Every index greater than `index` shifts down by one.
        """
        if not self._valid(index):
            logger.debug(f"delete_vertex ignored: index {index} out of range")
            return False

        removed = self._vertices.pop(index)
        self._matrix.pop(index)
        for row in self._matrix:
            row.pop(index)

        slot = self._slots.pop(index)
        self._generations[slot] += 1

        logger.debug(f"Deleted vertex {index} '{removed.label}'")
        return True

    def move_vertex(self, index: int, x: float, y: float) -> bool:
        if not self._valid(index):
            return False
        vertex = self._vertices[index]
        vertex.x, vertex.y = float(x), float(y)
        return True

    def set_color(self, index: int, color: str) -> bool:
        if not self._valid(index):
            return False
        self._vertices[index].color = color
        return True

    def set_label(self, index: int, label: str) -> bool:
        if not self._valid(index):
            return False
        self._vertices[index].label = label
        return True

    # -----------------
    # HANDLES
    # -----------------

    def handle_of(self, index: int) -> Optional[VertexHandle]:
        if not self._valid(index):
            return None
        slot = self._slots[index]
        return VertexHandle(slot, self._generations[slot])

    def resolve(self, handle: Optional[VertexHandle]) -> Optional[int]:
        """Current index of the vertex behind `handle`, or None if it was deleted."""
        if handle is None:
            return None
        if not 0 <= handle.slot < len(self._generations):
            return None
        if self._generations[handle.slot] != handle.generation:
            return None
        return self._slots.index(handle.slot)

    # -----------------
    # EDGE OPERATIONS
    # -----------------

    def add_edge(self, i: int, j: int) -> bool:
        """Add one edge i -> j. Undirected non-loop edges are mirrored into (j, i)."""
        if not (self._valid(i) and self._valid(j)):
            logger.debug(f"add_edge ignored: ({i}, {j}) out of range")
            return False

        self._matrix[i][j] += 1
        if i != j and not self.directed:
            self._matrix[j][i] += 1

        logger.debug(f"Added edge ({i}, {j}); multiplicity now {self._matrix[i][j]}")
        return True

    def delete_edge(self, i: int, j: int) -> bool:
        """
        Remove one edge i -> j.

        Returns False when an index is out of range or there is no edge to remove.
        """
        if not (self._valid(i) and self._valid(j)):
            logger.debug(f"delete_edge ignored: ({i}, {j}) out of range")
            return False
        if self._matrix[i][j] == 0:
            return False

        self._matrix[i][j] -= 1
        if i != j and not self.directed:
            self._matrix[j][i] = max(0, self._matrix[j][i] - 1)

        logger.debug(f"Deleted edge ({i}, {j}); multiplicity now {self._matrix[i][j]}")
        return True

    # -----------------
    # COUNTS
    # -----------------

    def degree(self, index: int) -> int:
        """Row sum: loops count once; in directed graphs this is the out-degree."""
        if not self._valid(index):
            return 0
        return sum(self._matrix[index])

    def edge_count(self) -> int:
        n = len(self._vertices)
        if self.directed:
            return sum(sum(row) for row in self._matrix)
        return sum(self._matrix[i][j] for i in range(n) for j in range(i, n))

    # -----------------
    # EXPORT
    # -----------------

    def to_networkx(self) -> nx.MultiGraph:
        """
        Export into a networkx multigraph keyed by vertex index.

        Returns a MultiDiGraph for directed graphs, MultiGraph otherwise.
        """
        G = nx.MultiDiGraph() if self.directed else nx.MultiGraph()
        for index, vertex in enumerate(self._vertices):
            G.add_node(index, label=vertex.label, color=vertex.color, pos=vertex.position)

        n = len(self._vertices)
        for i in range(n):
            start = 0 if self.directed else i
            for j in range(start, n):
                for _ in range(self._matrix[i][j]):
                    G.add_edge(i, j)
        return G
