"""
Edit Controller - Single source of truth for in-progress editing state.

The controller turns pointer events into EditActions calls. It owns the state
that spans several events (the first endpoint of a new edge, the vertex being
dragged, the vertex waiting for a new name) and nothing else: the current tool
is supplied by the caller on every call, and every tool has its own handler.

Vertices are remembered by VertexHandle, so deleting a vertex between two
clicks can never redirect a pending edit to a different vertex.
"""

import logging
from dataclasses import dataclass, replace
from typing import Callable, Dict, Optional, Tuple

from graphtool.edit.actions import EditActions, EditResult, NOTHING
from graphtool.edit.hit_test import find_vertex_at
from graphtool.edit.tools import Tool
from graphtool.graph import Graph, VertexHandle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditState:
    """Immutable snapshot of current edit state."""
    mouse_x: float = 0
    mouse_y: float = 0
    edge_start: Optional[VertexHandle] = None
    dragging: Optional[VertexHandle] = None
    naming: Optional[VertexHandle] = None


class EditController:
    """Routes pointer events for the active tool and tracks multi-click state."""

    def __init__(self, graph: Graph, actions: Optional[EditActions] = None):
        self.graph = graph
        self.actions = actions or EditActions(graph)
        self._state = EditState()
        self._on_state_change: Optional[Callable[[EditState], None]] = None
        self._click_handlers: Dict[Tool, Callable[[float, float], EditResult]] = {
            Tool.ADD_VERTEX: self._click_add_vertex,
            Tool.ADD_EDGE: self._click_add_edge,
            Tool.DELETE_VERTEX: self._click_delete_vertex,
            Tool.DELETE_EDGE: self._click_delete_edge,
            Tool.MOVE_VERTEX: self._click_move_vertex,
            Tool.COLOR_VERTEX: self._click_color_vertex,
            Tool.NAME_VERTEX: self._click_name_vertex,
            Tool.PRINT_INFO: self._click_print_info,
        }

    @property
    def state(self) -> EditState:
        return self._state

    def set_on_state_change(self, callback: Callable[[EditState], None]):
        self._on_state_change = callback

    def edge_start_index(self) -> Optional[int]:
        return self.graph.resolve(self._state.edge_start)

    def naming_index(self) -> Optional[int]:
        return self.graph.resolve(self._state.naming)

    # -----------------
    # TOOLBAR
    # -----------------

    def select_tool(self, tool: Tool, current: Tool) -> Tuple[Tool, Optional[EditResult]]:
        """
        Handle a toolbar press.

        Returns:
            (tool that is now current, result of a one-shot action or None).
            One-shot tools run immediately and leave `current` selected.
        """
        if not tool.is_mode:
            return current, self._click_handlers[tool](self._state.mouse_x, self._state.mouse_y)

        if tool != current:
            logger.debug(f"Tool {current.value} -> {tool.value}")
            self._set_state(EditState(mouse_x=self._state.mouse_x, mouse_y=self._state.mouse_y))
        return tool, None

    # -----------------
    # POINTER EVENTS
    # -----------------

    def mouse_down(self, tool: Tool, x: float, y: float) -> EditResult:
        self._state = replace(self._state, mouse_x=x, mouse_y=y)
        return self._click_handlers[tool](x, y)

    def mouse_move(self, tool: Tool, x: float, y: float, pressed: bool) -> EditResult:
        """Track the pointer; with the move tool and the button held, drag a vertex."""
        self._state = replace(self._state, mouse_x=x, mouse_y=y)
        if tool is not Tool.MOVE_VERTEX or not pressed:
            return NOTHING

        if self.graph.resolve(self._state.dragging) is None:
            # Pressing on empty space and sliding onto a vertex picks it up
            self._start_drag_at(x, y)
        if self._state.dragging is None:
            return NOTHING
        return self.actions.move_vertex(self._state.dragging, x, y)

    def mouse_up(self) -> EditResult:
        if self._state.dragging is not None:
            self._set_state(replace(self._state, dragging=None))
        return NOTHING

    # -----------------
    # NAMING
    # -----------------

    def finish_naming(self, label: str) -> EditResult:
        handle = self._state.naming
        self._set_state(replace(self._state, naming=None))
        if handle is None:
            return NOTHING
        return self.actions.rename_vertex(handle, label)

    def cancel_naming(self):
        self._set_state(replace(self._state, naming=None))

    # -----------------
    # TOOL HANDLERS
    # -----------------

    def _click_add_vertex(self, x: float, y: float) -> EditResult:
        return self.actions.add_vertex(x, y)

    def _click_add_edge(self, x: float, y: float) -> EditResult:
        index = find_vertex_at(self.graph, (x, y))
        if index is None:
            return NOTHING

        start = self._state.edge_start
        if self.graph.resolve(start) is None:
            self._set_state(replace(self._state, edge_start=self.graph.handle_of(index)))
            return EditResult("edge_start", False, self.graph.vertex(index).label)

        self._set_state(replace(self._state, edge_start=None))
        return self.actions.connect(start, index)

    def _click_delete_vertex(self, x: float, y: float) -> EditResult:
        index = find_vertex_at(self.graph, (x, y))
        if index is None:
            return NOTHING
        result = self.actions.delete_vertex(index)
        self._drop_dead_handles()
        return result

    def _click_delete_edge(self, x: float, y: float) -> EditResult:
        return self.actions.delete_edge_at((x, y))

    def _click_move_vertex(self, x: float, y: float) -> EditResult:
        self._start_drag_at(x, y)
        return NOTHING

    def _click_color_vertex(self, x: float, y: float) -> EditResult:
        index = find_vertex_at(self.graph, (x, y))
        if index is None:
            return NOTHING
        return self.actions.paint_vertex(index)

    def _click_name_vertex(self, x: float, y: float) -> EditResult:
        index = find_vertex_at(self.graph, (x, y))
        if index is None:
            return NOTHING
        self._set_state(replace(self._state, naming=self.graph.handle_of(index)))
        return EditResult("name_vertex_pending", False, self.graph.vertex(index).label)

    def _click_print_info(self, x: float, y: float) -> EditResult:
        return self.actions.report()

    # -----------------
    # HELPERS
    # -----------------

    def _start_drag_at(self, x: float, y: float):
        index = find_vertex_at(self.graph, (x, y))
        if index is not None:
            self._set_state(replace(self._state, dragging=self.graph.handle_of(index)))

    def _drop_dead_handles(self):
        def live(handle):
            return handle if self.graph.resolve(handle) is not None else None

        s = self._state
        cleaned = replace(s, edge_start=live(s.edge_start), dragging=live(s.dragging), naming=live(s.naming))
        if cleaned != s:
            self._set_state(cleaned)

    def _set_state(self, state: EditState):
        self._state = state
        if self._on_state_change:
            self._on_state_change(self._state)
