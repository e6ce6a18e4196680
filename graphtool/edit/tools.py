"""
The closed set of editing tools offered by the toolbar.

The current tool is UI state; it is passed into every controller call rather
than stored globally.
"""

from enum import Enum


class Tool(str, Enum):
    ADD_VERTEX = "add_vertex"
    ADD_EDGE = "add_edge"
    DELETE_VERTEX = "delete_vertex"
    DELETE_EDGE = "delete_edge"
    MOVE_VERTEX = "move_vertex"
    COLOR_VERTEX = "color_vertex"
    NAME_VERTEX = "name_vertex"
    PRINT_INFO = "print_info"

    @property
    def label(self) -> str:
        return TOOL_LABELS[self]

    @property
    def is_mode(self) -> bool:
        """False for one-shot actions that never stay selected."""
        return self is not Tool.PRINT_INFO


TOOL_LABELS = {
    Tool.ADD_VERTEX: "Add Vertex",
    Tool.ADD_EDGE: "Add Edge",
    Tool.DELETE_VERTEX: "Delete Vertex",
    Tool.DELETE_EDGE: "Delete Edge",
    Tool.MOVE_VERTEX: "Move Vertex",
    Tool.COLOR_VERTEX: "Color Vertex",
    Tool.NAME_VERTEX: "Name Vertex",
    Tool.PRINT_INFO: "Print Info",
}
