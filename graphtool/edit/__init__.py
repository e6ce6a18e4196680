"""
Interactive editing for the graph tool.

This package maps canvas clicks to graph edits:
- Tool: the toolbar's closed set of tools
- EditController: multi-click state and per-tool dispatch
- EditActions: Graph mutation execution
- hit_test: resolving points to vertices and edges
- handlers: NiceGUI event glue for app.py (imported directly, needs nicegui)

Usage:
    from graphtool.edit import EditController, EditActions, Tool
    from graphtool.edit.handlers import setup_edit_handlers
"""

from graphtool.edit.constants import (
    VERTEX_RADIUS,
    EDGE_HIT_THRESHOLD,
)
from graphtool.edit.tools import Tool
from graphtool.edit.hit_test import EdgeHit, find_vertex_at, find_edge_at
from graphtool.edit.actions import EditActions, EditResult
from graphtool.edit.controller import EditController, EditState

__all__ = [
    'Tool',
    'EditController',
    'EditState',
    'EditActions',
    'EditResult',
    'EdgeHit',
    'find_vertex_at',
    'find_edge_at',
    'VERTEX_RADIUS',
    'EDGE_HIT_THRESHOLD',
]
