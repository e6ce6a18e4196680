"""
Edit Handlers - Event handlers for the canvas and toolbar in app.py

This module keeps the NiceGUI event plumbing out of app.py. Handlers unpack
UI events, forward them to the EditController together with the current tool
held in the page state, and trigger redraws, dialogs and notifications.
"""

import logging
from typing import Any, Callable, Dict

from nicegui import ui

from graphtool.edit.actions import EditResult
from graphtool.edit.controller import EditController
from graphtool.edit.tools import Tool

logger = logging.getLogger(__name__)

# Bit of MouseEvent.buttons set while the primary button is held
PRIMARY_BUTTON = 1

NOTIFY_ACTIONS = {
    'delete_vertex': 'Deleted vertex {detail}',
    'delete_edge': 'Deleted edge {detail}',
    'name_vertex': 'Renamed to {detail}',
}


def setup_edit_handlers(
    state: Dict[str, Any],
    edit_controller: EditController,
    refresh_canvas: Callable[[], None],
    refresh_toolbar: Callable[[], None],
    ask_label: Callable[[str], None],
    show_report: Callable[[str], None],
):
    """
    Set up all canvas and toolbar event handlers.

    Args:
        state: Page state dictionary; state['tool'] is the current Tool
        edit_controller: EditController bound to the page's graph
        refresh_canvas: Redraws the SVG overlay
        refresh_toolbar: Re-highlights the selected tool button
        ask_label: Opens the rename dialog for the given current label
        show_report: Shows the graph report text

    Returns:
        Dict with handler functions for binding to UI events
    """

    def apply_result(result: EditResult):
        if result.action == 'name_vertex_pending':
            ask_label(result.detail)
        elif result.action == 'print_info':
            show_report(result.detail)

        template = NOTIFY_ACTIONS.get(result.action)
        if template and result.changed:
            ui.notify(template.format(detail=result.detail), position='bottom', timeout=800)

        if result.changed or result.action == 'edge_start':
            refresh_canvas()

    def handle_mouse(event):
        """Forward interactive_image mouse events to the controller."""
        tool = state['tool']
        try:
            if event.type == 'mousedown':
                result = edit_controller.mouse_down(tool, event.image_x, event.image_y)
            elif event.type == 'mousemove':
                pressed = bool(getattr(event, 'buttons', 0) & PRIMARY_BUTTON)
                result = edit_controller.mouse_move(tool, event.image_x, event.image_y, pressed)
            elif event.type == 'mouseup':
                result = edit_controller.mouse_up()
            else:
                return
            apply_result(result)
        except Exception as e:
            logger.exception(f"{tool.label} failed")
            ui.notify(f'Edit failed: {e}', type='negative', position='bottom')

    def handle_tool(tool: Tool):
        """Toolbar button press."""
        state['tool'], result = edit_controller.select_tool(tool, state['tool'])
        refresh_toolbar()
        refresh_canvas()
        if result is not None:
            apply_result(result)

    def handle_rename(label: str):
        apply_result(edit_controller.finish_naming(label))
        refresh_canvas()

    def handle_rename_cancel():
        edit_controller.cancel_naming()

    return {
        'handle_mouse': handle_mouse,
        'handle_tool': handle_tool,
        'handle_rename': handle_rename,
        'handle_rename_cancel': handle_rename_cancel,
    }
