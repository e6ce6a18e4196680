"""
Main NiceGUI application for the graph tool.

Renders a toolbar and a drawing canvas (ui.interactive_image with an SVG
overlay). Clicks on the canvas are forwarded to the EditController together
with the selected tool; the graph itself lives per page in memory.
"""

import sys

from dotenv import load_dotenv
from nicegui import ui

load_dotenv()

from graphtool.config import get_settings
from graphtool.logging_config import setup_logging
from graphtool.graph import Graph
from graphtool.edit import EditActions, EditController, Tool
from graphtool.edit.handlers import setup_edit_handlers
from graphtool.svg_builder import build_svg

settings = get_settings()
setup_logging(settings.log_level)


@ui.page('/')
def index():
    graph = Graph(directed=settings.directed)
    edit_actions = EditActions(graph, settings)
    edit_controller = EditController(graph, edit_actions)
    state = {'tool': Tool.ADD_VERTEX}
    tool_buttons = {}

    def refresh_canvas():
        canvas.content = build_svg(
            graph,
            edge_color=settings.edge_color,
            edge_start=edit_controller.edge_start_index(),
        )

    def refresh_toolbar():
        for tool, button in tool_buttons.items():
            button.props(f"color={'primary' if tool == state['tool'] else 'grey-7'}")

    # Rename dialog
    with ui.dialog() as name_dialog, ui.card().classes('w-80'):
        ui.label('Name vertex').classes('text-lg font-bold')
        name_input = ui.input('Label').classes('w-full')
        with ui.row().classes('w-full justify-end gap-2'):
            ui.button('Cancel', on_click=lambda: (handlers['handle_rename_cancel'](), name_dialog.close())).props('flat')
            ui.button('Save', on_click=lambda: (handlers['handle_rename'](name_input.value), name_dialog.close()))

    def ask_label(current: str):
        name_input.value = current
        name_dialog.open()

    # Report dialog
    with ui.dialog() as report_dialog, ui.card().classes('min-w-[480px]'):
        ui.label('Graph Info').classes('text-lg font-bold')
        report_text = ui.label('').classes('font-mono whitespace-pre text-sm')
        ui.button('Close', on_click=report_dialog.close).props('flat')

    def show_report(text: str):
        report_text.text = text
        report_dialog.open()

    handlers = setup_edit_handlers(
        state,
        edit_controller,
        refresh_canvas=refresh_canvas,
        refresh_toolbar=refresh_toolbar,
        ask_label=ask_label,
        show_report=show_report,
    )

    # 1. Toolbar
    with ui.row().classes('gap-1 items-center'):
        for tool in Tool:
            tool_buttons[tool] = ui.button(
                tool.label, on_click=lambda t=tool: handlers['handle_tool'](t)
            ).props('dense no-caps')
        mode = 'directed' if graph.directed else 'undirected'
        ui.label(f'({mode})').classes('text-xs text-gray-500 ml-2')

    # 2. Canvas
    canvas = ui.interactive_image(
        size=(settings.canvas_width, settings.canvas_height),
        on_mouse=handlers['handle_mouse'],
        events=['mousedown', 'mousemove', 'mouseup'],
        cross=False,
    ).classes('border border-gray-400 bg-white').style(
        f'width: {settings.canvas_width}px; height: {settings.canvas_height}px'
    )

    refresh_toolbar()
    refresh_canvas()


if __name__ in {"__main__", "__mp_main__"}:
    ui.run(
        title='Graph Tool',
        port=settings.port,
        reload=not getattr(sys, 'frozen', False),
    )
