"""Shared layout: header and content area."""
from nicegui import ui

from config import APP_TITLE


def build_layout(title: str = APP_TITLE):
    """Create the shared page layout and return its content column."""
    ui.colors(
        primary="#4A4443",
        secondary="#5f6368",
        accent="#A08968",
        positive="#34a853",
        negative="#ea4335",
        info="#3e8ed0",
    )

    with ui.header().classes("items-center justify-between px-4 bg-primary"):
        with ui.row().classes("items-center gap-3"):
            ui.icon("inventory_2").classes("text-white text-2xl")
            ui.label(title).classes("text-subtitle1 text-white")

    content = ui.column().classes("w-full p-6 max-w-7xl mx-auto gap-4")
    return content
