"""Product table component with click-to-cycle column sorting."""
from nicegui import ui

from config import SORT_COLUMNS
from src.services.product_table import ProductTable
from src.ui.components.helpers import (
    CARD_CLASSES, NO_MATCH_MESSAGE, STRIPED_ROW_CLASSES,
    category_label, sort_icon, user_text_class,
)


def product_table(table: ProductTable):
    """Render the visible rows of *table*; returns the refreshable to re-render."""

    @ui.refreshable
    def _render():
        state = table.get_filter_state()
        rows = table.get_visible_rows()

        if not rows:
            ui.label(NO_MATCH_MESSAGE).classes("text-body2 text-secondary")

        with ui.element("table").classes("w-full"):
            with ui.element("thead"):
                with ui.element("tr"):
                    for column, title in SORT_COLUMNS.items():
                        with ui.element("th").classes("text-left"):
                            with ui.row().classes("items-center gap-1 no-wrap"):
                                ui.label(title)
                                ui.button(
                                    icon=sort_icon(column, state.sort),
                                    on_click=lambda _, c=column: _on_sort(c),
                                ).props("flat dense round size=sm")

            with ui.element("tbody"):
                for row in rows:
                    with ui.element("tr").classes(STRIPED_ROW_CLASSES):
                        with ui.element("td"):
                            ui.label(str(row.id)).classes("font-bold")
                        with ui.element("td"):
                            ui.label(row.name)
                        with ui.element("td"):
                            ui.label(category_label(row.category))
                        with ui.element("td"):
                            ui.label(row.user.name).classes(user_text_class(row.user))

    def _on_sort(column: str):
        table.click_sort_column(column)
        _render.refresh()

    with ui.card().classes(CARD_CLASSES):
        _render()
    return _render
