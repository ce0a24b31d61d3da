"""Filter panel: user tabs, search field, category buttons and reset."""
from typing import Callable

from nicegui import ui

from config import ALL_USERS
from src.services.product_table import ProductTable
from src.ui.components.helpers import (
    ACTIVE_TAB_CLASSES, INACTIVE_TAB_CLASSES, CARD_CLASSES, INPUT_PROPS,
    all_categories_button_props, category_button_props, section_header,
)


def filter_panel(table: ProductTable, on_change: Callable[[], None]):
    """Render the filter controls for *table*.

    Every control mutates the table's filter state, re-renders the panel
    (so active states follow) and calls *on_change* to re-render the rows.
    """

    def _apply(action, *args):
        action(*args)
        _panel.refresh()
        on_change()

    # Search input lives outside the refreshable so typing keeps focus
    with ui.card().classes(CARD_CLASSES):
        section_header("Filters", icon="filter_list")

        search_input = ui.input(
            placeholder="Search",
            value=table.get_filter_state().search_term,
        ).props(f"{INPUT_PROPS} clearable").classes("w-full")
        search_input.props('prepend-inner-icon="search"')

        def _on_search(e):
            table.set_search_term(e.value)
            on_change()

        search_input.on_value_change(_on_search)

        @ui.refreshable
        def _panel():
            state = table.get_filter_state()
            if search_input.value != state.search_term:
                search_input.value = state.search_term

            # User tabs
            with ui.row().classes("items-center gap-4 w-full justify-center"):
                names = [ALL_USERS] + [u.name for u in table.users]
                for name in names:
                    active = name == state.selected_user
                    ui.label(name).classes(
                        "cursor-pointer px-2 py-1 "
                        + (ACTIVE_TAB_CLASSES if active else INACTIVE_TAB_CLASSES)
                    ).on("click", lambda _, n=name: _apply(table.set_user, n))

            # Category buttons; "All" clears every filter like the reset button
            with ui.row().classes("items-center gap-2 w-full flex-wrap"):
                ui.button(
                    "All", on_click=lambda: _apply(table.reset_filters),
                ).props(all_categories_button_props(state.selected_categories)).classes("mr-6")
                for category in table.categories:
                    selected = category.name in state.selected_categories
                    ui.button(
                        category.name,
                        on_click=lambda _, n=category.name: _apply(table.toggle_category, n),
                    ).props(category_button_props(selected))

            ui.button(
                "Reset all filters", on_click=lambda: _apply(table.reset_filters),
            ).props("color=primary outline").classes("w-full")

        _panel()
    return _panel
