"""Shared UI helper functions and design tokens for the product table."""

from nicegui import ui

from src.models import Category, SortState, User


# ─── Design Tokens ────────────────────────────────────────────────────────────

CARD_CLASSES = "w-full p-5"
INPUT_PROPS = "outlined dense"
STRIPED_ROW_CLASSES = "odd:bg-grey-1"

# Filter panel active-state tokens
ACTIVE_TAB_CLASSES = "text-primary font-bold border-b-2 border-primary"
INACTIVE_TAB_CLASSES = "text-secondary"

# Owner name colors by gender
USER_TEXT_CLASSES = {
    "male": "text-blue",
    "female": "text-red",
}

NO_MATCH_MESSAGE = "No products matching selected criteria"


def page_header(title: str, subtitle: str | None = None, icon: str | None = None):
    """Render a consistent page title with optional icon + subtitle."""
    with ui.row().classes("items-center gap-3"):
        if icon:
            ui.icon(icon, size="sm").classes("text-accent")
        ui.label(title).classes("text-h5 font-bold")
    if subtitle:
        ui.label(subtitle).classes("text-body2 text-secondary")


def section_header(title: str, icon: str | None = None):
    """Render a card section header with accent-colored icon."""
    with ui.row().classes("items-center gap-2 mb-2"):
        if icon:
            ui.icon(icon).classes("text-accent")
        ui.label(title).classes("text-subtitle1 font-bold")


# ─── Row / header mappings ────────────────────────────────────────────────────

def sort_icon(column: str, sort_state: SortState) -> str:
    """Return the Material icon name for a column header's sort button."""
    if column != sort_state.column:
        return "unfold_more"
    return "arrow_downward" if sort_state.descending else "arrow_upward"


def user_text_class(user: User) -> str:
    return USER_TEXT_CLASSES.get(user.gender, "text-red")


def category_label(category: Category) -> str:
    """Format a category cell like ``'🍞 - Grocery'``."""
    return f"{category.icon} - {category.name}"


def category_button_props(selected: bool) -> str:
    return "color=info unelevated" if selected else "color=grey-7 outline"


def all_categories_button_props(selected_categories: list[str]) -> str:
    """Solid while no category is selected, outlined otherwise."""
    return "color=positive" if not selected_categories else "color=positive outline"
