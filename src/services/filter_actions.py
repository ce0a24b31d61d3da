"""State transitions triggered by the filter panel.

Each function mutates the given FilterState in place. Sorting is left
alone by all of them; only the header clicks change it.
"""
import logging

from config import ALL_USERS
from src.models import FilterState

logger = logging.getLogger(__name__)


def set_user(state: FilterState, name: str) -> None:
    """Select a user by name, or ``ALL_USERS`` to drop the user filter."""
    state.selected_user = name
    logger.debug("Selected user %r", name)


def set_search_term(state: FilterState, term: str | None) -> None:
    state.search_term = term or ""


def clear_search(state: FilterState) -> None:
    state.search_term = ""


def toggle_category(state: FilterState, name: str) -> None:
    """Deselect *name* if selected (every occurrence), otherwise append it."""
    if name in state.selected_categories:
        state.selected_categories = [c for c in state.selected_categories if c != name]
    else:
        state.selected_categories = [*state.selected_categories, name]
    logger.debug("Selected categories: %s", state.selected_categories)


def reset_filters(state: FilterState) -> None:
    """Clear user, search and category filters; keep the current sort."""
    state.selected_user = ALL_USERS
    state.search_term = ""
    state.selected_categories = []
