"""User / search text / category filtering of product rows."""
from typing import Sequence

from src.models import FilterState, ProductView


def matches_user(view: ProductView, state: FilterState) -> bool:
    if not state.has_user_filter:
        return True
    return view.user.name == state.selected_user


def matches_search(view: ProductView, state: FilterState) -> bool:
    # Substring match, case-insensitive, term used as typed (no trimming)
    if not state.search_term:
        return True
    return state.search_term.lower() in view.name.lower()


def matches_categories(view: ProductView, state: FilterState) -> bool:
    if not state.has_category_filter:
        return True
    return view.category.name in state.selected_categories


def filter_products(views: Sequence[ProductView], state: FilterState) -> list[ProductView]:
    """Return the views passing every active filter, in input order.

    An empty list is a valid result (no products match the criteria).
    """
    return [
        v for v in views
        if matches_user(v, state)
        and matches_search(v, state)
        and matches_categories(v, state)
    ]
