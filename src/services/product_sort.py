"""Column sorting of product rows and the header-click sort cycle."""
import logging
from typing import Callable, Sequence

from config import SORT_COLUMNS
from src.models import ASC, DESC, UNSORTED, ProductView, SortState

logger = logging.getLogger(__name__)

# Sort key per column; names compare by plain string (code-point) order
_SORT_KEYS: dict[str, Callable[[ProductView], object]] = {
    "id": lambda v: v.id,
    "name": lambda v: v.name,
    "category": lambda v: v.category.name,
    "user": lambda v: v.user.name,
}


def sort_products(views: Sequence[ProductView], sort_state: SortState) -> list[ProductView]:
    """Return *views* ordered by the active column.

    Unsorted keeps the input order. ``sorted`` is stable and with
    ``reverse=True`` still keeps equal keys in input order, so ties never
    move in either direction.
    """
    if not sort_state.is_sorted:
        return list(views)
    key = _SORT_KEYS[sort_state.column]
    return sorted(views, key=key, reverse=sort_state.descending)


def next_sort_state(current: SortState, column: str) -> SortState:
    """Advance the sort cycle after a click on *column*'s header.

    unsorted -> ascending -> descending -> unsorted. Clicking another
    column always starts that column at ascending.
    """
    if column not in SORT_COLUMNS:
        raise ValueError(f"Unknown sort column: {column!r}")
    if current.column != column:
        new_state = SortState(column, ASC)
    elif current.direction == ASC:
        new_state = SortState(column, DESC)
    else:
        new_state = UNSORTED
    logger.debug("Sort %s -> %s", current, new_state)
    return new_state
