"""Filter and sort state for the product table."""
from __future__ import annotations

from dataclasses import dataclass, field

from config import ALL_USERS, SORT_COLUMNS

ASC = "asc"
DESC = "desc"


@dataclass(frozen=True)
class SortState:
    """Either *unsorted* (``column is None``) or sorted by one column.

    Direction is only meaningful while a column is set; the unsorted state
    always carries ``asc`` so that every unsorted value compares equal.
    """
    column: str | None = None
    direction: str = ASC

    def __post_init__(self):
        if self.column is not None and self.column not in SORT_COLUMNS:
            raise ValueError(f"Unknown sort column: {self.column!r}")
        if self.direction not in (ASC, DESC):
            raise ValueError(f"Unknown sort direction: {self.direction!r}")
        if self.column is None and self.direction != ASC:
            raise ValueError("Unsorted state must use ascending direction")

    @property
    def is_sorted(self) -> bool:
        return self.column is not None

    @property
    def descending(self) -> bool:
        return self.direction == DESC


UNSORTED = SortState()


@dataclass
class FilterState:
    """Mutable criteria owned by one products page instance."""
    selected_user: str = ALL_USERS
    search_term: str = ""
    selected_categories: list[str] = field(default_factory=list)
    sort: SortState = UNSORTED

    @property
    def has_user_filter(self) -> bool:
        return self.selected_user != ALL_USERS

    @property
    def has_category_filter(self) -> bool:
        return len(self.selected_categories) > 0

    def snapshot(self) -> FilterState:
        """Return an independent copy safe to hand to the rendering layer."""
        return FilterState(
            selected_user=self.selected_user,
            search_term=self.search_term,
            selected_categories=list(self.selected_categories),
            sort=self.sort,
        )
