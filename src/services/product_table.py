"""Product table controller: owns the filter state and produces visible rows."""
from __future__ import annotations

import logging
from typing import Sequence

from src.models import Category, FilterState, Product, ProductView, User
from src.services import filter_actions
from src.services.data_loader import load_fixtures
from src.services.product_filter import filter_products
from src.services.product_join import join_products
from src.services.product_sort import next_sort_state, sort_products

logger = logging.getLogger(__name__)


class ProductTable:
    """State and read API behind one rendered product table.

    The three source collections are joined once on construction; every
    call to :meth:`get_visible_rows` re-runs filter and sort from scratch.
    """

    def __init__(
        self,
        users: Sequence[User],
        categories: Sequence[Category],
        products: Sequence[Product],
        state: FilterState | None = None,
    ):
        self.users = list(users)
        self.categories = list(categories)
        self._views = join_products(products, self.categories, self.users)
        self._state = state if state is not None else FilterState()

    @classmethod
    def from_fixtures(cls) -> ProductTable:
        """Build a table over the bundled JSON data."""
        users, categories, products = load_fixtures()
        return cls(users, categories, products)

    @property
    def all_rows(self) -> list[ProductView]:
        return list(self._views)

    def get_visible_rows(self) -> list[ProductView]:
        rows = filter_products(self._views, self._state)
        return sort_products(rows, self._state.sort)

    def get_filter_state(self) -> FilterState:
        """Return a snapshot; mutating it does not affect the table."""
        return self._state.snapshot()

    def has_matches(self) -> bool:
        return len(self.get_visible_rows()) > 0

    # --- Mutations --------------------------------------------------------

    def set_user(self, name: str) -> None:
        filter_actions.set_user(self._state, name)

    def set_search_term(self, term: str | None) -> None:
        filter_actions.set_search_term(self._state, term)

    def clear_search(self) -> None:
        filter_actions.clear_search(self._state)

    def toggle_category(self, name: str) -> None:
        filter_actions.toggle_category(self._state, name)

    def reset_filters(self) -> None:
        filter_actions.reset_filters(self._state)
        logger.debug("Filters reset")

    def click_sort_column(self, column: str) -> None:
        self._state.sort = next_sort_state(self._state.sort, column)
