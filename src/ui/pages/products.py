"""Products page -- filterable, sortable table of products by category."""
import logging

from nicegui import ui

from src.services import ProductTable
from src.ui.components import filter_panel, product_table
from src.ui.components.helpers import page_header
from src.ui.layout import build_layout

logger = logging.getLogger(__name__)


def products_page(search: str | None = None, user: str | None = None):
    """Render the product categories page.

    Each page visit gets its own ProductTable, so filter state is private
    to that client and discarded when the page is closed.

    Args:
        search: Optional search term to pre-fill (from URL query param).
        user: Optional user name to pre-select (from URL query param).
    """
    content = build_layout()
    table = ProductTable.from_fixtures()
    if search:
        table.set_search_term(search)
    if user:
        table.set_user(user)

    with content:
        page_header("Product Categories", icon="category")

        rows_view = None

        def _refresh_rows():
            if rows_view is not None:
                rows_view.refresh()

        filter_panel(table, on_change=_refresh_rows)
        rows_view = product_table(table)
