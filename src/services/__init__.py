"""Services package."""
from src.services.data_loader import load_categories, load_fixtures, load_products, load_users
from src.services.product_join import find_category, find_user, join_products
from src.services.product_filter import filter_products
from src.services.product_sort import next_sort_state, sort_products
from src.services.filter_actions import (
    clear_search, reset_filters, set_search_term, set_user, toggle_category,
)
from src.services.product_table import ProductTable

__all__ = [
    "load_users",
    "load_categories",
    "load_products",
    "load_fixtures",
    "find_category",
    "find_user",
    "join_products",
    "filter_products",
    "sort_products",
    "next_sort_state",
    "set_user",
    "set_search_term",
    "clear_search",
    "toggle_category",
    "reset_filters",
    "ProductTable",
]
