"""Data models package."""
from src.models.user import User
from src.models.category import Category
from src.models.product import Product
from src.models.product_view import ProductView
from src.models.filter_state import ASC, DESC, UNSORTED, FilterState, SortState
from src.models.errors import DataLoadError, MissingReferenceError

__all__ = [
    "User",
    "Category",
    "Product",
    "ProductView",
    "FilterState",
    "SortState",
    "UNSORTED",
    "ASC",
    "DESC",
    "DataLoadError",
    "MissingReferenceError",
]
