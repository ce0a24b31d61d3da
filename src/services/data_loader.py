"""Load the bundled users / categories / products fixtures from JSON."""
from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Callable, TypeVar

from config import CATEGORIES_FILE, PRODUCTS_FILE, USERS_FILE
from src.models import Category, DataLoadError, Product, User

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _read_json_list(path: Path) -> list[dict]:
    """Read a JSON file that must contain a list of objects."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as exc:
        logger.exception("Failed to read fixture file %s", path)
        raise DataLoadError(f"Cannot read {path}: {exc}") from exc
    if not isinstance(data, list):
        raise DataLoadError(f"{path} must contain a JSON list, got {type(data).__name__}")
    return data


def _build(path: Path, rows: list[dict], make: Callable[[dict], T]) -> list[T]:
    result = []
    for i, row in enumerate(rows):
        try:
            result.append(make(row))
        except (KeyError, TypeError, ValueError) as exc:
            raise DataLoadError(f"{path}: record {i} is malformed ({exc!r})") from exc
    return result


def _make_user(row: dict) -> User:
    return User(id=int(row["id"]), name=row["name"], gender=row["gender"])


def _make_category(row: dict) -> Category:
    return Category(
        id=int(row["id"]),
        name=row["name"],
        icon=row.get("icon", ""),
        owner_id=int(row["ownerId"]),
    )


def _make_product(row: dict) -> Product:
    return Product(id=int(row["id"]), name=row["name"], category_id=int(row["categoryId"]))


def load_users(path: Path = USERS_FILE) -> list[User]:
    return _build(path, _read_json_list(path), _make_user)


def load_categories(path: Path = CATEGORIES_FILE) -> list[Category]:
    return _build(path, _read_json_list(path), _make_category)


def load_products(path: Path = PRODUCTS_FILE) -> list[Product]:
    return _build(path, _read_json_list(path), _make_product)


@lru_cache(maxsize=1)
def load_fixtures() -> tuple[tuple[User, ...], tuple[Category, ...], tuple[Product, ...]]:
    """Load all three datasets once per process.

    Returns:
        ``(users, categories, products)`` as tuples so the cached value
        cannot be mutated by callers.
    """
    users = tuple(load_users())
    categories = tuple(load_categories())
    products = tuple(load_products())
    logger.info(
        "Loaded %d users, %d categories, %d products",
        len(users), len(categories), len(products),
    )
    return users, categories, products
