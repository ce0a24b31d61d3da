"""Join products with their category and the category's owner."""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from src.models import Category, MissingReferenceError, Product, ProductView, User

logger = logging.getLogger(__name__)


def find_category(categories: Iterable[Category], category_id: int) -> Optional[Category]:
    """Return the category with *category_id*, or None if there is none."""
    for category in categories:
        if category.id == category_id:
            return category
    return None


def find_user(users: Iterable[User], user_id: int) -> Optional[User]:
    """Return the user with *user_id*, or None if there is none."""
    for user in users:
        if user.id == user_id:
            return user
    return None


def join_products(
    products: Sequence[Product],
    categories: Sequence[Category],
    users: Sequence[User],
) -> list[ProductView]:
    """Build one ProductView per product, in product order.

    Raises:
        MissingReferenceError: a product's category or a category's owner
            does not exist. Rows are never silently dropped.
    """
    views = []
    for product in products:
        category = find_category(categories, product.category_id)
        if category is None:
            logger.error(
                "Product %s (%r) references missing category %s",
                product.id, product.name, product.category_id,
            )
            raise MissingReferenceError("product", product.id, "category", product.category_id)

        user = find_user(users, category.owner_id)
        if user is None:
            logger.error(
                "Category %s (%r) references missing owner %s",
                category.id, category.name, category.owner_id,
            )
            raise MissingReferenceError("category", category.id, "user", category.owner_id)

        views.append(ProductView(
            id=product.id,
            name=product.name,
            category_id=product.category_id,
            category=category,
            user=user,
        ))
    return views
