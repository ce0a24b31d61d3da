"""Denormalized product row: a product with its category and owning user."""
from dataclasses import dataclass

from src.models.category import Category
from src.models.user import User


@dataclass(frozen=True)
class ProductView:
    """Read-only projection built by the join; never mutated after creation."""
    id: int
    name: str
    category_id: int
    category: Category
    user: User

    def __repr__(self) -> str:
        return (
            f"<ProductView id={self.id} name={self.name!r} "
            f"category={self.category.name!r} user={self.user.name!r}>"
        )
