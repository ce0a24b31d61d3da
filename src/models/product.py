"""Product model."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    category_id: int

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r}>"
