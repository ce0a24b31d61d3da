"""Category model - flat list, each category owned by exactly one user."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    id: int
    name: str
    icon: str
    owner_id: int

    def __repr__(self) -> str:
        return f"<Category id={self.id} name={self.name!r} owner_id={self.owner_id}>"
