"""User model - owner of product categories."""
from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    id: int
    name: str
    gender: str  # "male" | "female"

    def __repr__(self) -> str:
        return f"<User id={self.id} name={self.name!r}>"
