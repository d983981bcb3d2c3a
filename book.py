from __future__ import annotations


class Book:
    """A single book the user has read."""

    def __init__(self, id: int, name: str, author: str, stars: float) -> None:
        self.id = id
        self.name = name.strip()
        self.author = author.strip()
        self.stars = float(stars)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "author": self.author,
            "stars": self.stars,
        }

    @staticmethod
    def from_dict(data: dict) -> "Book":
        return Book(
            id=int(data["id"]),
            name=data["name"],
            author=data["author"],
            stars=data["stars"],
        )


def format_stars(stars: float) -> str:
    """Render 4.0 as '4' and 4.5 as '4.5'."""
    return f"{stars:g}"
