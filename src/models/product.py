# src/models/product.py

"""Catalog product data model shared by the catalog client, basket and UI."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Rating:
    """Average customer rating and the number of votes behind it."""

    rate: float
    count: int = 0


@dataclass(frozen=True)
class Product:
    """A single catalog product, immutable for the session."""

    id: int
    title: str
    price: float
    image: str = ""
    description: str = ""
    rating: Rating = Rating(rate=0.0)
    category: str = ""

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Product":
        """Build a Product from a catalog API JSON object.

        Raises:
            ValueError: If a required field is missing or has the wrong type.
        """
        try:
            raw_rating = payload.get("rating") or {}
            rating = Rating(
                rate=float(raw_rating.get("rate", 0.0)),
                count=int(raw_rating.get("count", 0)),
            )
            return cls(
                id=int(payload["id"]),
                title=str(payload["title"]),
                price=float(payload["price"]),
                image=str(payload.get("image", "")),
                description=str(payload.get("description", "")),
                rating=rating,
                category=str(payload.get("category", "")),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise ValueError(f"Malformed product payload: {exc}") from exc

    def to_dict(self) -> dict[str, Any]:
        """Serialise back to the catalog API JSON shape."""
        return {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "image": self.image,
            "description": self.description,
            "category": self.category,
            "rating": {
                "rate": self.rating.rate,
                "count": self.rating.count,
            },
        }
