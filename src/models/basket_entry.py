# src/models/basket_entry.py

"""A single basket line: a product snapshot and its quantity."""

from dataclasses import dataclass

from src.models.product import Product


@dataclass(frozen=True)
class BasketEntry:
    """A product held in the basket with a quantity of at least one.

    A product with no entry is "not in basket"; a zero quantity is never
    stored.
    """

    product: Product
    quantity: int = 1

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError(
                f"Basket quantity must be >= 1, got {self.quantity}"
            )

    @property
    def product_id(self) -> int:
        """Identifier of the product this line holds."""
        return self.product.id

    @property
    def subtotal(self) -> float:
        """Line total: unit price times quantity."""
        return self.product.price * self.quantity
