# src/services/quantity_query.py

"""Read-only view over the basket store for the UI."""

from src.storage.basket_store import BasketStore


class QuantityQuery:
    """Answers "how many of product X are in the basket?".

    Reads the store on every call, so the answer always reflects the
    latest committed mutation.
    """

    def __init__(self, store: BasketStore) -> None:
        self._store = store

    def quantity_of(self, product_id: int) -> int:
        """Current quantity, 0 when the product is not in the basket."""
        return max(0, self._store.get(product_id))

    def is_in_basket(self, product_id: int) -> bool:
        """Derived flag: True exactly when the quantity is positive."""
        return self.quantity_of(product_id) > 0
