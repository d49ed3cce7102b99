# src/services/basket_actions.py

"""The only entry point the UI uses to change basket contents."""

import logging

from src.models.basket_entry import BasketEntry
from src.models.product import Product
from src.storage.basket_store import BasketStore

logger = logging.getLogger("storefront.basket")


class BasketActions:
    """Transition policy for basket quantities.

    Every operation is total: calling ``increase``, ``decrease`` or
    ``remove`` for a product that is not in the basket is a logged no-op,
    and nothing here ever drives a quantity below one. Reaching zero
    deletes the entry.
    """

    def __init__(self, store: BasketStore) -> None:
        self.store = store

    def add(self, product: Product) -> None:
        """Put *product* in the basket with quantity 1.

        If it is already there the quantity goes up by one instead; the
        UI only offers "add" at quantity 0, so this path is a fallback.
        """
        current = self.store.entry(product.id)
        if current is not None:
            logger.debug(
                "add() on product %s already in basket, increasing",
                product.id,
            )
            self.store.set(
                product.id,
                BasketEntry(current.product, current.quantity + 1),
            )
            return
        logger.info("Product %s added to basket", product.id)
        self.store.set(product.id, BasketEntry(product, 1))

    def remove(self, product_id: int) -> None:
        """Delete the entry for *product_id* whatever its quantity."""
        if product_id not in self.store:
            logger.debug("remove() ignored, %s not in basket", product_id)
            return
        logger.info("Product %s removed from basket", product_id)
        self.store.set(product_id, None)

    def increase(self, product_id: int) -> None:
        """Raise the quantity by exactly one."""
        current = self.store.entry(product_id)
        if current is None:
            logger.debug("increase() ignored, %s not in basket", product_id)
            return
        self.store.set(
            product_id,
            BasketEntry(current.product, current.quantity + 1),
        )

    def decrease(self, product_id: int) -> None:
        """Lower the quantity by one; at quantity 1 the entry is removed."""
        current = self.store.entry(product_id)
        if current is None:
            logger.debug("decrease() ignored, %s not in basket", product_id)
            return
        if current.quantity <= 1:
            self.remove(product_id)
            return
        self.store.set(
            product_id,
            BasketEntry(current.product, current.quantity - 1),
        )

    def toggle(self, product: Product) -> None:
        """Add *product* when absent, remove it when present (list heart)."""
        if product.id in self.store:
            self.remove(product.id)
        else:
            self.add(product)
