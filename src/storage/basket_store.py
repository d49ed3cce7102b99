# src/storage/basket_store.py

"""In-memory basket state with synchronous change notification."""

import logging
from collections.abc import Callable, Iterator

from src.models.basket_entry import BasketEntry

logger = logging.getLogger("storefront.basket")

BasketObserver = Callable[[int], None]


class BasketStore:
    """Exclusive owner of the product-id to basket-entry mapping.

    One instance lives for the whole session and is handed by reference
    to whoever needs it. Only :class:`~src.services.basket_actions.BasketActions`
    should call :meth:`set`; everything else reads.

    Observers registered with :meth:`subscribe` are called synchronously,
    with the affected product id, after every mutation that actually
    changed the mapping.
    """

    def __init__(self) -> None:
        self._entries: dict[int, BasketEntry] = {}
        self._observers: list[BasketObserver] = []

    # ── Reads ────────────────────────────────────────────

    def get(self, product_id: int) -> int:
        """Return the stored quantity, or 0 when the product is absent."""
        entry = self._entries.get(product_id)
        return entry.quantity if entry is not None else 0

    def entry(self, product_id: int) -> BasketEntry | None:
        """Return the stored entry for *product_id*, if any."""
        return self._entries.get(product_id)

    def entries(self) -> list[BasketEntry]:
        """Snapshot of all entries in the order they were first added."""
        return list(self._entries.values())

    @property
    def total_quantity(self) -> int:
        """Sum of quantities across all entries."""
        return sum(e.quantity for e in self._entries.values())

    @property
    def total_price(self) -> float:
        """Sum of line subtotals across all entries."""
        return sum(e.subtotal for e in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._entries

    def __iter__(self) -> Iterator[BasketEntry]:
        return iter(self.entries())

    # ── Writes ───────────────────────────────────────────

    def set(self, product_id: int, entry: BasketEntry | None) -> None:
        """Replace the entry for *product_id*, or delete it when *entry* is None.

        Deleting an absent product changes nothing and notifies nobody.

        Raises:
            ValueError: If *entry* belongs to a different product.
        """
        if entry is None:
            if product_id not in self._entries:
                return
            del self._entries[product_id]
            logger.debug("Basket entry %s deleted", product_id)
        else:
            if entry.product_id != product_id:
                raise ValueError(
                    f"Entry for product {entry.product_id} "
                    f"cannot be stored under {product_id}"
                )
            self._entries[product_id] = entry
            logger.debug(
                "Basket entry %s set to quantity %d",
                product_id,
                entry.quantity,
            )
        self._notify(product_id)

    # ── Observers ────────────────────────────────────────

    def subscribe(self, observer: BasketObserver) -> Callable[[], None]:
        """Register *observer*; return a callable that unregisters it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self, product_id: int) -> None:
        """Call every observer; one failing observer does not silence the rest."""
        for observer in list(self._observers):
            try:
                observer(product_id)
            except Exception:
                logger.error(
                    "Basket observer %r failed for product %s",
                    observer,
                    product_id,
                    exc_info=True,
                )
