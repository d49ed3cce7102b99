# src/storage/catalog_cache.py

"""In-memory TTL cache of catalog products keyed by product id."""

import logging
import time
from dataclasses import dataclass

from src.config.settings import Settings
from src.models.product import Product

logger = logging.getLogger("storefront.cache")


@dataclass
class CacheEntry:
    """A cached product and the time it was stored."""

    product: Product
    timestamp: float


class CatalogCache:
    """Keeps products fetched by the list screen for the detail screen.

    Products are immutable within a session, so a fresh entry can be
    served as-is; entries older than the TTL are dropped on read.
    """

    def __init__(self, ttl: float | None = None) -> None:
        self._entries: dict[int, CacheEntry] = {}
        self._ttl: float = (
            Settings.CATALOG_CACHE_TTL if ttl is None else ttl
        )

    def get(self, product_id: int) -> Product | None:
        """Return the cached product, or ``None`` on miss or expiry."""
        self._evict_expired(time.time())
        entry = self._entries.get(product_id)
        if entry is None:
            return None
        logger.debug("Cache hit for product %s", product_id)
        return entry.product

    def store(self, product: Product) -> None:
        """Cache a single product."""
        self._entries[product.id] = CacheEntry(
            product=product, timestamp=time.time()
        )

    def store_many(self, products: list[Product]) -> None:
        """Cache every product of a list fetch."""
        now = time.time()
        for product in products:
            self._entries[product.id] = CacheEntry(
                product=product, timestamp=now
            )
        logger.info("Cached %d products", len(products))

    def clear(self) -> int:
        """Purge all cached products.

        Returns the number of entries that were removed.
        """
        count = len(self._entries)
        self._entries.clear()
        logger.info("Catalog cache purged (%d entries removed)", count)
        return count

    def __len__(self) -> int:
        return len(self._entries)

    def _evict_expired(self, now: float) -> None:
        """Remove entries older than the TTL threshold."""
        expired = [
            pid
            for pid, e in self._entries.items()
            if now - e.timestamp >= self._ttl
        ]
        for pid in expired:
            del self._entries[pid]
        if expired:
            logger.debug(
                "Evicted %d expired catalog entries", len(expired)
            )
