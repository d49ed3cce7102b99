# src/catalog/catalog_client.py

"""HTTP client for the read-only product catalog API."""

import json
import logging
import time
from typing import Any

from curl_cffi import requests as curl_requests

from src.config.settings import Settings
from src.models.product import Product
from src.storage.catalog_cache import CatalogCache


class CatalogError(Exception):
    """Raised when the catalog cannot be fetched or parsed."""

    def __init__(
        self, message: str, url: str = "", status_code: int | None = None
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class CatalogClient:
    """Fetches products by id or as a list.

    Requests are retried with an adaptive delay; a 429/503 answer doubles
    the delay up to ``MAX_DELAY_MULTIPLIER`` times the base. Every
    failure surfaces as :class:`CatalogError`.
    """

    _BACKOFF_STATUSES = (429, 503)

    def __init__(
        self,
        base_url: str | None = None,
        cache: CatalogCache | None = None,
    ) -> None:
        self.logger = logging.getLogger("storefront.catalog")
        self.settings = Settings()
        self.base_url = (base_url or self.settings.API_BASE_URL).rstrip("/")
        self.cache = cache if cache is not None else CatalogCache()
        self.session = curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )
        self._current_delay: float = self.settings.REQUEST_DELAY
        self._request_timeout: int = self.settings.REQUEST_TIMEOUT

    # ── Public API ───────────────────────────────────────

    def list_products(self) -> list[Product]:
        """Fetch the whole catalog and refresh the cache with it."""
        payload = self._get_json("/products")
        if not isinstance(payload, list):
            raise CatalogError(
                "Expected a JSON list of products",
                url=self._url("/products"),
            )
        products = [self._parse(item) for item in payload]
        self.cache.store_many(products)
        self.logger.info("Fetched %d products", len(products))
        return products

    def get_product_by_id(self, product_id: int) -> Product:
        """Fetch one product, serving it from the cache when fresh."""
        cached = self.cache.get(product_id)
        if cached is not None:
            return cached
        payload = self._get_json(f"/products/{product_id}")
        # The Fake Store API answers an unknown id with 200 and an empty body
        if not payload:
            raise CatalogError(
                f"Product {product_id} not found",
                url=self._url(f"/products/{product_id}"),
                status_code=404,
            )
        if not isinstance(payload, dict):
            raise CatalogError(
                "Expected a JSON product object",
                url=self._url(f"/products/{product_id}"),
            )
        product = self._parse(payload)
        self.cache.store(product)
        return product

    # ── Internals ────────────────────────────────────────

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _parse(self, item: Any) -> Product:
        if not isinstance(item, dict):
            raise CatalogError(f"Malformed product entry: {item!r}")
        try:
            return Product.from_dict(item)
        except ValueError as exc:
            raise CatalogError(str(exc)) from exc

    def _escalate_delay(self) -> None:
        """Double the current delay up to the configured max."""
        max_delay = (
            self.settings.REQUEST_DELAY
            * self.settings.MAX_DELAY_MULTIPLIER
        )
        self._current_delay = min(self._current_delay * 2, max_delay)
        self.logger.warning(
            "Catalog rate-limited, delay escalated to %.1fs",
            self._current_delay,
        )

    def _get_json(self, path: str) -> Any:
        """GET *path* with retries and return the decoded JSON body."""
        url = self._url(path)
        last_status: int | None = None
        last_error: Exception | None = None

        for attempt in range(self.settings.MAX_RETRIES):
            try:
                resp = self.session.get(
                    url,
                    headers=self.settings.DEFAULT_HEADERS,
                    timeout=self._request_timeout,
                )
            except Exception as exc:
                last_error = exc
                self.logger.warning(
                    "Request error on attempt %d for %s: %s",
                    attempt + 1,
                    url,
                    exc,
                    exc_info=True,
                )
                time.sleep(self._current_delay * (attempt + 1))
                continue

            if resp.status_code == 200:
                self._current_delay = self.settings.REQUEST_DELAY
                text = resp.text
                if not text.strip():
                    return None
                try:
                    return json.loads(text)
                except json.JSONDecodeError as exc:
                    raise CatalogError(
                        "Catalog returned invalid JSON",
                        url=url,
                        status_code=200,
                    ) from exc

            last_status = resp.status_code
            self.logger.warning(
                "HTTP %d on attempt %d for %s",
                resp.status_code,
                attempt + 1,
                url,
            )
            if resp.status_code == 404:
                break
            if resp.status_code in self._BACKOFF_STATUSES:
                self._escalate_delay()
            time.sleep(self._current_delay)

        message = (
            f"HTTP {last_status}"
            if last_status is not None
            else f"request failed: {last_error}"
        )
        raise CatalogError(
            f"Could not fetch {url} ({message})",
            url=url,
            status_code=last_status,
        ) from last_error
