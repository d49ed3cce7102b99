# src/config/settings.py

"""Central configuration for the storefront app."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the storefront app."""

    # --- Catalog API ---
    API_BASE_URL: str = os.getenv(
        "STOREFRONT_API_URL", "https://fakestoreapi.com"
    ).rstrip("/")
    REQUEST_DELAY: float = 1.0          # Seconds between retry attempts
    REQUEST_TIMEOUT: int = 15           # Seconds before a request times out
    MAX_RETRIES: int = 3                # Retry count on transient failures
    MAX_DELAY_MULTIPLIER: int = 8       # Cap for adaptive backoff

    # --- Caching ---
    CATALOG_CACHE_TTL: float = 300.0    # Product cache lifetime (secs)

    # --- Display ---
    CURRENCY_SYMBOL: str = os.getenv("STOREFRONT_CURRENCY_SYMBOL", "$")
    TITLE_MAX_LENGTH: int = 20          # Header/list title truncation

    # --- HTTP client ---
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "application/json",
        "Accept-Language": "en-US,en;q=0.9",
    }

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOGS_DIR: Path = BASE_DIR / "logs"
