# src/ui/formatting.py

"""Price and title display helpers."""

from src.config.settings import Settings

TRUNCATION_MARKER = "..."


def format_price(amount: float, symbol: str | None = None) -> str:
    """Render *amount* as a currency string, e.g. ``19.5`` -> ``$19.50``."""
    currency = Settings.CURRENCY_SYMBOL if symbol is None else symbol
    return f"{currency}{max(amount, 0.0):,.2f}"


def truncate(text: str, max_len: int | None = None) -> str:
    """Cut *text* to *max_len* characters and append a marker if it was longer."""
    limit = Settings.TITLE_MAX_LENGTH if max_len is None else max(max_len, 0)
    if len(text) <= limit:
        return text
    return text[:limit] + TRUNCATION_MARKER
