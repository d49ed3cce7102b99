# tests/test_formatting.py

"""Tests for price and title display helpers."""

import unittest
from unittest.mock import patch

from src.config.settings import Settings
from src.ui.formatting import TRUNCATION_MARKER, format_price, truncate


class TestFormatPrice(unittest.TestCase):
    """format_price unit tests."""

    def test_two_decimals_with_symbol(self) -> None:
        """19.5 renders with two decimals and the currency marker."""
        text = format_price(19.5, "$")
        self.assertIn("19.50", text)
        self.assertEqual(text, "$19.50")

    def test_uses_configured_symbol(self) -> None:
        """Without an explicit symbol the Settings symbol is used."""
        with patch.object(Settings, "CURRENCY_SYMBOL", "€"):
            self.assertEqual(format_price(3), "€3.00")

    def test_thousands_separator(self) -> None:
        """Large amounts get a thousands separator."""
        self.assertEqual(format_price(1299.0, "$"), "$1,299.00")

    def test_zero(self) -> None:
        """Zero is a valid price."""
        self.assertEqual(format_price(0, "$"), "$0.00")

    def test_rounding(self) -> None:
        """Amounts are rounded to cents."""
        self.assertEqual(format_price(9.999, "$"), "$10.00")

    def test_negative_clamped(self) -> None:
        """Negative input is clamped to zero."""
        self.assertEqual(format_price(-4.0, "$"), "$0.00")

    def test_deterministic(self) -> None:
        """Same input, same output."""
        self.assertEqual(format_price(7.25, "$"), format_price(7.25, "$"))


class TestTruncate(unittest.TestCase):
    """truncate unit tests."""

    def test_long_text_cut_with_marker(self) -> None:
        """Text longer than max_len keeps a max_len prefix plus marker."""
        result = truncate("Wireless Headphones Pro Max", 10)
        self.assertEqual(result, "Wireless H" + TRUNCATION_MARKER)
        self.assertEqual(len(result), 10 + len(TRUNCATION_MARKER))

    def test_exact_length_unchanged(self) -> None:
        """Text exactly max_len long is returned unchanged."""
        self.assertEqual(truncate("abcde", 5), "abcde")

    def test_short_text_unchanged(self) -> None:
        """Short text is returned unchanged."""
        self.assertEqual(truncate("Mug", 10), "Mug")

    def test_empty_text(self) -> None:
        """Empty text stays empty."""
        self.assertEqual(truncate("", 3), "")

    def test_default_length_from_settings(self) -> None:
        """Without max_len the Settings limit applies."""
        with patch.object(Settings, "TITLE_MAX_LENGTH", 4):
            self.assertEqual(truncate("Backpack"), "Back" + TRUNCATION_MARKER)

    def test_zero_and_negative_limits(self) -> None:
        """Limits at or below zero leave only the marker."""
        self.assertEqual(truncate("abc", 0), TRUNCATION_MARKER)
        self.assertEqual(truncate("abc", -3), TRUNCATION_MARKER)


if __name__ == "__main__":
    unittest.main()
