# tests/test_product_model.py

"""Tests for the Product, Rating and BasketEntry dataclasses."""

import dataclasses
import unittest

from src.models.basket_entry import BasketEntry
from src.models.product import Product, Rating


def _payload() -> dict[str, object]:
    return {
        "id": 1,
        "title": "Fjallraven - Foldsack No. 1 Backpack",
        "price": 109.95,
        "description": "Your perfect pack for everyday use",
        "category": "men's clothing",
        "image": "https://fakestoreapi.com/img/81fPKd-2AYL._AC_SL1500_.jpg",
        "rating": {"rate": 3.9, "count": 120},
    }


class TestProductModel(unittest.TestCase):
    """Product dataclass unit tests."""

    def test_from_dict_all_fields(self) -> None:
        """All API fields are mapped onto the dataclass."""
        product = Product.from_dict(_payload())
        self.assertEqual(product.id, 1)
        self.assertEqual(
            product.title, "Fjallraven - Foldsack No. 1 Backpack"
        )
        self.assertEqual(product.price, 109.95)
        self.assertEqual(product.category, "men's clothing")
        self.assertTrue(product.image.endswith(".jpg"))
        self.assertEqual(product.rating, Rating(rate=3.9, count=120))

    def test_defaults(self) -> None:
        """Optional fields default to empty values."""
        product = Product(id=2, title="X", price=1.0)
        self.assertEqual(product.image, "")
        self.assertEqual(product.description, "")
        self.assertEqual(product.category, "")
        self.assertEqual(product.rating, Rating(rate=0.0, count=0))

    def test_from_dict_missing_rating(self) -> None:
        """A payload without rating gets a zero rating."""
        payload = _payload()
        del payload["rating"]
        product = Product.from_dict(payload)
        self.assertEqual(product.rating.count, 0)

    def test_from_dict_coerces_numeric_strings(self) -> None:
        """String ids and prices are converted."""
        payload = _payload()
        payload["id"] = "7"
        payload["price"] = "19.5"
        product = Product.from_dict(payload)
        self.assertEqual(product.id, 7)
        self.assertEqual(product.price, 19.5)

    def test_from_dict_missing_id_raises(self) -> None:
        """Missing required fields raise ValueError."""
        payload = _payload()
        del payload["id"]
        with self.assertRaises(ValueError):
            Product.from_dict(payload)

    def test_from_dict_bad_price_raises(self) -> None:
        """A non-numeric price raises ValueError."""
        payload = _payload()
        payload["price"] = "free"
        with self.assertRaises(ValueError):
            Product.from_dict(payload)

    def test_to_dict_round_trip(self) -> None:
        """to_dict reproduces the API shape."""
        self.assertEqual(Product.from_dict(_payload()).to_dict(), _payload())

    def test_product_is_immutable(self) -> None:
        """Products cannot be modified after creation."""
        product = Product(id=1, title="A", price=10.0)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            product.price = 5.0  # type: ignore[misc]

    def test_equality(self) -> None:
        """Two products with identical fields are equal."""
        self.assertEqual(
            Product(id=1, title="A", price=10.0),
            Product(id=1, title="A", price=10.0),
        )


class TestBasketEntry(unittest.TestCase):
    """BasketEntry invariants."""

    def setUp(self) -> None:
        self.product = Product(id=3, title="Mug", price=4.5)

    def test_default_quantity_is_one(self) -> None:
        """A new entry starts at quantity 1."""
        entry = BasketEntry(self.product)
        self.assertEqual(entry.quantity, 1)
        self.assertEqual(entry.product_id, 3)

    def test_zero_quantity_rejected(self) -> None:
        """Quantity 0 is never stored."""
        with self.assertRaises(ValueError):
            BasketEntry(self.product, 0)

    def test_negative_quantity_rejected(self) -> None:
        """Negative quantities are rejected."""
        with self.assertRaises(ValueError):
            BasketEntry(self.product, -2)

    def test_subtotal(self) -> None:
        """Subtotal is unit price times quantity."""
        self.assertAlmostEqual(BasketEntry(self.product, 3).subtotal, 13.5)


if __name__ == "__main__":
    unittest.main()
