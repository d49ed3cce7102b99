# tests/test_cli_runner.py

"""Tests for the headless catalog commands and the argument parser."""

import io
import json
import unittest
from unittest.mock import MagicMock, patch

from main import _build_parser
from src.catalog.catalog_client import CatalogError
from src.cli.runner import run_list_products, run_show_product
from src.models.product import Product, Rating


def _products() -> list[Product]:
    return [
        Product(
            id=1,
            title="Fjallraven - Foldsack No. 1 Backpack",
            price=109.95,
            rating=Rating(rate=3.9, count=120),
            category="men's clothing",
        ),
        Product(id=2, title="Mug", price=4.5),
    ]


def _client(**kwargs: object) -> MagicMock:
    client = MagicMock()
    client.base_url = "https://catalog.test"
    for name, value in kwargs.items():
        setattr(client, name, value)
    return client


class TestRunListProducts(unittest.TestCase):
    """run_list_products behaviour."""

    def test_json_output(self) -> None:
        """JSON output lists every product in API shape."""
        client = _client(list_products=MagicMock(return_value=_products()))
        with patch("sys.stdout", new_callable=io.StringIO) as out:
            code = run_list_products("json", client)
        self.assertEqual(code, 0)
        data = json.loads(out.getvalue())
        self.assertEqual([d["id"] for d in data], [1, 2])
        self.assertEqual(data[0]["rating"], {"rate": 3.9, "count": 120})

    def test_table_output(self) -> None:
        """Table output goes through Rich."""
        client = _client(list_products=MagicMock(return_value=_products()))
        with patch("src.cli.runner.Console") as console_cls:
            code = run_list_products("table", client)
        self.assertEqual(code, 0)
        console_cls.return_value.print.assert_called_once()

    def test_catalog_error_exit_code(self) -> None:
        """A catalog failure returns exit code 1."""
        client = _client(
            list_products=MagicMock(side_effect=CatalogError("down"))
        )
        self.assertEqual(run_list_products("json", client), 1)

    def test_empty_catalog(self) -> None:
        """An empty catalog is not an error."""
        client = _client(list_products=MagicMock(return_value=[]))
        with patch("sys.stdout", new_callable=io.StringIO) as out:
            self.assertEqual(run_list_products("json", client), 0)
        self.assertEqual(out.getvalue(), "")


class TestRunShowProduct(unittest.TestCase):
    """run_show_product behaviour."""

    def test_json_output(self) -> None:
        """One product is printed as a JSON object."""
        client = _client(
            get_product_by_id=MagicMock(return_value=_products()[0])
        )
        with patch("sys.stdout", new_callable=io.StringIO) as out:
            code = run_show_product(1, "json", client)
        self.assertEqual(code, 0)
        client.get_product_by_id.assert_called_once_with(1)
        self.assertEqual(json.loads(out.getvalue())["price"], 109.95)

    def test_not_found(self) -> None:
        """A missing product returns exit code 1."""
        client = _client(
            get_product_by_id=MagicMock(
                side_effect=CatalogError("not found", status_code=404)
            )
        )
        self.assertEqual(run_show_product(99, "table", client), 1)


class TestArgParser(unittest.TestCase):
    """main._build_parser behaviour."""

    def test_no_args_means_tui(self) -> None:
        """No options: neither headless mode is selected."""
        args = _build_parser().parse_args([])
        self.assertFalse(args.list_products)
        self.assertIsNone(args.product_id)
        self.assertEqual(args.output_format, "json")

    def test_product_with_table_format(self) -> None:
        """--product takes an integer id."""
        args = _build_parser().parse_args(["--product", "3", "-f", "table"])
        self.assertEqual(args.product_id, 3)
        self.assertEqual(args.output_format, "table")

    def test_list_and_product_are_exclusive(self) -> None:
        """--list and --product cannot be combined."""
        with patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                _build_parser().parse_args(["--list", "--product", "1"])


if __name__ == "__main__":
    unittest.main()
