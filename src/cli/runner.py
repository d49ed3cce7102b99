# src/cli/runner.py

"""Headless catalog output: the same client the TUI uses, printed with Rich."""

import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from src.catalog.catalog_client import CatalogClient, CatalogError
from src.models.product import Product
from src.ui.formatting import format_price, truncate

logger = logging.getLogger("storefront.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _print_table(products: list[Product]) -> None:
    """Render a Rich table of products to stdout."""
    table = Table(
        title="Catalog",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Title", max_width=40)
    table.add_column("Price", justify="right", style="green")
    table.add_column("Rating", justify="center")
    table.add_column("Category", style="magenta")

    for p in products:
        table.add_row(
            str(p.id),
            truncate(p.title, 40),
            format_price(p.price),
            f"{p.rating.rate} ({p.rating.count})",
            p.category or "—",
        )

    Console().print(table)


def _print_detail(product: Product) -> None:
    """Render one product as a Rich key/value table."""
    table = Table(
        title=truncate(product.title),
        show_header=False,
        title_style="bold cyan",
    )
    table.add_column("Field", style="bold")
    table.add_column("Value", overflow="fold")
    table.add_row("ID", str(product.id))
    table.add_row("Title", product.title)
    table.add_row("Price", format_price(product.price))
    table.add_row(
        "Rating", f"{product.rating.rate} ({product.rating.count})"
    )
    table.add_row("Category", product.category or "—")
    table.add_row("Image", product.image)
    table.add_row("Description", product.description)
    Console().print(table)


def _dump_json(data: object) -> None:
    json.dump(data, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")


def run_list_products(
    output_format: str, client: CatalogClient | None = None
) -> int:
    """Print the whole catalog and return an exit code (0=ok, 1=fail)."""
    client = client if client is not None else CatalogClient()
    _err.print(f"[dim]Fetching catalog from {client.base_url}[/dim]")
    try:
        products = client.list_products()
    except CatalogError as exc:
        logger.error("Catalog fetch failed: %s", exc, exc_info=True)
        _err.print(f"[red]Error: {exc}[/red]")
        return 1

    if not products:
        _err.print("[yellow]Catalog is empty.[/yellow]")
        return 0

    _err.print(f"[green]✓ {len(products)} products[/green]")
    if output_format == "table":
        _print_table(products)
    else:
        _dump_json([p.to_dict() for p in products])
    return 0


def run_show_product(
    product_id: int,
    output_format: str,
    client: CatalogClient | None = None,
) -> int:
    """Print a single product and return an exit code (0=ok, 1=fail)."""
    client = client if client is not None else CatalogClient()
    try:
        product = client.get_product_by_id(product_id)
    except CatalogError as exc:
        logger.error(
            "Product %s fetch failed: %s", product_id, exc, exc_info=True
        )
        _err.print(f"[red]Error: {exc}[/red]")
        return 1

    if output_format == "table":
        _print_detail(product)
    else:
        _dump_json(product.to_dict())
    return 0
