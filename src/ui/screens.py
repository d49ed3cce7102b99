# src/ui/screens.py

"""Product list, product detail and basket screens."""

import asyncio
import logging
from collections.abc import Callable
from typing import cast

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    LoadingIndicator,
    Static,
)

from src.catalog.catalog_client import CatalogClient, CatalogError
from src.models.product import Product
from src.services.basket_actions import BasketActions
from src.services.quantity_query import QuantityQuery
from src.storage.basket_store import BasketStore
from src.ui.formatting import format_price, truncate
from src.ui.widgets import QuantityToggler

logger = logging.getLogger("storefront.ui")

ERROR_TEXT = "An error occurred"
EMPTY_BASKET_TEXT = "Your basket is empty"

_IN_BASKET = Text("♥", style="bold magenta")
_NOT_IN_BASKET = Text("♡", style="dim")


def _basket_marker(in_basket: bool) -> Text:
    return _IN_BASKET if in_basket else _NOT_IN_BASKET


def _rating_text(product: Product) -> str:
    return f"{product.rating.rate} ({product.rating.count})"


class BasketScreen(Screen[None]):
    """Basket lines with quantity controls and a running total."""

    BINDINGS = [
        Binding("escape", "app.pop_screen", "Back"),
        Binding("plus", "increase", "+1"),
        Binding("minus", "decrease", "-1"),
        Binding("delete", "remove", "Remove"),
    ]

    def __init__(self, store: BasketStore, actions: BasketActions) -> None:
        super().__init__()
        self.store = store
        self.actions = actions
        self._unsubscribe: Callable[[], None] | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(EMPTY_BASKET_TEXT, id="basket_empty")
        yield cast(
            DataTable[str | Text],
            DataTable(
                id="basket_table",
                zebra_stripes=True,
                cursor_type="row",
            ),
        )
        yield Static("", id="basket_total")
        yield Footer()

    def on_mount(self) -> None:
        self.title = "Basket"
        table = self._table()
        table.add_column("Title", key="title")
        table.add_column("Price", key="price")
        table.add_column("Qty", key="quantity")
        table.add_column("Subtotal", key="subtotal")
        self._unsubscribe = self.store.subscribe(self._on_basket_changed)
        self.refresh_lines()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _table(self) -> DataTable[str | Text]:
        return cast(
            DataTable[str | Text],
            self.query_one("#basket_table", DataTable),
        )

    def _on_basket_changed(self, product_id: int) -> None:
        self.refresh_lines()

    def refresh_lines(self) -> None:
        """Re-render every basket line and the total, keeping the cursor row."""
        table = self._table()
        cursor_row = table.cursor_row
        table.clear()
        entries = self.store.entries()
        for entry in entries:
            table.add_row(
                truncate(entry.product.title),
                format_price(entry.product.price),
                str(entry.quantity),
                format_price(entry.subtotal),
                key=str(entry.product_id),
            )
        if entries:
            table.move_cursor(row=min(cursor_row, len(entries) - 1))

        self.query_one("#basket_empty", Static).display = not entries
        table.display = bool(entries)
        self.query_one("#basket_total", Static).update(
            f"Items: {self.store.total_quantity}   "
            f"Total: {format_price(self.store.total_price)}"
        )

    def selected_product_id(self) -> int | None:
        """Product id of the highlighted line, if any."""
        table = self._table()
        if table.row_count == 0:
            return None
        row_key, _ = table.coordinate_to_cell_key(table.cursor_coordinate)
        return int(cast(str, row_key.value))

    def action_increase(self) -> None:
        product_id = self.selected_product_id()
        if product_id is not None:
            self.actions.increase(product_id)

    def action_decrease(self) -> None:
        product_id = self.selected_product_id()
        if product_id is not None:
            self.actions.decrease(product_id)

    def action_remove(self) -> None:
        product_id = self.selected_product_id()
        if product_id is not None:
            self.actions.remove(product_id)


class ProductDetailScreen(Screen[None]):
    """Full product information with a basket quantity toggler."""

    BINDINGS = [
        Binding("escape", "app.pop_screen", "Back"),
        Binding("b", "show_basket", "Basket"),
    ]

    def __init__(
        self,
        product_id: int,
        catalog: CatalogClient,
        store: BasketStore,
        actions: BasketActions,
        query: QuantityQuery,
    ) -> None:
        super().__init__()
        self.product_id = product_id
        self.catalog = catalog
        self.store = store
        self.actions = actions
        self.quantity_query = query
        self.product: Product | None = None
        self._unsubscribe: Callable[[], None] | None = None

    def compose(self) -> ComposeResult:
        pid = self.product_id
        yield Header()
        yield LoadingIndicator(id="screen-loader")
        yield Static(ERROR_TEXT, id="error")
        yield VerticalScroll(
            Static("", id="product-detail-image"),
            Static("", id="product-detail-title"),
            Static("", id="product-detail-price"),
            Static("", id="product-detail-rating"),
            Static("", id="product-detail-description"),
            QuantityToggler(pid, self.quantity_query.quantity_of(pid)),
            Button("Go to basket", id="go-to-basket-btn"),
            id="product-detail-scroll-view",
        )
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#error", Static).display = False
        self.query_one("#product-detail-scroll-view").display = False
        self._unsubscribe = self.store.subscribe(self._on_basket_changed)
        self.run_worker(self.load_product(), exclusive=True)

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    async def load_product(self) -> None:
        """Fetch the product off the event loop and fill in the view."""
        loader = self.query_one("#screen-loader", LoadingIndicator)
        loader.display = True
        try:
            product = await asyncio.to_thread(
                self.catalog.get_product_by_id, self.product_id
            )
        except CatalogError:
            logger.error(
                "Failed to load product %s", self.product_id, exc_info=True
            )
            self.query_one("#error", Static).display = True
            return
        finally:
            loader.display = False

        self.product = product
        self.title = truncate(product.title)
        self.query_one("#product-detail-image", Static).update(product.image)
        self.query_one("#product-detail-title", Static).update(
            Text(product.title, style="bold")
        )
        self.query_one("#product-detail-price", Static).update(
            format_price(product.price)
        )
        self.query_one("#product-detail-rating", Static).update(
            f"⭐ {_rating_text(product)}"
        )
        self.query_one("#product-detail-description", Static).update(
            product.description
        )
        self.query_one("#product-detail-scroll-view").display = True

    def _toggler(self) -> QuantityToggler:
        return self.query_one(
            f"#quantity-toggler-{self.product_id}", QuantityToggler
        )

    def _on_basket_changed(self, product_id: int) -> None:
        if product_id == self.product_id:
            self._toggler().quantity = self.quantity_query.quantity_of(
                product_id
            )

    def on_quantity_toggler_increased(
        self, event: QuantityToggler.Increased
    ) -> None:
        if self.product is None:
            return
        if self.quantity_query.quantity_of(self.product.id) == 0:
            self.actions.add(self.product)
        else:
            self.actions.increase(self.product.id)

    def on_quantity_toggler_decreased(
        self, event: QuantityToggler.Decreased
    ) -> None:
        quantity = self.quantity_query.quantity_of(event.product_id)
        if quantity == 0:
            return
        if quantity == 1:
            self.actions.remove(event.product_id)
        else:
            self.actions.decrease(event.product_id)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "go-to-basket-btn":
            self.action_show_basket()

    def action_show_basket(self) -> None:
        self.app.push_screen(BasketScreen(self.store, self.actions))


class ProductListScreen(Screen[None]):
    """Catalog table with a per-row basket marker."""

    BINDINGS = [
        Binding("space", "toggle_basket", "Add/Remove"),
        Binding("b", "show_basket", "Basket"),
        Binding("r", "reload", "Reload"),
    ]

    def __init__(
        self,
        catalog: CatalogClient,
        store: BasketStore,
        actions: BasketActions,
        query: QuantityQuery,
    ) -> None:
        super().__init__()
        self.catalog = catalog
        self.store = store
        self.actions = actions
        self.quantity_query = query
        self.products: dict[int, Product] = {}
        self._unsubscribe: Callable[[], None] | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("", id="status")
        yield LoadingIndicator(id="screen-loader")
        yield Static(ERROR_TEXT, id="error")
        yield cast(
            DataTable[str | Text],
            DataTable(
                id="product_table",
                zebra_stripes=True,
                cursor_type="row",
            ),
        )
        yield Footer()

    def on_mount(self) -> None:
        self.title = "Products"
        table = self._table()
        table.add_column("Title", key="title")
        table.add_column("Price", key="price")
        table.add_column("Rating", key="rating")
        table.add_column("Basket", key="basket")
        self.query_one("#error", Static).display = False
        self._unsubscribe = self.store.subscribe(self._on_basket_changed)
        self._update_status()
        self.run_worker(self.load_products(), exclusive=True)

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _table(self) -> DataTable[str | Text]:
        return cast(
            DataTable[str | Text],
            self.query_one("#product_table", DataTable),
        )

    async def load_products(self) -> None:
        """Fetch the catalog off the event loop and fill the table."""
        loader = self.query_one("#screen-loader", LoadingIndicator)
        error = self.query_one("#error", Static)
        loader.display = True
        error.display = False
        try:
            products = await asyncio.to_thread(self.catalog.list_products)
        except CatalogError:
            logger.error("Failed to load product list", exc_info=True)
            error.display = True
            return
        finally:
            loader.display = False

        self.products = {p.id: p for p in products}
        self.populate_table()

    def populate_table(self) -> None:
        """Fill the DataTable with the current catalog."""
        table = self._table()
        table.clear()
        for p in self.products.values():
            table.add_row(
                truncate(p.title),
                format_price(p.price),
                _rating_text(p),
                _basket_marker(self.quantity_query.is_in_basket(p.id)),
                key=str(p.id),
            )

    def _update_status(self) -> None:
        self.query_one("#status", Static).update(
            f"🛒 Basket: {self.store.total_quantity} item(s)"
        )

    def _on_basket_changed(self, product_id: int) -> None:
        self._update_status()
        if product_id in self.products:
            self._table().update_cell(
                str(product_id),
                "basket",
                _basket_marker(self.quantity_query.is_in_basket(product_id)),
            )

    def selected_product(self) -> Product | None:
        """Product under the table cursor, if any."""
        table = self._table()
        if table.row_count == 0:
            return None
        row_key, _ = table.coordinate_to_cell_key(table.cursor_coordinate)
        return self.products.get(int(cast(str, row_key.value)))

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Open the detail screen for the chosen row."""
        if event.row_key.value is None:
            return
        self.app.push_screen(
            ProductDetailScreen(
                int(event.row_key.value),
                self.catalog,
                self.store,
                self.actions,
                self.quantity_query,
            )
        )

    def action_toggle_basket(self) -> None:
        product = self.selected_product()
        if product is None:
            self.notify("No product selected", severity="warning")
            return
        self.actions.toggle(product)

    def action_show_basket(self) -> None:
        self.app.push_screen(BasketScreen(self.store, self.actions))

    def action_reload(self) -> None:
        self.catalog.cache.clear()
        self.run_worker(self.load_products(), exclusive=True)
