# src/ui/app.py

"""Terminal UI for the storefront: product list, detail and basket."""

import logging

from textual.app import App
from textual.binding import Binding

from src.catalog.catalog_client import CatalogClient
from src.services.basket_actions import BasketActions
from src.services.quantity_query import QuantityQuery
from src.storage.basket_store import BasketStore
from src.ui.screens import ProductListScreen

logger = logging.getLogger("storefront.ui")


class StorefrontApp(App[object]):
    """Terminal storefront.

    Owns the session's single basket. The store, the action facade, the
    quantity query and the catalog client are created here and handed to
    each screen by reference.
    """

    CSS_PATH = "styles.css"
    TITLE = "Storefront"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, catalog: CatalogClient | None = None) -> None:
        super().__init__()
        self.basket_store = BasketStore()
        self.basket_actions = BasketActions(self.basket_store)
        self.quantity_query = QuantityQuery(self.basket_store)
        self.catalog = catalog if catalog is not None else CatalogClient()

    def on_mount(self) -> None:
        """Show the product list as the first screen."""
        logger.info("Storefront UI mounted, catalog=%s", self.catalog.base_url)
        self.push_screen(
            ProductListScreen(
                self.catalog,
                self.basket_store,
                self.basket_actions,
                self.quantity_query,
            )
        )

