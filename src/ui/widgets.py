# src/ui/widgets.py

"""Reusable widgets for the storefront screens."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Button, Label


class QuantityToggler(Horizontal):
    """A ``-  n  +`` control for one product's basket quantity.

    The toggler never touches the basket itself. It posts
    :class:`Increased` or :class:`Decreased` and the owning screen decides
    which basket action that means. Decrease is disabled at zero.
    """

    DEFAULT_CSS = """
    QuantityToggler {
        height: auto;
        width: auto;
    }
    QuantityToggler Label {
        padding: 1 2;
        min-width: 5;
        content-align: center middle;
    }
    """

    quantity: reactive[int] = reactive(0)

    class Increased(Message):
        """The user pressed the increase button."""

        def __init__(self, product_id: int) -> None:
            super().__init__()
            self.product_id = product_id

    class Decreased(Message):
        """The user pressed the (enabled) decrease button."""

        def __init__(self, product_id: int) -> None:
            super().__init__()
            self.product_id = product_id

    def __init__(
        self,
        product_id: int,
        quantity: int = 0,
        *,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id or f"quantity-toggler-{product_id}")
        self.product_id = product_id
        self.set_reactive(QuantityToggler.quantity, max(quantity, 0))

    def compose(self) -> ComposeResult:
        yield Button(
            "-",
            id=f"decrease-btn-{self.product_id}",
            disabled=self.quantity == 0,
        )
        yield Label(
            str(self.quantity), id=f"quantity-value-{self.product_id}"
        )
        yield Button(
            "+",
            variant="primary",
            id=f"increase-btn-{self.product_id}",
        )

    def watch_quantity(self, quantity: int) -> None:
        if not self.is_mounted:
            return
        self.query_one(
            f"#quantity-value-{self.product_id}", Label
        ).update(str(quantity))
        self.query_one(
            f"#decrease-btn-{self.product_id}", Button
        ).disabled = quantity == 0

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == f"increase-btn-{self.product_id}":
            self.post_message(self.Increased(self.product_id))
        elif (
            event.button.id == f"decrease-btn-{self.product_id}"
            and self.quantity > 0
        ):
            self.post_message(self.Decreased(self.product_id))
