"""Order review and customer details modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from menu_order.errors import ValidationFailure
from menu_order.lifecycle import OrderLifecycle
from menu_order.models import FulfillmentMode, Order
from menu_order.rendering import format_order_summary


class OrderModal(ModalScreen[Order | None]):
    """Show the order summary and collect customer details before placing it."""

    CSS = """
    OrderModal {
        align: center middle;
        background: $background 60%;
    }

    #order-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #order-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #order-summary {
        color: white;
        margin-bottom: 1;
    }

    #order-form {
        border: heavy $secondary;
        padding: 0 1;
        color: white;
        margin-bottom: 1;
    }

    #order-error {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #order-help {
        color: #dddddd;
    }
    """

    FIELDS = ("name", "phone", "email", "fulfillment")
    FIELD_LABELS = {
        "name": "Name*",
        "phone": "Phone*",
        "email": "Email",
        "fulfillment": "Order type",
    }

    def __init__(self, lifecycle: OrderLifecycle) -> None:
        super().__init__()
        self.lifecycle = lifecycle
        self.values: dict[str, str] = {"name": "", "phone": "", "email": ""}
        self.field_index = 0
        self.error = ""

    @property
    def active_field(self) -> str:
        return self.FIELDS[self.field_index]

    def compose(self) -> ComposeResult:
        with Container(id="order-dialog"):
            yield Static("Review Your Order", id="order-title")
            yield Static(id="order-summary")
            yield Static(id="order-form")
            yield Static(id="order-error")
            yield Static(
                "Tab/↑/↓ move. Space toggles order type. Enter place order. Esc back to menu.",
                id="order-help",
            )

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        event.stop()
        event.prevent_default()

        if event.key == "escape":
            self.lifecycle.cancel_review()
            self.dismiss(None)
            return

        if event.key == "enter":
            self._place_order()
            return

        if event.key in {"tab", "down"}:
            self.field_index = (self.field_index + 1) % len(self.FIELDS)
            self._refresh_content()
            return

        if event.key in {"shift+tab", "up"}:
            self.field_index = (self.field_index - 1) % len(self.FIELDS)
            self._refresh_content()
            return

        if self.active_field == "fulfillment":
            if event.key in {"space", "left", "right"}:
                self._toggle_fulfillment()
            elif event.character and event.character.lower() in {"p", "d"}:
                self.lifecycle.select_fulfillment("delivery" if event.character.lower() == "d" else "pickup")
                self._refresh_content()
            return

        if event.key == "backspace":
            field = self.active_field
            if self.values[field]:
                self.values[field] = self.values[field][:-1]
                self.error = ""
                self._refresh_content()
            return

        if event.is_printable and event.character:
            self.values[self.active_field] += event.character
            self.error = ""
            self._refresh_content()

    def _toggle_fulfillment(self) -> None:
        current = self.lifecycle.fulfillment
        target = FulfillmentMode.DELIVERY if current == FulfillmentMode.PICKUP else FulfillmentMode.PICKUP
        self.lifecycle.select_fulfillment(target)
        self._refresh_content()

    def _place_order(self) -> None:
        result = self.lifecycle.place_order(
            name=self.values["name"],
            phone=self.values["phone"],
            email=self.values["email"],
        )
        if result.ok:
            self.dismiss(result.order)
            return

        self.error = result.message
        if result.failure == ValidationFailure.MISSING_NAME:
            self.field_index = self.FIELDS.index("name")
        elif result.failure == ValidationFailure.MISSING_PHONE:
            self.field_index = self.FIELDS.index("phone")
        self._refresh_content()

    def _refresh_content(self) -> None:
        summary = self.query_one("#order-summary", Static)
        form = self.query_one("#order-form", Static)
        error_widget = self.query_one("#order-error", Static)

        summary.update(format_order_summary(self.lifecycle.cart.lines(), self.lifecycle.cart.totals()))

        content = Text()
        for idx, field in enumerate(self.FIELDS):
            if idx > 0:
                content.append("\n")
            is_active = idx == self.field_index
            pointer = "➤ " if is_active else "  "
            label = self.FIELD_LABELS[field]
            if field == "fulfillment":
                choices = Text()
                for mode in FulfillmentMode:
                    selected = mode == self.lifecycle.fulfillment
                    marker = "(•)" if selected else "( )"
                    choices.append(f"{marker} {mode.label}  ", style="bold" if selected else "")
                content.append(f"{pointer}{label}: ")
                content.append_text(choices)
            else:
                cursor = "|" if is_active else ""
                content.append(f"{pointer}{label}: {self.values[field]}{cursor}", style="bold" if is_active else "")
        form.update(content)
        error_widget.update(self.error or "")
