"""Order confirmation modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from menu_order.models import Order
from menu_order.rendering import format_confirmation


class ConfirmationModal(ModalScreen[None]):
    """Show the placed order until the visitor starts a new one."""

    CSS = """
    ConfirmationModal {
        align: center middle;
        background: $background 60%;
    }

    #confirmation-dialog {
        width: 56;
        height: auto;
        border: round $success;
        background: $panel;
        padding: 1 2;
    }

    #confirmation-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #confirmation-body {
        color: white;
        margin-bottom: 1;
    }

    #confirmation-help {
        color: #dddddd;
    }
    """

    def __init__(self, order: Order) -> None:
        super().__init__()
        self.order = order

    def compose(self) -> ComposeResult:
        with Container(id="confirmation-dialog"):
            yield Static("Order Placed!", id="confirmation-title")
            yield Static(format_confirmation(self.order), id="confirmation-body")
            yield Static("Enter/N start new order.", id="confirmation-help")

    def on_key(self, event: Key) -> None:
        event.stop()
        if event.key in {"enter", "escape"} or (event.character or "").lower() == "n":
            self.dismiss(None)
