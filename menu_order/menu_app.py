"""Main Textual app class."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from menu_order.cart import CartStore
from menu_order.confirmation_modal import ConfirmationModal
from menu_order.data import MENU_ITEMS, section_title
from menu_order.debug_log import log_debug
from menu_order.lifecycle import OrderLifecycle, OrderNumberSequence
from menu_order.models import CartLine, CartSnapshot, ItemMatch, LifecycleSnapshot, MenuItem, Order, SearchResult
from menu_order.notes_modal import NotesModal
from menu_order.order_modal import OrderModal
from menu_order.rendering import (
    format_line_label,
    format_money,
    format_note_tag,
    format_result_row,
    format_totals,
)
from menu_order.search import SearchEngine


class MenuOrderApp(App):
    """A Textual app for searching the menu and building an order."""

    TITLE = "Menu Order"
    SUB_TITLE = "Cart empty"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #menu-pane {
        width: 3fr;
        border: round $secondary;
        padding: 1;
    }

    #cart-pane {
        width: 2fr;
        border: round $primary;
        padding: 1;
    }

    #search-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: 4;
    }

    #results {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-totals {
        height: 5;
        padding: 0 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    input_state = reactive("normal")
    selected_index = reactive(0)
    line_selected_index = reactive(None)

    BINDINGS = [
        ("tab", "cycle_results(1)", "Next result"),
        ("up", "cycle_results(-1)", "Previous result"),
        ("down", "cycle_results(1)", "Next result"),
        ("enter", "register_selected", "Add item"),
        ("backspace", "backspace_query", "Delete query char"),
        ("escape", "clear_search", "Clear search"),
        ("ctrl+c", "cancel_active_mode", "Exit search"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        items: list[MenuItem] | None = None,
        cart: CartStore | None = None,
        lifecycle: OrderLifecycle | None = None,
    ) -> None:
        super().__init__()
        self.cart = cart or CartStore()
        self.lifecycle = lifecycle or OrderLifecycle(self.cart, OrderNumberSequence())
        self.menu_search = SearchEngine(MENU_ITEMS if items is None else items)
        self.system_status = ""
        self.cart.subscribe(self._handle_cart_changed)
        self.lifecycle.subscribe(self._handle_lifecycle_changed)
        self.menu_search.subscribe(self._handle_search_changed)
        log_debug("app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="menu-pane"):
                yield Static(id="search-bar")
                yield Static(id="results")
            with Vertical(id="cart-pane"):
                yield Static("Your Order", classes="pane-title")
                yield Static("Your cart is empty", id="cart-list")
                yield Static(id="cart-totals")

    def on_mount(self) -> None:
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        if self._modal_open():
            return

        if not event.is_printable or not event.character or len(event.character) != 1:
            return

        char = event.character
        if self.input_state == "active":
            self.selected_index = 0
            self.menu_search.set_query(self.menu_search.query + char)
            event.stop()
            return

        key = char.lower()
        if key in {"s", "/"}:
            self.input_state = "active"
            self.selected_index = 0
            self._refresh_search()
        elif key == "j":
            self._move_line_selection(1)
        elif key == "k":
            self._move_line_selection(-1)
        elif key in {"+", "="}:
            self._with_selected_line(lambda line: self.cart.increment(line.line_id))
        elif key == "-":
            self._with_selected_line(lambda line: self.cart.decrement(line.line_id))
        elif key == "d":
            self._with_selected_line(lambda line: self.cart.remove_item(line.line_id))
        elif key == "n":
            self._open_notes_for_selected_line()
        elif key == "o":
            self.action_review_order()
        else:
            return
        event.stop()

    def action_cancel_active_mode(self) -> None:
        if self._modal_open() or self.input_state == "normal":
            return
        self.input_state = "normal"
        self._refresh_search()

    def action_clear_search(self) -> None:
        if self._modal_open():
            return
        self.input_state = "normal"
        self.selected_index = 0
        self.menu_search.clear()

    def action_cycle_results(self, delta: int) -> None:
        if self._modal_open() or self.input_state != "active":
            return

        results = self.menu_search.result.matched_items()
        if not results:
            self.selected_index = 0
        else:
            self.selected_index = (self.selected_index + delta) % len(results)
        self._refresh_results()

    def action_register_selected(self) -> None:
        if self._modal_open() or self.input_state != "active":
            return

        results = self.menu_search.result.matched_items()
        if not results:
            return

        self.selected_index = min(self.selected_index, len(results) - 1)
        item = results[self.selected_index].item
        added = self.cart.add_item(item)
        self.line_selected_index = self._line_index(added.line_id)
        self.system_status = f"Added {item.name}"
        self._refresh_cart()
        self._refresh_search_bar()

    def action_backspace_query(self) -> None:
        if self._modal_open() or self.input_state != "active":
            return
        if not self.menu_search.query:
            return
        self.selected_index = 0
        self.menu_search.set_query(self.menu_search.query[:-1])

    def action_review_order(self) -> None:
        result = self.lifecycle.review()
        if not result.ok:
            self.system_status = result.message
            self._refresh_search_bar()
            return
        self.input_state = "normal"
        self.push_screen(OrderModal(self.lifecycle), callback=self._handle_order_modal_closed)

    def _handle_order_modal_closed(self, order: Order | None) -> None:
        if order is None:
            self.system_status = "Back to menu"
            self._refresh_search_bar()
            return
        self.push_screen(ConfirmationModal(order), callback=self._handle_confirmation_closed)

    def _handle_confirmation_closed(self, _: None) -> None:
        self.lifecycle.start_new_order()
        self.line_selected_index = None
        self.system_status = "Started a new order"
        self.menu_search.clear()

    def _handle_cart_changed(self, snapshot: CartSnapshot) -> None:
        if snapshot.item_count:
            self.sub_title = f"{snapshot.item_count} items · {format_money(snapshot.totals.total)}"
        else:
            self.sub_title = "Cart empty"
        self._refresh_cart()

    def _handle_lifecycle_changed(self, snapshot: LifecycleSnapshot) -> None:
        log_debug(f"app_lifecycle state={snapshot.state.value}")
        self._refresh_search_bar()

    def _handle_search_changed(self, _: SearchResult) -> None:
        self._refresh_search()

    def _modal_open(self) -> bool:
        return isinstance(self.screen, ModalScreen)

    def _line_index(self, line_id: str) -> int | None:
        for idx, line in enumerate(self.cart.lines()):
            if line.line_id == line_id:
                return idx
        return None

    def _selected_line(self) -> CartLine | None:
        lines = self.cart.lines()
        if self.line_selected_index is None:
            return None
        if not (0 <= self.line_selected_index < len(lines)):
            return None
        return lines[self.line_selected_index]

    def _with_selected_line(self, command: Callable[[CartLine], object]) -> None:
        line = self._selected_line()
        if line is None:
            return
        command(line)

    def _move_line_selection(self, delta: int) -> None:
        count = len(self.cart.lines())
        if not count:
            return
        if self.line_selected_index is None:
            self.line_selected_index = 0 if delta > 0 else count - 1
        else:
            self.line_selected_index = (self.line_selected_index + delta) % count
        self._refresh_cart()

    def _open_notes_for_selected_line(self) -> None:
        line = self._selected_line()
        if line is None:
            return
        self.push_screen(NotesModal(line, on_save=lambda notes: self.cart.set_notes(line.line_id, notes)))

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            start = max(0, selected - rows // 2)
            start = min(start, total - rows)

        return (start, start + rows)

    def _refresh_all(self) -> None:
        self._refresh_cart()
        self._refresh_search()

    def _refresh_cart(self) -> None:
        try:
            cart_widget = self.query_one("#cart-list", Static)
            totals_widget = self.query_one("#cart-totals", Static)
        except NoMatches:
            return

        lines = self.cart.lines()
        totals_widget.update(format_totals(self.cart.totals()))
        if not lines:
            self.line_selected_index = None
            cart_widget.update("Your cart is empty\nAdd some delicious items to get started!")
            return

        if self.line_selected_index is None or self.line_selected_index >= len(lines):
            self.line_selected_index = len(lines) - 1

        start, end = self._window_bounds(len(lines), self._visible_rows(cart_widget) // 2, self.line_selected_index)

        text = Text()
        if start > 0:
            text.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                text.append("\n")
            line = lines[idx]
            pointer = "➤ " if idx == self.line_selected_index else "  "
            text.append(pointer)
            text.append_text(format_line_label(line))
            if line.notes:
                text.append("\n    ")
                text.append_text(format_note_tag(line.notes))

        if end < len(lines):
            text.append("\n⋮", style="dim")

        cart_widget.update(text)

    def _refresh_search(self) -> None:
        self._refresh_search_bar()
        self._refresh_results()

    def _refresh_search_bar(self) -> None:
        try:
            bar = self.query_one("#search-bar", Static)
        except NoMatches:
            return

        if self.input_state == "normal":
            status = self.system_status or "Ready"
            bar.update(
                "S search. J/K select line, +/- qty, D remove, N notes, O review order.\n"
                f"{status}"
            )
            return

        text = Text()
        text.append("Search", style="bold #1a1a1a on #f2c94c")
        text.append(f": {self.menu_search.query}|\n")
        text.append(self.menu_search.result.summary(), style="dim")
        bar.update(text)

    def _refresh_results(self) -> None:
        try:
            results_widget = self.query_one("#results", Static)
        except NoMatches:
            return

        results = self.menu_search.result.matched_items()
        if not results:
            results_widget.update("No menu items found\nTry searching for something else.")
            return

        if self.selected_index >= len(results):
            self.selected_index = 0

        selected = self.selected_index if self.input_state == "active" else None
        start, end = self._window_bounds(len(results), self._visible_rows(results_widget) // 3, selected)

        text = Text()
        if start > 0:
            text.append("⋮\n", style="dim")

        section = None
        for idx in range(start, end):
            hit: ItemMatch = results[idx]
            if hit.item.section != section:
                section = hit.item.section
                if idx > start:
                    text.append("\n")
                text.append(f"{section_title(section)}\n", style="bold underline")
            pointer = "➤ " if idx == selected else "  "
            text.append(pointer)
            text.append_text(format_result_row(hit))
            text.append("\n")

        if end < len(results):
            text.append("⋮", style="dim")

        results_widget.update(text)
