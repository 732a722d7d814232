"""In-memory cart store with change notifications."""

from __future__ import annotations

import re
from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable
from uuid import uuid4

from menu_order.config import TAX_RATE
from menu_order.debug_log import log_debug
from menu_order.models import CartLine, CartSnapshot, MenuItem, Totals

CENT = Decimal("0.01")

CartListener = Callable[[CartSnapshot], None]


def round2(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def compute_totals(lines: list[CartLine] | tuple[CartLine, ...], tax_rate: Decimal = TAX_RATE) -> Totals:
    """Compute subtotal, tax and total for the given lines."""
    subtotal = round2(sum((line.line_total for line in lines), Decimal("0")))
    tax = round2(subtotal * tax_rate)
    return Totals(subtotal=subtotal, tax=tax, total=subtotal + tax)


def new_line_id(name: str) -> str:
    """Slug of the item name plus a random suffix."""
    slug = re.sub(r"[^a-z0-9]", "-", name.lower())
    return f"{slug}-{uuid4().hex[:8]}"


def parse_quantity(raw: object) -> int | None:
    """Parse a raw quantity from the UI; None when it is not a whole number."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            return None
    return None


class CartStore:
    """Owns the ordered cart lines for one session."""

    def __init__(self, tax_rate: Decimal = TAX_RATE) -> None:
        self.tax_rate = tax_rate
        self._lines: list[CartLine] = []
        self._listeners: list[CartListener] = []

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Register a change listener and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def lines(self) -> tuple[CartLine, ...]:
        return tuple(replace(line) for line in self._lines)

    def get_line(self, line_id: str) -> CartLine | None:
        line = self._find(line_id)
        return replace(line) if line is not None else None

    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines)

    def totals(self) -> Totals:
        return compute_totals(self._lines, self.tax_rate)

    def snapshot(self) -> CartSnapshot:
        return CartSnapshot(lines=self.lines(), totals=self.totals(), item_count=self.item_count())

    def add_item(self, item: MenuItem, notes: str = "") -> CartLine:
        """Add one unit of an item, merging into a line with the same name and notes."""
        notes = notes or ""
        existing = next(
            (line for line in self._lines if line.name == item.name and line.notes == notes),
            None,
        )
        if existing is not None:
            existing.quantity += 1
            line = existing
        else:
            line = CartLine(
                line_id=new_line_id(item.name),
                name=item.name,
                unit_price=item.price,
                category=item.category,
                quantity=1,
                notes=notes,
            )
            self._lines.append(line)

        log_debug(f"cart_add line_id={line.line_id} name={line.name!r} qty={line.quantity}")
        self._notify()
        return replace(line)

    def remove_item(self, line_id: str) -> None:
        line = self._find(line_id)
        if line is None:
            return
        self._lines.remove(line)
        log_debug(f"cart_remove line_id={line_id}")
        self._notify()

    def set_quantity(self, line_id: str, quantity: object) -> CartLine | None:
        """Set a line's quantity; zero or less removes the line."""
        parsed = parse_quantity(quantity)
        line = self._find(line_id)
        if parsed is None or line is None:
            return None

        if parsed <= 0:
            self.remove_item(line_id)
            return None

        line.quantity = parsed
        log_debug(f"cart_set_quantity line_id={line_id} qty={parsed}")
        self._notify()
        return replace(line)

    def increment(self, line_id: str) -> CartLine | None:
        line = self._find(line_id)
        if line is None:
            return None
        return self.set_quantity(line_id, line.quantity + 1)

    def decrement(self, line_id: str) -> CartLine | None:
        line = self._find(line_id)
        if line is None:
            return None
        return self.set_quantity(line_id, line.quantity - 1)

    def set_notes(self, line_id: str, notes: str) -> CartLine | None:
        """Replace a line's notes without re-checking for duplicate lines."""
        line = self._find(line_id)
        if line is None:
            return None
        line.notes = notes or ""
        log_debug(f"cart_set_notes line_id={line_id} notes={line.notes!r}")
        self._notify()
        return replace(line)

    def clear(self) -> None:
        self._lines.clear()
        log_debug("cart_clear")
        self._notify()

    def _find(self, line_id: str) -> CartLine | None:
        for line in self._lines:
            if line.line_id == line_id:
                return line
        return None

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
