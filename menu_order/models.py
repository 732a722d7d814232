"""Domain models for menu-order."""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from menu_order.config import HIGHLIGHT_CLOSE, HIGHLIGHT_OPEN
from menu_order.errors import ValidationFailure


@dataclass(frozen=True)
class MenuItem:
    """A read-only catalog descriptor for one menu item."""

    item_id: str
    name: str
    price: Decimal
    category: str
    description: str = ""
    section: str = ""


@dataclass
class CartLine:
    """One row in the cart: an item, its quantity and free-text notes."""

    line_id: str
    name: str
    unit_price: Decimal
    category: str
    quantity: int = 1
    notes: str = ""

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class Totals:
    """Derived cart totals."""

    subtotal: Decimal
    tax: Decimal
    total: Decimal


@dataclass(frozen=True)
class CartSnapshot:
    """Cart state delivered to subscribers after every change."""

    lines: tuple[CartLine, ...]
    totals: Totals
    item_count: int


class FulfillmentMode(str, Enum):
    PICKUP = "pickup"
    DELIVERY = "delivery"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, raw: object) -> FulfillmentMode:
        """Resolve a raw selection, falling back to pickup for anything unknown."""
        if isinstance(raw, FulfillmentMode):
            return raw
        if isinstance(raw, str):
            normalized = raw.strip().lower()
            for mode in cls:
                if mode.value == normalized:
                    return mode
        return cls.PICKUP


@dataclass(frozen=True)
class OrderLine:
    """Frozen copy of a cart line taken when an order is placed."""

    name: str
    unit_price: Decimal
    category: str
    quantity: int
    notes: str = ""

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity

    @classmethod
    def from_cart_line(cls, line: CartLine) -> OrderLine:
        return cls(
            name=line.name,
            unit_price=line.unit_price,
            category=line.category,
            quantity=line.quantity,
            notes=line.notes,
        )


@dataclass(frozen=True)
class Order:
    """Immutable snapshot created when an order is placed."""

    order_number: int
    customer_name: str
    customer_phone: str
    customer_email: str
    fulfillment: FulfillmentMode
    totals: Totals
    lines: tuple[OrderLine, ...] = ()


class LifecycleState(str, Enum):
    BROWSING = "browsing"
    REVIEWING = "reviewing"
    SUBMITTING = "submitting"
    CONFIRMED = "confirmed"


@dataclass(frozen=True)
class LifecycleSnapshot:
    """Lifecycle state delivered to subscribers after every transition."""

    state: LifecycleState
    order: Order | None
    fulfillment: FulfillmentMode


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of a lifecycle request."""

    ok: bool
    state: LifecycleState
    failure: ValidationFailure | None = None
    order: Order | None = None

    @property
    def message(self) -> str:
        if self.failure is None:
            return ""
        return self.failure.message


@dataclass(frozen=True)
class HighlightedField:
    """Original field text plus the spans that matched the current query."""

    original: str
    spans: tuple[tuple[int, int], ...] = ()

    @property
    def is_highlighted(self) -> bool:
        return bool(self.spans)

    def markup(self) -> str:
        """Render the field with highlight markers; surrounding text is HTML-escaped."""
        parts: list[str] = []
        cursor = 0
        for start, end in self.spans:
            parts.append(html.escape(self.original[cursor:start], quote=False))
            parts.append(HIGHLIGHT_OPEN)
            parts.append(html.escape(self.original[start:end], quote=False))
            parts.append(HIGHLIGHT_CLOSE)
            cursor = end
        parts.append(html.escape(self.original[cursor:], quote=False))
        return "".join(parts)


@dataclass(frozen=True)
class ItemMatch:
    """Search outcome for a single catalog item."""

    item: MenuItem
    matched: bool
    name: HighlightedField
    description: HighlightedField


@dataclass(frozen=True)
class SearchResult:
    """Filtered and annotated view of the catalog for one query."""

    query: str
    hits: tuple[ItemMatch, ...] = field(default_factory=tuple)

    @property
    def matched_count(self) -> int:
        return sum(1 for hit in self.hits if hit.matched)

    def matched_items(self) -> list[ItemMatch]:
        return [hit for hit in self.hits if hit.matched]

    def matched_sections(self) -> set[str]:
        """Sections containing at least one matched item."""
        return {hit.item.section for hit in self.hits if hit.matched}

    def summary(self) -> str:
        if not self.query:
            return ""
        count = self.matched_count
        if count == 0:
            return "No menu items found"
        plural = "" if count == 1 else "s"
        return f'Found {count} item{plural} matching "{self.query}"'
