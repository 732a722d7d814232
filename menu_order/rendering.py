"""Rendering helpers that turn core state into rich Text."""

from __future__ import annotations

from decimal import Decimal

from rich.text import Text

from menu_order.config import CURRENCY_SYMBOL, HIGHLIGHT_STYLE
from menu_order.constant import CATEGORY_BADGE_STYLES
from menu_order.models import CartLine, HighlightedField, ItemMatch, Order, OrderLine, Totals


def format_money(amount: Decimal) -> str:
    return f"{CURRENCY_SYMBOL}{amount:.2f}"


def badge_style(category: str) -> str:
    """Return a consistent badge style for category tags."""
    return CATEGORY_BADGE_STYLES.get(category, "bold #0b1f0f on #cccccc")


def highlighted_text(field: HighlightedField, style: str = "") -> Text:
    """Render a highlighted field with its matched spans styled."""
    text = Text(field.original, style=style)
    for start, end in field.spans:
        text.stylize(HIGHLIGHT_STYLE, start, end)
    return text


def format_result_row(hit: ItemMatch) -> Text:
    """Render a search result: badge, highlighted name, price and description."""
    text = Text()
    text.append(hit.item.category[:1] or "?", style=badge_style(hit.item.category))
    text.append(" ")
    text.append_text(highlighted_text(hit.name, style="bold"))
    text.append(f"  {format_money(hit.item.price)}", style="dim")
    if hit.item.description:
        text.append("\n    ")
        text.append_text(highlighted_text(hit.description, style="italic"))
    return text


def format_line_label(line: CartLine) -> Text:
    """Render a cart line with its category tag, quantity and line total."""
    text = Text()
    text.append(line.category[:1] or "?", style=badge_style(line.category))
    text.append(f" {line.name}")
    text.append(f"  x{line.quantity}", style="bold")
    text.append(f"  {format_money(line.line_total)}")
    return text


def format_note_tag(notes: str) -> Text:
    """Render line notes as a compact tag."""
    text = Text()
    if notes:
        text.append(f"[{notes}]", style="white")
    return text


def format_totals(totals: Totals) -> Text:
    text = Text()
    text.append(f"Subtotal {format_money(totals.subtotal)}\n")
    text.append(f"Tax      {format_money(totals.tax)}\n")
    text.append(f"Total    {format_money(totals.total)}", style="bold")
    return text


def format_order_summary(lines: tuple[CartLine | OrderLine, ...], totals: Totals) -> Text:
    """Render the review summary: one row per line, notes, then totals."""
    text = Text()
    for line in lines:
        text.append(f"{line.name}  ×{line.quantity}  {format_money(line.line_total)}\n")
        if line.notes:
            text.append(f"   Note: {line.notes}\n", style="dim")
    text.append("\n")
    text.append_text(format_totals(totals))
    return text


def format_confirmation(order: Order) -> Text:
    text = Text()
    text.append("Order #", style="bold")
    text.append(str(order.order_number), style="bold #5fbf72")
    text.append("\n\n")
    text.append(f"Name:  {order.customer_name}\n")
    text.append(f"Phone: {order.customer_phone}\n")
    if order.customer_email:
        text.append(f"Email: {order.customer_email}\n")
    text.append(f"Type:  {order.fulfillment.label}\n")
    text.append(f"Total: {format_money(order.totals.total)}", style="bold")
    return text
