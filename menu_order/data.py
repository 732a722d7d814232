"""Static menu catalog data."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from menu_order.constant import ITEM_META_BY_ID, MENU_ITEM_IDS_BY_SECTION, SECTION_TITLES
from menu_order.models import MenuItem


def to_money(value: object) -> Decimal:
    """Convert a raw price to a non-negative Decimal."""
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValueError(f"Invalid price: {value!r}") from exc
    if not amount.is_finite() or amount < 0:
        raise ValueError(f"Price must be a non-negative amount, got {value!r}")
    return amount


def build_menu_item(item_id: str, section: str = "") -> MenuItem:
    meta = ITEM_META_BY_ID[item_id]
    return MenuItem(
        item_id=item_id,
        name=meta["name"],
        price=to_money(meta["price"]),
        category=meta.get("category") or "Other",
        description=meta.get("description", ""),
        section=section,
    )


def section_title(section: str) -> str:
    """Get display title for a section id."""
    return SECTION_TITLES.get(section, section.replace("_", " ").title())


MENU_BY_SECTION: dict[str, list[MenuItem]] = {
    section: [build_menu_item(item_id, section) for item_id in item_ids]
    for section, item_ids in MENU_ITEM_IDS_BY_SECTION.items()
}

MENU_ITEMS: list[MenuItem] = [item for items in MENU_BY_SECTION.values() for item in items]
