"""Tests for the static menu catalog."""
from __future__ import annotations

from decimal import Decimal

import pytest

from menu_order.constant import ITEM_META_BY_ID, MENU_ITEM_IDS_BY_SECTION
from menu_order.data import MENU_BY_SECTION, MENU_ITEMS, section_title, to_money


def test_every_section_item_exists():
    for item_ids in MENU_ITEM_IDS_BY_SECTION.values():
        for item_id in item_ids:
            assert item_id in ITEM_META_BY_ID


def test_menu_items_carry_section_and_decimal_price():
    for section, items in MENU_BY_SECTION.items():
        for item in items:
            assert item.section == section
            assert isinstance(item.price, Decimal)
            assert item.price >= 0
    assert len(MENU_ITEMS) == sum(len(ids) for ids in MENU_ITEM_IDS_BY_SECTION.values())


def test_to_money():
    assert to_money("5.50") == Decimal("5.50")
    assert to_money(3) == Decimal("3")
    with pytest.raises(ValueError):
        to_money("-1")
    with pytest.raises(ValueError):
        to_money("abc")
    with pytest.raises(ValueError):
        to_money("NaN")


def test_section_title():
    assert section_title("tacos") == "Tacos"
    assert section_title("late_night") == "Late Night"
