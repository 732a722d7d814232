"""Shared fixtures: isolate the debug log and build small catalogs."""
from __future__ import annotations

from decimal import Decimal

import pytest

from menu_order.cart import CartStore
from menu_order.lifecycle import OrderLifecycle, OrderNumberSequence
from menu_order.models import MenuItem


@pytest.fixture(autouse=True)
def _isolate_debug_log(tmp_path, monkeypatch):
    """Keep debug log writes inside the test's tmp dir."""
    log_path = tmp_path / "debug.log"
    monkeypatch.setenv("MENU_ORDER_DEBUG_LOG", str(log_path))
    return log_path


def make_item(name: str, price: str, category: str = "Other", description: str = "", section: str = "") -> MenuItem:
    return MenuItem(
        item_id=name.lower().replace(" ", "_"),
        name=name,
        price=Decimal(price),
        category=category,
        description=description,
        section=section,
    )


@pytest.fixture()
def item_a() -> MenuItem:
    return make_item("Chicken Taco", "10.00", "Taco", "Grilled chicken on corn tortilla", "tacos")


@pytest.fixture()
def item_b() -> MenuItem:
    return make_item("Churros", "5.50", "Dessert", "Cinnamon sugar with chocolate sauce", "desserts")


@pytest.fixture()
def cart() -> CartStore:
    return CartStore()


@pytest.fixture()
def lifecycle(cart) -> OrderLifecycle:
    return OrderLifecycle(cart, OrderNumberSequence())
