"""Pilot tests for the Textual app wiring."""
from __future__ import annotations

from menu_order.confirmation_modal import ConfirmationModal
from menu_order.data import MENU_ITEMS
from menu_order.menu_app import MenuOrderApp
from menu_order.models import LifecycleState
from menu_order.notes_modal import NotesModal
from menu_order.order_modal import OrderModal


def _item(name: str):
    return next(item for item in MENU_ITEMS if item.name == name)


async def test_search_and_add_selected_result():
    app = MenuOrderApp()
    async with app.run_test() as pilot:
        await pilot.press("s", "t", "a", "c", "o")
        await pilot.pause()
        assert app.input_state == "active"
        assert app.menu_search.result.query == "taco"

        await pilot.press("enter")
        await pilot.pause()
        lines = app.cart.lines()
        assert [line.name for line in lines] == ["Chicken Taco"]
        assert app.line_selected_index == 0


async def test_backspace_edits_query():
    app = MenuOrderApp()
    async with app.run_test() as pilot:
        await pilot.press("s", "b", "u", "x")
        await pilot.press("backspace")
        await pilot.pause()
        assert app.menu_search.query == "bu"


async def test_quantity_keys_and_remove():
    app = MenuOrderApp()
    async with app.run_test() as pilot:
        app.cart.add_item(_item("Churros"))
        await pilot.press("j")
        await pilot.press("+", "+")
        await pilot.pause()
        assert app.cart.item_count() == 3

        await pilot.press("-")
        await pilot.pause()
        assert app.cart.item_count() == 2

        await pilot.press("d")
        await pilot.pause()
        assert app.cart.is_empty


async def test_notes_modal_updates_line():
    app = MenuOrderApp()
    async with app.run_test() as pilot:
        line = app.cart.add_item(_item("Burrito"))
        await pilot.press("j", "n")
        await pilot.pause()
        assert isinstance(app.screen, NotesModal)

        await pilot.press(*"no beans")
        await pilot.press("enter")
        await pilot.pause()
        assert app.cart.get_line(line.line_id).notes == "no beans"
        assert not isinstance(app.screen, NotesModal)


async def test_review_with_empty_cart_shows_message():
    app = MenuOrderApp()
    async with app.run_test() as pilot:
        await pilot.press("o")
        await pilot.pause()
        assert app.lifecycle.state == LifecycleState.BROWSING
        assert "cart is empty" in app.system_status
        assert not isinstance(app.screen, OrderModal)


async def test_full_order_flow():
    app = MenuOrderApp()
    async with app.run_test() as pilot:
        app.cart.add_item(_item("Chicken Taco"))
        await pilot.press("o")
        await pilot.pause()
        assert isinstance(app.screen, OrderModal)
        assert app.lifecycle.state == LifecycleState.REVIEWING

        await pilot.press("enter")
        await pilot.pause()
        assert app.screen.error == "Please enter your name."
        assert app.lifecycle.state == LifecycleState.REVIEWING

        await pilot.press(*"Jane")
        await pilot.press("enter")
        await pilot.pause()
        assert app.screen.error == "Please enter your phone number."
        assert app.screen.active_field == "phone"

        await pilot.press(*"5550100")
        await pilot.press("enter")
        await pilot.pause()
        assert isinstance(app.screen, ConfirmationModal)
        assert app.lifecycle.state == LifecycleState.CONFIRMED
        assert app.lifecycle.order.order_number == 1000
        assert app.lifecycle.order.customer_name == "Jane"

        await pilot.press("enter")
        await pilot.pause()
        assert app.lifecycle.state == LifecycleState.BROWSING
        assert app.lifecycle.order is None
        assert app.cart.is_empty
        assert app.lifecycle.numbers.peek == 1001


async def test_escape_from_review_returns_to_menu():
    app = MenuOrderApp()
    async with app.run_test() as pilot:
        app.cart.add_item(_item("Flan"))
        await pilot.press("o")
        await pilot.pause()
        await pilot.press("escape")
        await pilot.pause()
        assert not isinstance(app.screen, OrderModal)
        assert app.lifecycle.state == LifecycleState.BROWSING
        assert app.cart.item_count() == 1
