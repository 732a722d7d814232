"""Tests for the search and highlight engine."""
from __future__ import annotations

import pytest

from menu_order.data import MENU_ITEMS
from menu_order.models import HighlightedField
from menu_order.search import SearchEngine, highlight_spans, normalize_query, search_catalog

from conftest import make_item


@pytest.fixture()
def catalog():
    return [
        make_item("Chicken Taco", "10.00", "Taco", "Grilled chicken, pico de gallo", "tacos"),
        make_item("Burrito", "12.95", "Burrito", "Rice, beans and cheese", "burritos"),
        make_item("Taco Salad", "9.00", "Salad", "Crispy TACO shell bowl with taco meat", "salads"),
    ]


# ---------- matching ----------

def test_taco_scenario():
    items = [make_item("Chicken Taco", "10.00"), make_item("Burrito", "12.95")]
    result = search_catalog("taco", items)

    assert [hit.matched for hit in result.hits] == [True, False]
    assert result.hits[0].name.markup() == "Chicken <mark>Taco</mark>"
    assert result.hits[1].name.markup() == "Burrito"
    assert result.matched_count == 1


def test_matching_is_case_insensitive_and_trimmed(catalog):
    result = search_catalog("  BURR ", catalog)
    assert result.query == "burr"
    assert [hit.item.name for hit in result.matched_items()] == ["Burrito"]


def test_description_only_match(catalog):
    result = search_catalog("beans", catalog)
    hit = result.matched_items()[0]
    assert hit.item.name == "Burrito"
    assert not hit.name.is_highlighted
    assert hit.description.markup() == "Rice, <mark>beans</mark> and cheese"


def test_every_occurrence_is_highlighted_preserving_case(catalog):
    hit = search_catalog("taco", catalog).hits[2]
    assert hit.name.markup() == "<mark>Taco</mark> Salad"
    assert hit.description.markup() == "Crispy <mark>TACO</mark> shell bowl with <mark>taco</mark> meat"


def test_regex_metacharacters_highlight_literally():
    assert highlight_spans("Mac (Cheese) (cheese)", "(cheese)") == ((4, 12), (13, 21))


def test_non_overlapping_occurrences():
    assert highlight_spans("aaaa", "aa") == ((0, 2), (2, 4))


def test_empty_query_matches_everything_without_markup(catalog):
    for query in ("", "   ", None, 42):
        result = search_catalog(query, catalog)
        assert result.matched_count == len(catalog)
        assert all(not hit.name.is_highlighted and not hit.description.is_highlighted for hit in result.hits)
        assert result.summary() == ""


def test_special_characters_are_literal():
    items = [make_item("Mac (Cheese)", "5.00"), make_item("Mac Cheese", "5.00"), make_item("Price $5.00*", "5.00")]
    assert [hit.item.name for hit in search_catalog("(cheese)", items).matched_items()] == ["Mac (Cheese)"]
    assert [hit.item.name for hit in search_catalog("$5.00*", items).matched_items()] == ["Price $5.00*"]
    assert search_catalog(".*", items).matched_count == 0
    assert search_catalog("[", items).matched_count == 0


def test_no_matches(catalog):
    result = search_catalog("sushi", catalog)
    assert result.matched_count == 0
    assert result.matched_items() == []
    assert result.summary() == "No menu items found"


def test_summary_wording(catalog):
    assert search_catalog("burrito", catalog).summary() == 'Found 1 item matching "burrito"'
    assert search_catalog("taco", catalog).summary() == 'Found 2 items matching "taco"'


def test_matched_sections(catalog):
    assert search_catalog("cheese", catalog).matched_sections() == {"burritos"}
    assert search_catalog("", catalog).matched_sections() == {"tacos", "burritos", "salads"}


def test_markup_escapes_surrounding_text():
    field = HighlightedField(original="Mac & <b>Cheese</b>", spans=((7, 8),))
    assert field.markup() == "Mac &amp; &lt;<mark>b</mark>&gt;Cheese&lt;/b&gt;"


def test_normalize_query():
    assert normalize_query(" TaCo ") == "taco"
    assert normalize_query(None) == ""


# ---------- engine state ----------

def test_same_query_twice_is_identical(catalog):
    engine = SearchEngine(catalog)
    first = engine.set_query("taco")
    second = engine.set_query("taco")
    assert first == second


def test_clearing_restores_pristine_text(catalog):
    engine = SearchEngine(catalog)
    engine.set_query("taco")
    engine.set_query("tac")
    result = engine.clear()
    assert result.matched_count == len(catalog)
    assert [hit.name.markup() for hit in result.hits] == [item.name for item in catalog]
    assert result == search_catalog("", catalog)


def test_engine_never_mutates_catalog(catalog):
    engine = SearchEngine(catalog)
    engine.set_query("taco")
    assert [item.name for item in engine.items] == ["Chicken Taco", "Burrito", "Taco Salad"]


def test_engine_notifies_subscribers(catalog):
    engine = SearchEngine(catalog)
    seen = []
    engine.subscribe(seen.append)
    engine.set_query("burrito")
    engine.clear()
    assert [result.matched_count for result in seen] == [1, 3]


def test_default_menu_is_searchable():
    result = search_catalog("taco", MENU_ITEMS)
    names = [hit.item.name for hit in result.matched_items()]
    assert "Chicken Taco" in names
    assert "Burrito" not in names
