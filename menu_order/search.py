"""Search and highlight engine for the menu catalog."""

from __future__ import annotations

import re
from typing import Callable, Iterable

from menu_order.debug_log import log_debug
from menu_order.models import HighlightedField, ItemMatch, MenuItem, SearchResult

SearchListener = Callable[[SearchResult], None]


def normalize_query(query: object) -> str:
    if not isinstance(query, str):
        return ""
    return query.strip().lower()


def highlight_spans(text: str, term: str) -> tuple[tuple[int, int], ...]:
    """Return non-overlapping case-insensitive occurrences of ``term`` in ``text``."""
    if not term:
        return ()
    pattern = re.compile(re.escape(term), re.IGNORECASE)
    return tuple(match.span() for match in pattern.finditer(text) if match.end() > match.start())


def _field(text: str, term: str, matched: bool) -> HighlightedField:
    if not matched:
        return HighlightedField(original=text)
    return HighlightedField(original=text, spans=highlight_spans(text, term))


def match_item(item: MenuItem, term: str) -> ItemMatch:
    """Match one item against an already normalized query."""
    if not term:
        return ItemMatch(
            item=item,
            matched=True,
            name=HighlightedField(original=item.name),
            description=HighlightedField(original=item.description),
        )

    name_matches = term in item.name.lower()
    description_matches = term in item.description.lower()
    return ItemMatch(
        item=item,
        matched=name_matches or description_matches,
        name=_field(item.name, term, name_matches),
        description=_field(item.description, term, description_matches),
    )


def search_catalog(query: object, items: Iterable[MenuItem]) -> SearchResult:
    """
    Filter and annotate catalog items for a query.

    Annotation always starts from each item's original text, so running the
    same query twice yields the same result and an empty query restores
    every item unannotated.
    """
    term = normalize_query(query)
    return SearchResult(query=term, hits=tuple(match_item(item, term) for item in items))


class SearchEngine:
    """Owns the catalog view and the current query."""

    def __init__(self, items: Iterable[MenuItem]) -> None:
        self.items: tuple[MenuItem, ...] = tuple(items)
        self.query = ""
        self.result = search_catalog("", self.items)
        self._listeners: list[SearchListener] = []

    def subscribe(self, listener: SearchListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_query(self, query: object) -> SearchResult:
        self.query = query if isinstance(query, str) else ""
        self.result = search_catalog(self.query, self.items)
        log_debug(f"search query={self.result.query!r} matched={self.result.matched_count}")
        for listener in list(self._listeners):
            listener(self.result)
        return self.result

    def clear(self) -> SearchResult:
        return self.set_query("")
