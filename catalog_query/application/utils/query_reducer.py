from __future__ import annotations

from dataclasses import replace

from catalog_query.domain.entities.actions import (
    Action,
    SetPage,
    SetPageSize,
    SetSearch,
    SetSort,
    ToggleCategory,
    ToggleSubCategory,
)
from catalog_query.domain.entities.query_state import PAGE_SIZE_OPTIONS, QueryState, SortMode


def apply(state: QueryState, action: Action, total_pages: int | None = None) -> QueryState:
    """
    Return the state that follows `action`.

    Every change to filters, sort, search or page size lands on page 1.
    `total_pages` is the last known page count for the current filters;
    None means nothing is known yet and only the lower bound is enforced.
    Out of range pages and unsupported page sizes return `state` unchanged.
    """
    if isinstance(action, ToggleCategory):
        return replace(state, categories=_toggle(state.categories, action.tag), page=1)
    if isinstance(action, ToggleSubCategory):
        return replace(state, sub_categories=_toggle(state.sub_categories, action.tag), page=1)
    if isinstance(action, SetSort):
        return replace(state, sort_mode=SortMode(action.mode), page=1)
    if isinstance(action, SetSearch):
        return replace(state, search_text=action.text, page=1)
    if isinstance(action, SetPageSize):
        if action.page_size not in PAGE_SIZE_OPTIONS:
            return state
        return replace(state, page_size=action.page_size, page=1)
    if isinstance(action, SetPage):
        if action.page < 1:
            return state
        if total_pages is not None and action.page > total_pages:
            return state
        return replace(state, page=action.page)
    raise TypeError(f"Unsupported action: {action!r}")


def _toggle(tags: frozenset[str], tag: str) -> frozenset[str]:
    return frozenset(tags ^ {tag})
