"""
Tests for query state transitions.
"""

from __future__ import annotations

import pytest

from catalog_query.application.utils.query_reducer import apply
from catalog_query.domain.entities.actions import (
    SetPage,
    SetPageSize,
    SetSearch,
    SetSort,
    ToggleCategory,
    ToggleSubCategory,
)
from catalog_query.domain.entities.query_state import QueryState, SortMode


@pytest.mark.parametrize(
    "action",
    [
        ToggleCategory("Men"),
        ToggleSubCategory("Topwear"),
        SetSort(SortMode.PRICE_HIGH_LOW),
        SetSearch("shirt"),
        SetPageSize(20),
    ],
)
@pytest.mark.parametrize("start_page", [1, 2, 7])
def test_filter_changes_reset_page(action, start_page):
    """Any filter, sort, search or page size change lands on page 1."""
    state = QueryState(page=start_page)
    assert apply(state, action, total_pages=10).page == 1


def test_toggle_category_symmetry():
    """Toggling the same tag twice restores the original set and leaves page at 1."""
    start = QueryState(page=3)

    once = apply(start, ToggleCategory("Men"))
    assert once.categories == frozenset({"Men"})
    assert once.page == 1

    twice = apply(once, ToggleCategory("Men"))
    assert twice.categories == frozenset()
    assert twice.page == 1
    assert twice == QueryState(page=1)


def test_toggle_keeps_other_tags_and_fields():
    state = QueryState(
        categories=frozenset({"Women"}),
        sub_categories=frozenset({"Bottomwear"}),
        sort_mode=SortMode.PRICE_LOW_HIGH,
        search_text="jeans",
        page_size=30,
    )

    result = apply(state, ToggleSubCategory("Winterwear"))

    assert result.sub_categories == frozenset({"Bottomwear", "Winterwear"})
    assert result.categories == frozenset({"Women"})
    assert result.sort_mode is SortMode.PRICE_LOW_HIGH
    assert result.search_text == "jeans"
    assert result.page_size == 30


def test_toggle_builds_new_set():
    state = QueryState(categories=frozenset({"Kids"}))
    result = apply(state, ToggleCategory("Men"))
    assert result.categories is not state.categories
    assert state.categories == frozenset({"Kids"})


def test_set_page_within_bounds():
    state = QueryState()
    assert apply(state, SetPage(4), total_pages=5).page == 4
    assert apply(state, SetPage(5), total_pages=5).page == 5
    assert apply(state, SetPage(1), total_pages=5).page == 1


@pytest.mark.parametrize("page", [0, -1, 6, 100])
def test_set_page_out_of_bounds_is_noop(page):
    state = QueryState(page=2)
    assert apply(state, SetPage(page), total_pages=5) is state


def test_set_page_unbounded_before_first_result():
    """With no known page count only the lower bound applies."""
    state = QueryState()
    assert apply(state, SetPage(42)).page == 42
    assert apply(state, SetPage(0)) is state


def test_set_page_size_outside_options_is_noop():
    state = QueryState(page=3)
    assert apply(state, SetPageSize(15)) is state
    assert apply(state, SetPageSize(30)) == QueryState(page=1, page_size=30)


def test_set_search_replaces_text():
    state = apply(QueryState(search_text="old"), SetSearch(""))
    assert state.search_text == ""


def test_unknown_action_raises():
    with pytest.raises(TypeError):
        apply(QueryState(), object())


def test_set_sort_coerces_wire_value():
    state = apply(QueryState(page=2), SetSort("high-low"))
    assert state.sort_mode is SortMode.PRICE_HIGH_LOW
    assert state.page == 1


def test_set_sort_rejects_unknown_mode():
    with pytest.raises(ValueError):
        apply(QueryState(), SetSort("alphabetical"))
