from __future__ import annotations

from catalog_query.application.use_cases.present_collection import present_collection
from catalog_query.domain.entities.product import ProductSummary
from catalog_query.domain.entities.query_state import QueryState
from catalog_query.domain.entities.result import Result, ResultStatus


ITEM = ProductSummary(id="1", name="Polo", slug="polo", price=25.0, image=["/polo.png"])


def test_first_page_disables_previous():
    state = QueryState()
    view = present_collection(state, Result((ITEM,), 3, ResultStatus.READY, state))

    assert not view.can_go_previous
    assert view.can_go_next
    assert view.is_current
    assert view.items == (ITEM,)
    assert view.page_label == "Page 1 of 3"


def test_last_page_disables_next():
    state = QueryState(page=3)
    view = present_collection(state, Result((ITEM,), 3, ResultStatus.READY, state))

    assert view.can_go_previous
    assert not view.can_go_next


def test_loading_indicator_only_without_items():
    state = QueryState()
    empty = present_collection(state, Result.initial(state))
    stale = present_collection(QueryState(page=2), Result((ITEM,), 3, ResultStatus.LOADING, state))

    assert empty.is_loading and empty.show_loading_indicator
    assert stale.is_loading and not stale.show_loading_indicator
    assert not stale.is_current


def test_failed_view_carries_reason():
    state = QueryState()
    view = present_collection(state, Result((ITEM,), 1, ResultStatus.FAILED, state, error="timeout"))

    assert view.failed
    assert not view.is_loading
    assert view.error == "timeout"
    assert view.items == (ITEM,)
