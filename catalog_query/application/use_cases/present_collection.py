from __future__ import annotations

from catalog_query.application.dto.collection_view import CollectionView
from catalog_query.domain.entities.query_state import QueryState
from catalog_query.domain.entities.result import Result, ResultStatus


def present_collection(state: QueryState, result: Result) -> CollectionView:
    is_loading = result.status is ResultStatus.LOADING
    return CollectionView(
        items=result.items,
        page=state.page,
        total_pages=result.total_pages,
        can_go_previous=state.page > 1,
        can_go_next=state.page < result.total_pages,
        is_loading=is_loading,
        show_loading_indicator=is_loading and not result.items,
        failed=result.status is ResultStatus.FAILED,
        is_current=result.for_query == state,
        error=result.error,
    )
