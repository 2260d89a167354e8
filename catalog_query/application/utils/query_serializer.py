from __future__ import annotations

from typing import TypedDict

from catalog_query.domain.entities.query_state import QueryState


class SerializedQuery(TypedDict, total=False):
    page: int
    limit: int
    sort: str
    search: str
    category: str
    subCategory: str


def serialize_query(state: QueryState) -> SerializedQuery:
    """Build the product list request parameters for `state`."""
    query: SerializedQuery = {
        "page": state.page,
        "limit": state.page_size,
        "sort": state.sort_mode.value,
        "search": state.search_text,
    }
    # sorted so that equal states always produce the same request
    if state.categories:
        query["category"] = ",".join(sorted(state.categories))
    if state.sub_categories:
        query["subCategory"] = ",".join(sorted(state.sub_categories))
    return query
