from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from catalog_query.domain.entities.product import ProductSummary
from catalog_query.domain.entities.query_state import QueryState


class ResultStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class Result:
    items: tuple[ProductSummary, ...]
    total_pages: int
    status: ResultStatus
    for_query: QueryState
    error: str | None = None  # set only for FAILED

    @staticmethod
    def initial(state: QueryState) -> "Result":
        return Result(items=(), total_pages=1, status=ResultStatus.LOADING, for_query=state)
