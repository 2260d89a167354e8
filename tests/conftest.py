"""
Shared fakes for the product list backend.
"""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from catalog_query.application.dto.page_response import PageResponseDTO
from catalog_query.application.ports.product_catalog import ProductCatalogPort
from catalog_query.application.utils.query_serializer import SerializedQuery


def make_page(count: int, total_pages: int = 1, prefix: str = "p", success: bool = True) -> PageResponseDTO:
    return PageResponseDTO.model_validate(
        {
            "success": success,
            "data": [
                {"_id": f"{prefix}{i}", "name": f"Item {prefix}{i}", "slug": f"item-{prefix}{i}", "price": 10 + i, "image": []}
                for i in range(count)
            ],
            "totalPages": total_pages,
        }
    )


class QueuedCatalog(ProductCatalogPort):
    """Answers each call with the next queued outcome (a response or an exception)."""

    def __init__(self, *outcomes: Any) -> None:
        self._outcomes = list(outcomes)
        self.calls: list[dict[str, Any]] = []

    async def fetch_page(self, query: SerializedQuery) -> PageResponseDTO:
        self.calls.append(dict(query))
        outcome = self._outcomes.pop(0) if self._outcomes else make_page(1)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class ManualCatalog(ProductCatalogPort):
    """Every call blocks until the test resolves its future."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.pending: list[asyncio.Future[PageResponseDTO]] = []

    async def fetch_page(self, query: SerializedQuery) -> PageResponseDTO:
        future: asyncio.Future[PageResponseDTO] = asyncio.get_running_loop().create_future()
        self.calls.append(dict(query))
        self.pending.append(future)
        return await future


@pytest.fixture
def page_factory():
    return make_page


@pytest.fixture
def queued_catalog():
    return QueuedCatalog


@pytest.fixture
def manual_catalog():
    return ManualCatalog()
