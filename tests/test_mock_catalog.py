from __future__ import annotations

import asyncio

from catalog_query.infrastructure.catalog.mock_catalog import MockProductCatalog


def _fetch(query: dict):
    return asyncio.run(MockProductCatalog().fetch_page(query))


def test_paginates_all_products():
    first = _fetch({"page": 1, "limit": 10, "sort": "relevant", "search": ""})
    last = _fetch({"page": 3, "limit": 10, "sort": "relevant", "search": ""})

    assert first.total_pages == 3
    assert len(first.data) == 10
    assert len(last.data) == 4


def test_filters_by_category_and_type():
    response = _fetch(
        {"page": 1, "limit": 30, "sort": "relevant", "search": "", "category": "Men,Kids", "subCategory": "Winterwear"}
    )

    names = [p.name for p in response.products()]
    assert len(names) == 4
    assert all(n.startswith(("Men ", "Kids ")) for n in names)


def test_sorts_by_price():
    response = _fetch({"page": 1, "limit": 30, "sort": "high-low", "search": ""})
    prices = [p.price for p in response.products()]
    assert prices == sorted(prices, reverse=True)


def test_no_match_still_reports_one_page():
    response = _fetch({"page": 1, "limit": 10, "sort": "relevant", "search": "tuxedo"})
    assert response.data == []
    assert response.total_pages == 1
