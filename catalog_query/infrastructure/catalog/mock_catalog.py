from __future__ import annotations

import asyncio
import logging
import math
from dataclasses import dataclass

from catalog_query.application.dto.page_response import PageResponseDTO
from catalog_query.application.ports.product_catalog import ProductCatalogPort
from catalog_query.application.utils.query_serializer import SerializedQuery


@dataclass(frozen=True)
class MockProduct:
    id: str
    name: str
    category: str
    sub_category: str
    price: float

    @property
    def slug(self) -> str:
        return self.name.lower().replace(" ", "-")


def _seed_products() -> list[MockProduct]:
    products: list[MockProduct] = []
    garments = {
        "Topwear": ["Cotton T-Shirt", "Linen Shirt", "Polo"],
        "Bottomwear": ["Chino Trousers", "Denim Jeans", "Jogger"],
        "Winterwear": ["Puffer Jacket", "Wool Sweater"],
    }
    n = 0
    for category in ("Men", "Women", "Kids"):
        for sub_category, names in garments.items():
            for name in names:
                n += 1
                products.append(
                    MockProduct(
                        id=f"mock_{n:03d}",
                        name=f"{category} {name}",
                        category=category,
                        sub_category=sub_category,
                        price=float(20 + (n * 37) % 180),
                    )
                )
    return products


class MockProductCatalog(ProductCatalogPort):
    """In-memory product list for dev/local runs without a backend."""

    def __init__(self, products: list[MockProduct] | None = None, latency_seconds: float = 0.0) -> None:
        self._products = products if products is not None else _seed_products()
        self._latency_seconds = latency_seconds
        self._logger = logging.getLogger(__name__)

    async def fetch_page(self, query: SerializedQuery) -> PageResponseDTO:
        if self._latency_seconds > 0:
            await asyncio.sleep(self._latency_seconds)

        categories = _split(query.get("category"))
        sub_categories = _split(query.get("subCategory"))
        search = (query.get("search") or "").strip().lower()

        matches = [
            p
            for p in self._products
            if (not categories or p.category in categories)
            and (not sub_categories or p.sub_category in sub_categories)
            and (not search or search in p.name.lower())
        ]
        sort = query.get("sort", "relevant")
        if sort == "low-high":
            matches.sort(key=lambda p: p.price)
        elif sort == "high-low":
            matches.sort(key=lambda p: p.price, reverse=True)

        limit = max(1, int(query.get("limit", 10)))
        page = max(1, int(query.get("page", 1)))
        start = (page - 1) * limit
        chunk = matches[start : start + limit]

        self._logger.info(
            "Mock product list served", extra={"page": page, "match_count": len(matches)}
        )
        return PageResponseDTO.model_validate(
            {
                "success": True,
                "data": [
                    {"_id": p.id, "name": p.name, "slug": p.slug, "price": p.price, "image": [f"/images/{p.id}.png"]}
                    for p in chunk
                ],
                "totalPages": math.ceil(len(matches) / limit),
            }
        )


def _split(value: str | None) -> set[str]:
    if not value:
        return set()
    return {part for part in value.split(",") if part}
