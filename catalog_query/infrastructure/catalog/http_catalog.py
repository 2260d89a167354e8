from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from catalog_query.application.dto.page_response import PageResponseDTO
from catalog_query.application.exceptions import CatalogContractError, CatalogUpstreamError
from catalog_query.application.ports.product_catalog import ProductCatalogPort
from catalog_query.application.utils.query_serializer import SerializedQuery


class HttpProductCatalog(ProductCatalogPort):
    def __init__(
        self,
        base_url: str,
        list_path: str = "/api/product/list",
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._url = base_url.rstrip("/") + "/" + list_path.lstrip("/")
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._logger = logging.getLogger(__name__)

    async def fetch_page(self, query: SerializedQuery) -> PageResponseDTO:
        try:
            resp = await self._client.get(self._url, params=dict(query))
        except httpx.HTTPError as e:
            self._logger.error("Product list request failed", extra={"url": self._url, "reason": str(e)})
            raise CatalogUpstreamError(f"Product list request failed: {e}") from e

        if resp.status_code >= 400:
            self._logger.error(
                "Product list responded with an error",
                extra={"status": resp.status_code, "body": resp.text[:500], "url": self._url},
            )
            raise CatalogUpstreamError(f"Product list responded with HTTP {resp.status_code}")

        try:
            return PageResponseDTO.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            self._logger.error("Malformed product list body", extra={"reason": str(e)})
            raise CatalogContractError(f"Malformed product list body: {e}") from e

    async def aclose(self) -> None:
        await self._client.aclose()
