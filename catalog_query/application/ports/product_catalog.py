from __future__ import annotations

from abc import ABC, abstractmethod

from catalog_query.application.dto.page_response import PageResponseDTO
from catalog_query.application.utils.query_serializer import SerializedQuery


class ProductCatalogPort(ABC):
    @abstractmethod
    async def fetch_page(self, query: SerializedQuery) -> PageResponseDTO:
        """
        Fetch one page of products matching `query`.

        Requirements:
        - Return the parsed response body; success=False is passed through as is
        - Raise CatalogUpstreamError on transport failures (timeouts, non-2xx)
        - Raise CatalogContractError when the body does not parse into a PageResponseDTO
        """
        raise NotImplementedError
