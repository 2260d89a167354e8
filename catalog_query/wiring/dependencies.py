from functools import lru_cache
import logging

from catalog_query.application.ports.product_catalog import ProductCatalogPort
from catalog_query.application.use_cases.collection_controller import CollectionController
from catalog_query.core.config import settings
from catalog_query.domain.entities.query_state import DEFAULT_PAGE_SIZE, PAGE_SIZE_OPTIONS, QueryState
from catalog_query.infrastructure.catalog.http_catalog import HttpProductCatalog
from catalog_query.infrastructure.catalog.mock_catalog import MockProductCatalog


@lru_cache
def get_product_catalog() -> ProductCatalogPort:
    logger = logging.getLogger(__name__)
    logger.info("ENV=%s BACKEND_URL present=%s", settings.ENV, bool(settings.BACKEND_URL))

    if not settings.BACKEND_URL:
        if settings.ENV.lower() in {"dev", "local"}:
            logger.info("Using MockProductCatalog (BACKEND_URL missing, ENV=dev/local)")
            return MockProductCatalog(latency_seconds=settings.MOCK_CATALOG_LATENCY_SECONDS)
        raise ValueError("BACKEND_URL is required to fetch the product list.")

    logger.info("Using HttpProductCatalog")
    return HttpProductCatalog(
        base_url=settings.BACKEND_URL,
        list_path=settings.PRODUCT_LIST_PATH,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
    )


def get_initial_query_state() -> QueryState:
    page_size = settings.DEFAULT_PAGE_SIZE
    if page_size not in PAGE_SIZE_OPTIONS:
        logging.getLogger(__name__).warning(
            "DEFAULT_PAGE_SIZE not allowed, falling back", extra={"reason": f"{page_size} not in {PAGE_SIZE_OPTIONS}"}
        )
        page_size = DEFAULT_PAGE_SIZE
    return QueryState(page_size=page_size)


@lru_cache
def get_collection_controller() -> CollectionController:
    """One controller per process; all API callers share its query state."""
    return CollectionController(
        catalog=get_product_catalog(),
        initial_state=get_initial_query_state(),
        cancel_superseded=settings.CANCEL_SUPERSEDED_REQUESTS,
    )
