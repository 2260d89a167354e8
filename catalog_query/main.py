from fastapi import FastAPI

from catalog_query.api.v1.collection import router as collection_router
from catalog_query.core.config import settings
from catalog_query.core.logging_config import setup_logging

setup_logging(settings.LOG_LEVEL)

app = FastAPI(title="Product Collection Query", version="1.0.0")

app.include_router(collection_router, prefix="/api/v1", tags=["collection"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
