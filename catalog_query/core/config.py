from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    BACKEND_URL: str | None = None
    PRODUCT_LIST_PATH: str = "/api/product/list"
    HTTP_TIMEOUT_SECONDS: float = 10.0

    DEFAULT_PAGE_SIZE: int = 10
    CANCEL_SUPERSEDED_REQUESTS: bool = False

    MOCK_CATALOG_LATENCY_SECONDS: float = 0.0


settings = Settings()
