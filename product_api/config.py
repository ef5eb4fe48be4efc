from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables (and `.env`).

    The API key guards every mutating request, so override the default
    outside of local development.
    """
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "Product Catalog API"
    APP_VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    # Shared secret for POST/PUT/DELETE
    API_KEY: str = "dev-api-key"
    API_KEY_HEADER: str = "x-api-key"

    SEED_SAMPLE_DATA: bool = True

    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 3002

    CORS_ORIGINS: list[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
