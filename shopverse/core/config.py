# shopverse/core/config.py
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Every value has a development default, so the API starts with an
    empty .env. Override in production at least:
      - JWT_SECRET
      - DATA_DIR (or STORE_BACKEND=sql + DATABASE_URL)
    """

    PROJECT_NAME: str = "ShopVerse API"
    API_PREFIX: str = "/api"

    # Record store
    STORE_BACKEND: Literal["json", "sql"] = "json"
    DATA_DIR: Path = Path("data")
    DATABASE_URL: str = "sqlite:///./shopverse.db"

    # Token signing
    JWT_SECRET: str = "shopverse-secret-key-change-in-production"
    JWT_ALG: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 24 * 60

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    LOG_LEVEL: str = "INFO"

    # Bootstrap admin written by setup_admin.py
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "admin123"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
