"""
Configuration settings for the product catalog service.

Uses Pydantic Settings to load environment variables for the HTTP server,
authentication, logging, and query defaults.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # HTTP server
    host: str = Field("127.0.0.1", alias="HOST")
    port: int = Field(3000, alias="PORT")

    # Mutations require this key in x-api-key / Authorization
    api_key: str = Field("your-secret-api-key-123", alias="API_KEY")

    # Query defaults
    default_page_size: int = Field(10, alias="DEFAULT_PAGE_SIZE")

    # Optional JSON array of products to bootstrap the store from
    catalog_seed_path: Optional[str] = Field(None, alias="CATALOG_SEED_PATH")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def is_development(self) -> bool:
        return self.app_env.lower() in ("development", "dev")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
