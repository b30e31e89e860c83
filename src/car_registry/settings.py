"""
car_registry.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration, e.g. `CAR_REGISTRY_DATABASE_URL`.
    Defaults are safe for local dev.
    """

    model_config = SettingsConfigDict(env_prefix="CAR_REGISTRY_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "car-registry"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./cars.db"
    db_echo: bool = False

    # HTTP surface
    # `application_name` is the namespace of the X-<app>-alert/-error/-params headers.
    application_name: str = "carRegistryApp"
    api_prefix: str = "/api"
    default_page_size: int = Field(default=20, ge=1, le=2**31 - 1)
    max_page_size: int = Field(default=2000, ge=1, le=2**31 - 1)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Routers read the prefix and page-size limits from here; keep names stable since
# they are part of the deployment contract (env vars).
