"""Application settings, read from the environment (``ECO_*``) or a ``.env`` file."""

from __future__ import annotations

from datetime import timedelta
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(env_prefix="ECO_", env_file=".env", extra="ignore")

    app_name: str = "eco-dashboard"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # eBird
    ebird_api_key: str = "demo-key"
    ebird_api_base: str = "https://api.ebird.org/v2"
    default_region: str = "CA-AB"

    # HTTP
    http_timeout: float = 30.0

    # Cache TTLs (seconds)
    bird_ttl_seconds: int = 15 * 60
    station_list_ttl_seconds: int = 5 * 60
    station_detail_ttl_seconds: int = 2 * 60

    @property
    def bird_ttl(self) -> timedelta:
        return timedelta(seconds=self.bird_ttl_seconds)

    @property
    def station_list_ttl(self) -> timedelta:
        return timedelta(seconds=self.station_list_ttl_seconds)

    @property
    def station_detail_ttl(self) -> timedelta:
        return timedelta(seconds=self.station_detail_ttl_seconds)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (read once)."""
    return Settings()
