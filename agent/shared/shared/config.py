"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # WeatherAPI.com upstream
    weatherapi_key: str = ""
    weatherapi_base_url: str = "https://api.weatherapi.com/v1"
    # Total seconds allowed for one upstream round trip
    weatherapi_timeout: float = 15.0

    # HTTP surface
    # Mount point for the proxy routes, e.g. "/api/weather". Empty mounts at "/".
    route_prefix: str = ""

    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def model_post_init(self, __context: object) -> None:
        """Normalise URL-ish settings so they can be joined with a path."""
        self.weatherapi_base_url = self.weatherapi_base_url.rstrip("/")
        prefix = self.route_prefix.strip().rstrip("/")
        if prefix and not prefix.startswith("/"):
            prefix = f"/{prefix}"
        self.route_prefix = prefix


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
