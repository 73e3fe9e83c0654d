"""
Configuration management for the IPTV addon.
Uses pydantic-settings for environment variable loading.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Addon Configuration
    app_name: str = "IPTV Addon"
    app_version: str = "0.0.6"
    debug: bool = False
    log_level: str = "INFO"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS Configuration
    # Addon clients run in browsers, so every origin is allowed by default
    cors_origins: list[str] = ["*"]

    # Rate Limiting
    rate_limit_per_minute: int = 100

    # Data Sources (iptv-org API)
    iptv_api_base: str = "https://iptv-org.github.io/api"
    fetch_timeout_seconds: float = 10.0

    # Refresh Configuration (also the cache TTL)
    refresh_interval_hours: int = 24

    # Store the raw stream list on each refresh so stream lookups skip the network
    cache_streams_on_refresh: bool = True

    # Pydantic V2 configuration
    model_config = SettingsConfigDict(env_prefix="IPTV_", env_file=".env")

    @property
    def refresh_interval_seconds(self) -> int:
        return self.refresh_interval_hours * 60 * 60

    @property
    def channels_url(self) -> str:
        return f"{self.iptv_api_base}/channels.json"

    @property
    def streams_url(self) -> str:
        return f"{self.iptv_api_base}/streams.json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
