"""Application settings and configuration."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Coinfolio"
    app_version: str = "0.1.0"

    # Record store for portfolio holdings
    database_url: str = "sqlite:///./portfolio.db"

    log_level: str = "INFO"

    # Price cache freshness window (env: PRICE_CACHE_TTL_MS)
    price_cache_ttl_ms: int = 300000

    # Market data settings
    price_provider: str = "coingecko"
    coingecko_base_url: str = "https://api.coingecko.com/api/v3"
    coingecko_api_key: Optional[str] = None
    vs_currency: str = "usd"
    price_request_timeout_seconds: float = 10.0


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
