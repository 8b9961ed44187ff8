"""Dependency injection for FastAPI."""

import logging
from typing import Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from coinfolio.config.settings import Settings, get_settings
from coinfolio.providers import CoinGeckoPriceProvider, PriceProvider, StubPriceProvider
from coinfolio.repositories.memory import InMemoryPriceCacheRepository
from coinfolio.repositories.sqlalchemy import SqlAlchemyAssetRepository, get_db
from coinfolio.services import PriceFetcher

logger = logging.getLogger(__name__)

# Process-wide price fetcher; its cache lives as long as the process
_price_fetcher: Optional[PriceFetcher] = None


def build_price_provider(settings: Settings) -> PriceProvider:
    """Create the configured price provider."""
    name = settings.price_provider.strip().lower()
    if name == "stub":
        return StubPriceProvider()
    if name != "coingecko":
        logger.warning("Unknown price provider %r, falling back to coingecko", settings.price_provider)
    return CoinGeckoPriceProvider(
        base_url=settings.coingecko_base_url,
        vs_currency=settings.vs_currency,
        timeout_seconds=settings.price_request_timeout_seconds,
        api_key=settings.coingecko_api_key,
    )


def get_price_fetcher() -> PriceFetcher:
    """Provide the shared PriceFetcher instance."""
    global _price_fetcher
    if _price_fetcher is None:
        settings = get_settings()
        _price_fetcher = PriceFetcher(
            provider=build_price_provider(settings),
            cache=InMemoryPriceCacheRepository(),
            cache_ttl_ms=settings.price_cache_ttl_ms,
        )
    return _price_fetcher


def reset_price_fetcher() -> None:
    """Drop the shared PriceFetcher (and its cache)."""
    global _price_fetcher
    _price_fetcher = None


def get_asset_repo(db: Session = Depends(get_db)) -> SqlAlchemyAssetRepository:
    """Provide AssetRepository instance."""
    return SqlAlchemyAssetRepository(db)
