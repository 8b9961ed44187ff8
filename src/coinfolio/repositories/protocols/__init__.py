"""Repository protocol definitions (interfaces)."""

from coinfolio.repositories.protocols.price_cache_repo import PriceCacheRepository
from coinfolio.repositories.protocols.asset_repo import AssetRepository

__all__ = [
    "PriceCacheRepository",
    "AssetRepository",
]
