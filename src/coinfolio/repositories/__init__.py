"""Repository layer - data access abstractions and implementations."""

from coinfolio.repositories.protocols import (
    PriceCacheRepository,
    AssetRepository,
)

__all__ = [
    "PriceCacheRepository",
    "AssetRepository",
]
