"""In-process repository implementations."""

from coinfolio.repositories.memory.price_cache_repo import InMemoryPriceCacheRepository

__all__ = [
    "InMemoryPriceCacheRepository",
]
