"""Price cache repository protocol."""

from typing import Mapping, Optional, Protocol


class PriceCacheRepository(Protocol):
    """
    Interface for the shared provider-id -> price store.

    Freshness is tracked by one clock for the whole store, not per entry.
    """

    def is_valid(self, ttl_ms: float, now_ms: Optional[float] = None) -> bool:
        """True while now - last_refreshed is below ttl_ms."""
        ...

    def get(self, provider_id: str) -> Optional[float]:
        """Return the stored price regardless of freshness."""
        ...

    def bulk_put(self, prices: Mapping[str, float], now_ms: Optional[float] = None) -> None:
        """Merge prices and move last_refreshed to now for the whole store."""
        ...

    def snapshot(self) -> tuple[dict[str, float], float]:
        """Return a consistent copy of (entries, last_refreshed_ms)."""
        ...
