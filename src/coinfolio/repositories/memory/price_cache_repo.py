"""In-process implementation of PriceCacheRepository."""

import threading
from typing import Callable, Mapping, Optional

from coinfolio.core.timezone import now_millis


class InMemoryPriceCacheRepository:
    """
    Process-wide price cache guarded by a single lock.

    Starts empty with last_refreshed at epoch zero, so it is invalid until
    the first successful write. Any bulk_put re-validates every entry, not
    just the ones written.
    """

    def __init__(self, clock: Callable[[], float] = now_millis):
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: dict[str, float] = {}
        self._last_refreshed_ms: float = 0.0

    @property
    def last_refreshed_ms(self) -> float:
        with self._lock:
            return self._last_refreshed_ms

    def is_valid(self, ttl_ms: float, now_ms: Optional[float] = None) -> bool:
        now = self._clock() if now_ms is None else now_ms
        with self._lock:
            return now - self._last_refreshed_ms < ttl_ms

    def get(self, provider_id: str) -> Optional[float]:
        with self._lock:
            return self._entries.get(provider_id)

    def bulk_put(self, prices: Mapping[str, float], now_ms: Optional[float] = None) -> None:
        now = self._clock() if now_ms is None else now_ms
        with self._lock:
            self._entries.update(prices)
            self._last_refreshed_ms = now

    def snapshot(self) -> tuple[dict[str, float], float]:
        with self._lock:
            return dict(self._entries), self._last_refreshed_ms

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
