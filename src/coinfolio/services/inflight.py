"""Single-flight registry for outbound price lookups."""

import threading
from concurrent.futures import Future
from typing import Iterable, Optional


class InFlightRegistry:
    """
    Tracks which provider ids currently have a lookup outstanding.

    A caller claims the ids nobody else is fetching and becomes responsible
    for resolving the returned Future; ids already in flight come back as the
    other caller's Future to wait on. At most one outstanding lookup exists
    per id.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._calls: dict[str, Future] = {}

    def claim(self, keys: Iterable[str]) -> tuple[Optional[Future], list[str], dict[str, Future]]:
        """
        Split keys into (owned_future, owned_keys, joined).

        owned_future is None when every key was already in flight.
        """
        with self._lock:
            joined: dict[str, Future] = {}
            owned: list[str] = []
            for key in keys:
                if key in joined or key in owned:
                    continue
                existing = self._calls.get(key)
                if existing is not None:
                    joined[key] = existing
                else:
                    owned.append(key)
            future: Optional[Future] = None
            if owned:
                future = Future()
                future.set_running_or_notify_cancel()
                for key in owned:
                    self._calls[key] = future
            return future, owned, joined

    def release(self, keys: Iterable[str], future: Future) -> None:
        """Forget keys claimed with future. Call after the future is resolved."""
        with self._lock:
            for key in keys:
                if self._calls.get(key) is future:
                    del self._calls[key]

    def in_flight(self) -> list[str]:
        with self._lock:
            return list(self._calls)
