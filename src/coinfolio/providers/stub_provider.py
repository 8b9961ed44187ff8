"""Stub price provider for offline/testing use."""

from typing import Optional

# Deterministic fake USD prices for common coin ids
_STUB_PRICES: dict[str, float] = {
    "bitcoin": 50000.0,
    "ethereum": 3000.0,
    "solana": 150.0,
    "cardano": 0.45,
    "ripple": 0.52,
    "dogecoin": 0.08,
    "tether": 1.0,
    "usd-coin": 1.0,
    "binancecoin": 560.0,
    "litecoin": 72.0,
}


class StubPriceProvider:
    """
    Stub provider with fixed prices for offline operation.

    Ids outside the fixed table are omitted, as a real provider omits
    coins it does not list.
    """

    name = "stub"

    def __init__(self, prices: Optional[dict[str, float]] = None):
        self._prices = dict(_STUB_PRICES if prices is None else prices)

    def get_prices(self, provider_ids: list[str]) -> dict[str, float]:
        """Return stub prices for requested ids."""
        return {pid: self._prices[pid] for pid in provider_ids if pid in self._prices}
