"""CoinGecko simple-price client."""

import logging
from numbers import Real
from typing import Any, Optional

import requests

from coinfolio.core.exceptions import ProviderError, RateLimitedError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.coingecko.com/api/v3"
DEFAULT_TIMEOUT_SECONDS = 10.0
_SIMPLE_PRICE_PATH = "/simple/price"
_DEMO_KEY_HEADER = "x-cg-demo-api-key"


def _extract_price(entry: Any, vs_currency: str) -> Optional[float]:
    """Pull a usable price out of one response entry; None if absent or not positive."""
    if not isinstance(entry, dict):
        return None
    value = entry.get(vs_currency)
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    price = float(value)
    return price if price > 0 else None


class CoinGeckoPriceProvider:
    """
    Batched price lookups against CoinGecko's /simple/price endpoint.

    All ids go out in a single request as a comma-joined `ids` parameter.
    """

    name = "coingecko"

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        vs_currency: str = "usd",
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        self._url = base_url.rstrip("/") + _SIMPLE_PRICE_PATH
        self._vs_currency = vs_currency.lower()
        self._timeout = timeout_seconds
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/json"})
        if api_key:
            self._session.headers[_DEMO_KEY_HEADER] = api_key

    def get_prices(self, provider_ids: list[str]) -> dict[str, float]:
        if not provider_ids:
            return {}

        params = {"ids": ",".join(provider_ids), "vs_currencies": self._vs_currency}
        try:
            response = self._session.get(self._url, params=params, timeout=self._timeout)
        except requests.RequestException as e:
            raise ProviderError(str(e) or e.__class__.__name__) from e

        if response.status_code == 429:
            raise RateLimitedError()
        if not response.ok:
            raise ProviderError(f"CoinGecko API error: {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise ProviderError("CoinGecko returned a non-JSON response") from e
        if not isinstance(payload, dict):
            raise ProviderError("CoinGecko returned an unexpected response shape")

        prices: dict[str, float] = {}
        for provider_id in provider_ids:
            price = _extract_price(payload.get(provider_id), self._vs_currency)
            if price is not None:
                prices[provider_id] = price
        missing = len(provider_ids) - len(prices)
        if missing:
            logger.debug("CoinGecko returned no %s price for %d of %d ids",
                         self._vs_currency, missing, len(provider_ids))
        return prices
