"""Price providers module."""

from coinfolio.providers.price_provider import PriceProvider
from coinfolio.providers.coingecko_provider import CoinGeckoPriceProvider
from coinfolio.providers.stub_provider import StubPriceProvider

__all__ = [
    "PriceProvider",
    "CoinGeckoPriceProvider",
    "StubPriceProvider",
]
