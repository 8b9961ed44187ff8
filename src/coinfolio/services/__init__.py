"""Service layer - price lookup orchestration."""

from coinfolio.services.symbol_resolver import SymbolResolver, normalize_symbol, parse_symbols
from coinfolio.services.inflight import InFlightRegistry
from coinfolio.services.price_fetcher import (
    PriceFetcher,
    NO_VALID_SYMBOLS_MESSAGE,
    RATE_LIMIT_WARNING,
)

__all__ = [
    "SymbolResolver",
    "normalize_symbol",
    "parse_symbols",
    "InFlightRegistry",
    "PriceFetcher",
    "NO_VALID_SYMBOLS_MESSAGE",
    "RATE_LIMIT_WARNING",
]
