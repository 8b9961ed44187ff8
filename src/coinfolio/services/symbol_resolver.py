"""Symbol resolver: canonical ticker symbols <-> provider coin ids."""

from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Union

from coinfolio.domain.coin_ids import SYMBOL_TO_COINGECKO_ID


def normalize_symbol(s: Optional[str]) -> Optional[str]:
    """Normalize symbol: strip whitespace and uppercase; None or empty -> None."""
    if s is None:
        return None
    stripped = s.strip().upper()
    return stripped if stripped else None


def parse_symbols(raw: Union[str, Iterable[str], None]) -> list[str]:
    """
    Split raw caller input into canonical symbols.

    Accepts "btc,eth" or ["btc", "ETH,sol"]. Blanks are dropped and duplicates
    collapsed, keeping first-seen order.
    """
    if raw is None:
        return []
    parts = [raw] if isinstance(raw, str) else list(raw)
    result: list[str] = []
    seen: set[str] = set()
    for part in parts:
        for piece in (part or "").split(","):
            symbol = normalize_symbol(piece)
            if symbol and symbol not in seen:
                seen.add(symbol)
                result.append(symbol)
    return result


class SymbolResolver:
    """
    Static bidirectional lookup between tickers and provider ids.

    Both maps are built once at construction and exposed read-only.
    """

    def __init__(self, table: Optional[Mapping[str, str]] = None):
        source = SYMBOL_TO_COINGECKO_ID if table is None else table
        forward = {symbol.strip().upper(): provider_id for symbol, provider_id in source.items()}
        self._forward = MappingProxyType(forward)
        self._reverse = MappingProxyType(
            {provider_id: symbol for symbol, provider_id in forward.items()}
        )
        self._symbols = tuple(forward)

    def resolve(self, symbol: Optional[str]) -> Optional[str]:
        """Return the provider id for a symbol (any case), or None if unknown."""
        key = normalize_symbol(symbol)
        if key is None:
            return None
        return self._forward.get(key)

    def is_supported(self, symbol: Optional[str]) -> bool:
        return self.resolve(symbol) is not None

    def list_supported(self) -> list[str]:
        """All canonical symbols in table order."""
        return list(self._symbols)

    def reverse_lookup(self, provider_id: str) -> Optional[str]:
        return self._reverse.get(provider_id)
