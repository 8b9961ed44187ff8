"""Asset repository protocol (portfolio holdings record store)."""

from typing import Mapping, Protocol

from coinfolio.domain.models import Asset, AssetType


class AssetRepository(Protocol):
    """Interface for the holdings data the price layer reads and writes."""

    def add(self, asset: Asset) -> Asset:
        """Insert a holding and return it with its id."""
        ...

    def list_symbols(self, asset_type: AssetType) -> list[str]:
        """Distinct symbols held for an asset type, sorted."""
        ...

    def update_current_prices(self, asset_type: AssetType, prices: Mapping[str, float]) -> int:
        """Write current_price for every holding of asset_type whose symbol is priced."""
        ...
