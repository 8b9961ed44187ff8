"""Asset (holding) domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from coinfolio.domain.models.enums import AssetType


@dataclass
class Asset:
    """
    A single portfolio holding.

    Only crypto holdings have their current_price refreshed by the price
    service; other types are maintained by hand.
    """

    asset_name: str
    symbol: str
    asset_type: AssetType
    quantity: float
    buy_price: float
    current_price: float = 0.0
    notes: Optional[str] = None
    asset_id: Optional[int] = None
    created_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.asset_type, str):
            self.asset_type = AssetType(self.asset_type)
        self.symbol = self.symbol.strip().upper()
