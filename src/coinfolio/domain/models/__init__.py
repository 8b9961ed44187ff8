"""Domain models package."""

from coinfolio.domain.models.enums import AssetType
from coinfolio.domain.models.asset import Asset

__all__ = [
    "AssetType",
    "Asset",
]
