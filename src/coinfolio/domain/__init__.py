"""Domain layer - pure business models with no external dependencies."""

from coinfolio.domain.models import Asset, AssetType
from coinfolio.domain.views import FetchResult

__all__ = [
    "Asset",
    "AssetType",
    "FetchResult",
]
