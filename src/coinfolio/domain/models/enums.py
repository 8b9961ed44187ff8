"""Enumerations for domain models."""

from enum import Enum


class AssetType(str, Enum):
    """Categories of portfolio holdings."""

    CRYPTO = "crypto"  # priced through the market data provider
    STOCK = "stock"
    ETF = "etf"
