"""API request/response schemas."""

from coinfolio.api.schemas.prices import (
    PriceResponse,
    PortfolioPriceResponse,
    SupportedSymbolsResponse,
    SymbolCheckResponse,
)

__all__ = [
    "PriceResponse",
    "PortfolioPriceResponse",
    "SupportedSymbolsResponse",
    "SymbolCheckResponse",
]
