"""Pydantic schemas for price endpoints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from coinfolio.domain.views import FetchResult


class PriceResponse(BaseModel):
    """Response schema for a price lookup."""

    model_config = ConfigDict(populate_by_name=True)

    prices: dict[str, float] = Field(default_factory=dict, description="Price per canonical symbol")
    from_cache: bool = Field(default=False, alias="fromCache")
    errors: Optional[list[str]] = Field(
        default=None,
        description="Validation messages and provider warnings; absent when the lookup was clean",
    )

    @classmethod
    def from_result(cls, result: FetchResult) -> "PriceResponse":
        return cls(prices=result.prices, from_cache=result.from_cache, errors=result.errors)


class PortfolioPriceResponse(PriceResponse):
    """Response schema for pricing the crypto holdings in the portfolio."""

    message: Optional[str] = None
    updated: int = Field(default=0, description="Holdings whose current price was written")


class SupportedSymbolsResponse(BaseModel):
    """Response schema for listing supported symbols."""

    symbols: list[str]


class SymbolCheckResponse(BaseModel):
    """Response schema for a single symbol support check."""

    symbol: str
    supported: bool
