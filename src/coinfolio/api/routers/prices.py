"""Price API: live crypto prices through the shared cache."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from coinfolio.api.deps import get_asset_repo, get_price_fetcher
from coinfolio.api.schemas.prices import (
    PriceResponse,
    PortfolioPriceResponse,
    SupportedSymbolsResponse,
    SymbolCheckResponse,
)
from coinfolio.core.exceptions import ValidationError
from coinfolio.domain.models import AssetType
from coinfolio.repositories.protocols import AssetRepository
from coinfolio.services import PriceFetcher

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/prices", tags=["prices"])


@router.get("", response_model=PriceResponse, response_model_exclude_none=True)
def get_prices(
    symbols: Optional[str] = Query(None, description="Comma-separated tickers, e.g. btc,eth,sol"),
    fetcher: PriceFetcher = Depends(get_price_fetcher),
):
    """
    Return live prices for the given symbols.

    Unsupported symbols are ignored. Provider trouble is reported in
    `errors` alongside whatever cached prices are available; the status is
    200 either way.
    """
    if not (symbols or "").strip():
        raise ValidationError("symbols query parameter is required (e.g., ?symbols=btc,eth,sol)")
    result = fetcher.fetch_prices(symbols)
    return PriceResponse.from_result(result)


@router.get("/portfolio", response_model=PortfolioPriceResponse, response_model_exclude_none=True)
def get_portfolio_prices(
    fetcher: PriceFetcher = Depends(get_price_fetcher),
    asset_repo: AssetRepository = Depends(get_asset_repo),
):
    """Price every crypto holding and write the prices back to the holdings."""
    symbols = asset_repo.list_symbols(AssetType.CRYPTO)
    if not symbols:
        return PortfolioPriceResponse(prices={}, message="No crypto assets in portfolio")

    result = fetcher.fetch_prices(symbols)
    updated = asset_repo.update_current_prices(AssetType.CRYPTO, result.prices)
    logger.info("Priced %d of %d portfolio symbols", len(result.prices), len(symbols))
    return PortfolioPriceResponse(
        prices=result.prices,
        from_cache=result.from_cache,
        errors=result.errors,
        updated=updated,
    )


@router.get("/supported", response_model=SupportedSymbolsResponse)
def get_supported_symbols(fetcher: PriceFetcher = Depends(get_price_fetcher)):
    """List every ticker the price service can resolve."""
    return SupportedSymbolsResponse(symbols=fetcher.get_supported_symbols())


@router.get("/check/{symbol}", response_model=SymbolCheckResponse)
def check_symbol(symbol: str, fetcher: PriceFetcher = Depends(get_price_fetcher)):
    """Report whether a ticker is a supported cryptocurrency."""
    return SymbolCheckResponse(
        symbol=symbol.strip().upper(),
        supported=fetcher.is_supported_crypto(symbol),
    )
