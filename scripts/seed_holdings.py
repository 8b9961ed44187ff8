#!/usr/bin/env python3
"""
Seed the holdings store with a sample portfolio.
Crypto prices are refreshed later through /api/prices/portfolio.
"""

import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from coinfolio.domain.models import Asset, AssetType
from coinfolio.repositories.sqlalchemy import SqlAlchemyAssetRepository, get_session_factory, init_db


SAMPLE_ASSETS = [
    # Crypto - priced via CoinGecko
    ("Bitcoin", "BTC", AssetType.CRYPTO, 0.5, 42000.0, 42000.0, "Long-term hold"),
    ("Ethereum", "ETH", AssetType.CRYPTO, 2.5, 2200.0, 2200.0, "DeFi participation"),
    ("Solana", "SOL", AssetType.CRYPTO, 25, 95.0, 95.0, "High performance blockchain"),
    ("Cardano", "ADA", AssetType.CRYPTO, 1000, 0.45, 0.45, "Staking rewards"),
    ("Chainlink", "LINK", AssetType.CRYPTO, 50, 14.50, 14.50, "Oracle network investment"),
    # Stocks / ETFs - manual prices
    ("Apple Inc.", "AAPL", AssetType.STOCK, 10, 175.50, 182.00, "Tech blue chip"),
    ("Microsoft Corporation", "MSFT", AssetType.STOCK, 5, 380.00, 405.00, "Cloud and AI leader"),
    ("NVIDIA Corporation", "NVDA", AssetType.STOCK, 8, 450.00, 520.00, "AI hardware"),
    ("Vanguard Total Stock Market ETF", "VTI", AssetType.ETF, 20, 220.00, 245.00, "Core index holding"),
]


def seed() -> None:
    init_db()
    session = get_session_factory()()
    try:
        repo = SqlAlchemyAssetRepository(session)
        if repo.get_all():
            print("Holdings already present, nothing to seed")
            return
        for name, symbol, asset_type, quantity, buy_price, current_price, notes in SAMPLE_ASSETS:
            repo.add(Asset(
                asset_name=name,
                symbol=symbol,
                asset_type=asset_type,
                quantity=quantity,
                buy_price=buy_price,
                current_price=current_price,
                notes=notes,
            ))
            print(f"✓ {symbol:<5} {asset_type.value}")
        print(f"\nSeeded {len(SAMPLE_ASSETS)} holdings")
    finally:
        session.close()


if __name__ == "__main__":
    seed()
