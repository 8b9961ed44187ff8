"""SQLAlchemy implementation of AssetRepository."""

import logging
from typing import Mapping

from sqlalchemy.orm import Session

from coinfolio.domain.models import Asset, AssetType
from coinfolio.repositories.sqlalchemy.orm_models import AssetORM

logger = logging.getLogger(__name__)


class SqlAlchemyAssetRepository:
    """SQLAlchemy-backed holdings repository, scoped to what pricing needs."""

    def __init__(self, db: Session):
        self._db = db

    def add(self, asset: Asset) -> Asset:
        """Insert a holding and return it with its id."""
        orm_asset = AssetORM(
            asset_name=asset.asset_name.strip(),
            symbol=asset.symbol,
            asset_type=asset.asset_type,
            quantity=asset.quantity,
            buy_price=asset.buy_price,
            current_price=asset.current_price,
            notes=asset.notes,
        )
        self._db.add(orm_asset)
        self._db.commit()
        self._db.refresh(orm_asset)
        return self._to_domain(orm_asset)

    def list_symbols(self, asset_type: AssetType) -> list[str]:
        """Distinct symbols held for an asset type, sorted."""
        rows = (
            self._db.query(AssetORM.symbol)
            .filter(AssetORM.asset_type == asset_type)
            .distinct()
            .order_by(AssetORM.symbol)
            .all()
        )
        return [row[0] for row in rows]

    def update_current_prices(self, asset_type: AssetType, prices: Mapping[str, float]) -> int:
        """
        Write current_price for matching holdings in a single transaction.

        Returns the number of rows updated.
        """
        if not prices:
            return 0
        updated = 0
        try:
            for symbol, price in prices.items():
                updated += (
                    self._db.query(AssetORM)
                    .filter(
                        AssetORM.asset_type == asset_type,
                        AssetORM.symbol == symbol,
                    )
                    .update({AssetORM.current_price: price}, synchronize_session=False)
                )
            self._db.commit()
        except Exception:
            self._db.rollback()
            raise
        logger.debug("Updated current_price on %d %s holdings", updated, asset_type.value)
        return updated

    def get_all(self) -> list[Asset]:
        """All holdings, newest first."""
        orm_assets = (
            self._db.query(AssetORM)
            .order_by(AssetORM.created_at.desc(), AssetORM.id.desc())
            .all()
        )
        return [self._to_domain(a) for a in orm_assets]

    @staticmethod
    def _to_domain(orm: AssetORM) -> Asset:
        """Convert ORM asset to domain model."""
        return Asset(
            asset_id=orm.id,
            asset_name=orm.asset_name,
            symbol=orm.symbol,
            asset_type=orm.asset_type,
            quantity=orm.quantity,
            buy_price=orm.buy_price,
            current_price=orm.current_price or 0.0,
            notes=orm.notes,
            created_at=orm.created_at,
        )
