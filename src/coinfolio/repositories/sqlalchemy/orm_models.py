"""SQLAlchemy ORM model definitions."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Float,
    Integer,
    String,
    Text,
    Enum as SqlEnum,
)

from coinfolio.core.timezone import now_utc
from coinfolio.domain.models.enums import AssetType
from coinfolio.repositories.sqlalchemy.database import Base


class AssetORM(Base):
    """SQLAlchemy model for Asset (portfolio holding)."""

    __tablename__ = "assets"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_assets_quantity_positive"),
        CheckConstraint("buy_price >= 0", name="ck_assets_buy_price_non_negative"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    asset_name = Column(String(255), nullable=False)
    symbol = Column(String(20), nullable=False, index=True)
    asset_type = Column(
        SqlEnum(AssetType, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    quantity = Column(Float, nullable=False)
    buy_price = Column(Float, nullable=False)
    current_price = Column(Float, default=0.0)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
