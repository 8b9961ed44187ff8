"""SQLAlchemy repository implementations."""

from coinfolio.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    init_db,
    reset_database,
    Base,
)
from coinfolio.repositories.sqlalchemy.asset_repo import SqlAlchemyAssetRepository

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyAssetRepository",
]
