"""
Pytest configuration and fixtures for the price service tests.

This module provides:
- A controllable millisecond clock
- Recording / throttled / failing price providers
- Price cache and fetcher fixtures
- In-memory SQLite database fixtures for the holdings store
- A FastAPI test client wired to both
"""

import threading
from typing import Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from coinfolio.main import app
from coinfolio.api.deps import get_price_fetcher, reset_price_fetcher
from coinfolio.config.settings import Settings, set_settings, reset_settings
from coinfolio.core.exceptions import ProviderError, RateLimitedError
from coinfolio.repositories.memory import InMemoryPriceCacheRepository
from coinfolio.repositories.sqlalchemy import SqlAlchemyAssetRepository, reset_database
from coinfolio.repositories.sqlalchemy.database import Base, get_db
# Import ORM models to register them with Base before creating tables
from coinfolio.repositories.sqlalchemy import orm_models  # noqa: F401
from coinfolio.services import PriceFetcher, SymbolResolver


TTL_MS = 300000
T0_MS = 1_700_000_000_000.0


# =============================================================================
# CLOCK
# =============================================================================


class FakeClock:
    """Manually advanced clock returning epoch milliseconds."""

    def __init__(self, start_ms: float = T0_MS):
        self.now_ms = start_ms

    def __call__(self) -> float:
        return self.now_ms

    def advance(self, ms: float) -> None:
        self.now_ms += ms

    def set(self, ms: float) -> None:
        self.now_ms = ms


@pytest.fixture
def clock() -> FakeClock:
    """Clock fixed at T0_MS until advanced."""
    return FakeClock()


# =============================================================================
# PROVIDER FIXTURES
# =============================================================================


class RecordingPriceProvider:
    """
    Deterministic provider that records every batch it is asked for.

    Ids outside FIXED_PRICES are omitted from responses.
    """

    name = "recording"

    FIXED_PRICES = {
        "bitcoin": 50000.0,
        "ethereum": 3000.0,
        "solana": 150.0,
        "cardano": 0.45,
    }

    def __init__(self, prices: Optional[dict[str, float]] = None):
        self.prices = dict(self.FIXED_PRICES if prices is None else prices)
        self.calls: list[list[str]] = []

    def get_prices(self, provider_ids: list[str]) -> dict[str, float]:
        self.calls.append(list(provider_ids))
        return {pid: self.prices[pid] for pid in provider_ids if pid in self.prices}


class RateLimitedPriceProvider:
    """Provider that always answers as if throttled."""

    name = "throttled"

    def __init__(self):
        self.calls: list[list[str]] = []

    def get_prices(self, provider_ids: list[str]) -> dict[str, float]:
        self.calls.append(list(provider_ids))
        raise RateLimitedError()


class FailingPriceProvider:
    """Provider that always fails with a network-style error."""

    name = "failing"

    def __init__(self, message: str = "Network unavailable"):
        self.message = message
        self.calls: list[list[str]] = []

    def get_prices(self, provider_ids: list[str]) -> dict[str, float]:
        self.calls.append(list(provider_ids))
        raise ProviderError(self.message)


class BlockingPriceProvider(RecordingPriceProvider):
    """Recording provider that holds each call until released."""

    def __init__(self, prices: Optional[dict[str, float]] = None):
        super().__init__(prices)
        self.started = threading.Event()
        self.release = threading.Event()

    def get_prices(self, provider_ids: list[str]) -> dict[str, float]:
        self.started.set()
        assert self.release.wait(timeout=5), "provider was never released"
        return super().get_prices(provider_ids)


@pytest.fixture
def recording_provider() -> RecordingPriceProvider:
    return RecordingPriceProvider()


@pytest.fixture
def rate_limited_provider() -> RateLimitedPriceProvider:
    return RateLimitedPriceProvider()


@pytest.fixture
def failing_provider() -> FailingPriceProvider:
    return FailingPriceProvider()


# =============================================================================
# CACHE / FETCHER FIXTURES
# =============================================================================


@pytest.fixture
def price_cache(clock) -> InMemoryPriceCacheRepository:
    """Empty cache driven by the fake clock."""
    return InMemoryPriceCacheRepository(clock=clock)


@pytest.fixture
def resolver() -> SymbolResolver:
    return SymbolResolver()


@pytest.fixture
def make_fetcher(price_cache, clock, resolver):
    """Factory building a PriceFetcher around a given provider and the shared cache."""

    def _make(provider, ttl_ms: int = TTL_MS, **kwargs) -> PriceFetcher:
        return PriceFetcher(
            provider=provider,
            cache=price_cache,
            resolver=resolver,
            cache_ttl_ms=ttl_ms,
            clock=clock,
            **kwargs,
        )

    return _make


@pytest.fixture
def price_fetcher(make_fetcher, recording_provider) -> PriceFetcher:
    return make_fetcher(recording_provider)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def asset_repo(test_session) -> SqlAlchemyAssetRepository:
    """Provide test AssetRepository."""
    return SqlAlchemyAssetRepository(test_session)


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(test_engine, price_fetcher) -> TestClient:
    """Provide FastAPI test client with test database and a recording provider."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    # Lifespan startup creates tables through the global engine; keep it in memory
    set_settings(Settings(database_url="sqlite://", _env_file=None))
    reset_database()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_price_fetcher] = lambda: price_fetcher
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_price_fetcher()
    reset_settings()
