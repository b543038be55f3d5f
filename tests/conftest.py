"""
Pytest configuration and fixtures for the mock market data API tests.

This module provides:
- Hand-crafted record store fixtures (no random data)
- Deterministic identifier and clock helpers
- Engine, context and API client fixtures
"""

from datetime import datetime
from typing import Callable

import pytest
import pytz
from fastapi.testclient import TestClient

from market_mock.app_context import AppContext, set_app_context
from market_mock.config.settings import Settings, set_settings, reset_settings
from market_mock.domain.models import Asset, AssetType, PriceRecord, PositionRecord
from market_mock.domain.store import RecordStore
from market_mock.main import app
from market_mock.services import PriceQueryEngine, PortfolioQueryEngine


# =============================================================================
# TIME HELPERS
# =============================================================================


def utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in UTC."""
    return pytz.UTC.localize(datetime(year, month, day, hour, minute, second))


def epoch_millis(dt: datetime) -> int:
    """Expected wire form of a price timestamp."""
    return int(dt.timestamp() * 1000)


class SequentialIds:
    """Identifier factory yielding id-1, id-2, ..."""

    def __init__(self, prefix: str = "id"):
        self._prefix = prefix
        self._count = 0

    def __call__(self) -> str:
        self._count += 1
        return f"{self._prefix}-{self._count}"


@pytest.fixture(autouse=True)
def settings() -> Settings:
    """Isolate every test from .env files and environment overrides."""
    current = Settings(_env_file=None, timezone="UTC")
    set_settings(current)
    yield current
    reset_settings()


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return utc_datetime(2024, 6, 15, 14, 30, 0)


@pytest.fixture
def clock(fixed_now) -> Callable[[], datetime]:
    return lambda: fixed_now


@pytest.fixture
def id_factory() -> SequentialIds:
    return SequentialIds()


# =============================================================================
# RECORD FIXTURES
# =============================================================================


BITCOIN = Asset(id="asset-btc", name="Bitcoin", type=AssetType.CRYPTO)
ETHEREUM = Asset(id="asset-eth", name="Ethereum", type=AssetType.CRYPTO)
APPLE = Asset(id="asset-aapl", name="Apple Inc.", type=AssetType.STOCK)

ASSETS = (BITCOIN, ETHEREUM, APPLE)

PRICES = (
    PriceRecord(id="p1", asset="Bitcoin", price=100, timestamp=utc_datetime(2023, 1, 1)),
    PriceRecord(id="p2", asset="Ethereum", price=50, timestamp=utc_datetime(2023, 1, 1)),
    PriceRecord(id="p3", asset="Bitcoin", price=110, timestamp=utc_datetime(2023, 1, 8)),
    PriceRecord(id="p4", asset="Bitcoin", price=115, timestamp=utc_datetime(2023, 1, 8, 18, 0)),
    PriceRecord(id="p5", asset="Ethereum", price=55, timestamp=utc_datetime(2023, 1, 8, 9, 30)),
    PriceRecord(id="p6", asset="Bitcoin", price=120, timestamp=utc_datetime(2023, 1, 15)),
    PriceRecord(id="p7", asset="Apple Inc.", price=150, timestamp=utc_datetime(2023, 1, 15)),
)

POSITIONS = (
    PositionRecord(id=1, asset="asset-btc", quantity=10, as_of=utc_datetime(2024, 6, 14), price=5),
    PositionRecord(id=2, asset="asset-eth", quantity=20, as_of=utc_datetime(2024, 6, 14), price=3),
    PositionRecord(id=3, asset="asset-btc", quantity=11, as_of=utc_datetime(2024, 6, 15), price=6),
    PositionRecord(id=4, asset="asset-eth", quantity=21, as_of=utc_datetime(2024, 6, 15), price=4),
    PositionRecord(id=5, asset="asset-aapl", quantity=7, as_of=utc_datetime(2024, 6, 15, 23, 59), price=9),
    PositionRecord(id=6, asset="asset-btc", quantity=12, as_of=utc_datetime(2024, 6, 16), price=7),
)


def prices_by_id(*ids: str) -> list[PriceRecord]:
    """Look up fixture prices by id, in the order given."""
    by_id = {p.id: p for p in PRICES}
    return [by_id[i] for i in ids]


@pytest.fixture
def record_store() -> RecordStore:
    """Provide a small hand-made store."""
    return RecordStore.from_records(assets=ASSETS, historical_prices=PRICES, positions=POSITIONS)


# =============================================================================
# ENGINE FIXTURES
# =============================================================================


@pytest.fixture
def price_engine(record_store, id_factory) -> PriceQueryEngine:
    """Provide PriceQueryEngine over the fixture store."""
    return PriceQueryEngine(store=record_store, id_factory=id_factory)


@pytest.fixture
def portfolio_engine(record_store, id_factory, clock) -> PortfolioQueryEngine:
    """Provide PortfolioQueryEngine over the fixture store."""
    return PortfolioQueryEngine(store=record_store, id_factory=id_factory, clock=clock)


@pytest.fixture
def app_context(record_store, id_factory, clock) -> AppContext:
    """Provide an AppContext wrapping the fixture store."""
    return AppContext(store=record_store, id_factory=id_factory, clock=clock)


# =============================================================================
# API FIXTURES
# =============================================================================


@pytest.fixture
def client(app_context) -> TestClient:
    """Provide FastAPI test client bound to the fixture store."""
    set_app_context(app_context)
    with TestClient(app) as c:
        yield c
    set_app_context(None)
