"""Domain layer - pure models with no external dependencies."""

from market_mock.domain.models import (
    AssetType,
    Asset,
    PriceRecord,
    PositionRecord,
)
from market_mock.domain.views import PricePlaceholder, PortfolioSnapshot
from market_mock.domain.store import RecordStore

__all__ = [
    "AssetType",
    "Asset",
    "PriceRecord",
    "PositionRecord",
    "PricePlaceholder",
    "PortfolioSnapshot",
    "RecordStore",
]
