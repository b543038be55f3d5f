"""Domain models package."""

from market_mock.domain.models.enums import AssetType
from market_mock.domain.models.asset import Asset
from market_mock.domain.models.price import PriceRecord
from market_mock.domain.models.position import PositionRecord

__all__ = [
    "AssetType",
    "Asset",
    "PriceRecord",
    "PositionRecord",
]
