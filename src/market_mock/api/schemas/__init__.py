"""Pydantic schemas for API responses."""

from market_mock.api.schemas.asset import AssetResponse
from market_mock.api.schemas.price import PriceResponse
from market_mock.api.schemas.portfolio import PositionResponse, PortfolioResponse
from market_mock.api.schemas.error import ErrorResponse

__all__ = [
    "AssetResponse",
    "PriceResponse",
    "PositionResponse",
    "PortfolioResponse",
    "ErrorResponse",
]
