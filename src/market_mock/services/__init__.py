"""Service layer - query engines over the record store."""

from market_mock.services.price_query import PriceQueryEngine, PriceResult
from market_mock.services.portfolio_query import PortfolioQueryEngine

__all__ = [
    "PriceQueryEngine",
    "PriceResult",
    "PortfolioQueryEngine",
]
