"""Dependency injection for FastAPI."""

from fastapi import Depends

from market_mock.app_context import AppContext, get_app_context
from market_mock.domain.store import RecordStore
from market_mock.services import PriceQueryEngine, PortfolioQueryEngine


def get_context() -> AppContext:
    """Provide the process-wide AppContext."""
    return get_app_context()


def get_record_store(context: AppContext = Depends(get_context)) -> RecordStore:
    """Provide the read-only RecordStore."""
    return context.store


def get_price_engine(context: AppContext = Depends(get_context)) -> PriceQueryEngine:
    """Provide PriceQueryEngine instance."""
    return context.prices


def get_portfolio_engine(context: AppContext = Depends(get_context)) -> PortfolioQueryEngine:
    """Provide PortfolioQueryEngine instance."""
    return context.portfolios
