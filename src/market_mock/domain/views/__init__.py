"""View models for service outputs."""

from market_mock.domain.views.portfolio import PricePlaceholder, PortfolioSnapshot

__all__ = [
    "PricePlaceholder",
    "PortfolioSnapshot",
]
