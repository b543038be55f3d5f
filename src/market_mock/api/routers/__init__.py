"""API routers package."""

from market_mock.api.routers.assets import router as assets_router
from market_mock.api.routers.prices import router as prices_router
from market_mock.api.routers.portfolios import router as portfolios_router

__all__ = [
    "assets_router",
    "prices_router",
    "portfolios_router",
]
