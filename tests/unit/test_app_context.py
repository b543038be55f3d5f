"""
Unit tests for AppContext and query parameter helpers.

Tests cover:
- Lazy store generation from settings
- Engines sharing the injected store
- Splitting of the comma-separated assets parameter
"""

import pytest

from market_mock.api.params import split_asset_ids
from market_mock.app_context import AppContext, get_app_context, set_app_context
from market_mock.config.settings import Settings
from market_mock.services import PriceQueryEngine, PortfolioQueryEngine


class TestAppContext:
    """Tests for AppContext."""

    def test_store_is_generated_on_first_access(self, clock):
        ctx = AppContext(settings=Settings(_env_file=None, data_seed=3), clock=clock)

        assert not ctx.is_loaded
        store = ctx.store

        assert ctx.is_loaded
        assert len(store.assets) == 6
        assert ctx.store is store

    def test_seeded_contexts_generate_identical_stores(self, clock):
        settings = Settings(_env_file=None, data_seed=3)

        first = AppContext(settings=settings, clock=clock).store
        second = AppContext(settings=settings, clock=clock).store

        assert first == second

    def test_generation_follows_settings(self, clock):
        settings = Settings(_env_file=None, data_seed=3, position_window_months=2)

        store = AppContext(settings=settings, clock=clock).store

        # 2024-04-15 through 2024-06-14
        assert len(store.positions) == 61 * 6

    def test_supplied_store_is_used(self, app_context: AppContext, record_store):
        assert app_context.is_loaded
        assert app_context.store is record_store

    def test_engines_are_cached(self, app_context: AppContext):
        assert isinstance(app_context.prices, PriceQueryEngine)
        assert isinstance(app_context.portfolios, PortfolioQueryEngine)
        assert app_context.prices is app_context.prices
        assert app_context.portfolios is app_context.portfolios

    def test_engines_share_id_factory(self, app_context: AppContext):
        placeholder = app_context.prices.query_prices(["Dogecoin"], as_of="2023-01-08")[0]
        snapshot = app_context.portfolios.query_portfolio()

        assert placeholder.id == "id-1"
        assert snapshot.id == "id-2"

    def test_global_context_can_be_replaced(self, app_context: AppContext):
        set_app_context(app_context)
        try:
            assert get_app_context() is app_context
        finally:
            set_app_context(None)


class TestSplitAssetIds:
    """Tests for split_asset_ids."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("Bitcoin", ["Bitcoin"]),
            ("Bitcoin,Ethereum", ["Bitcoin", "Ethereum"]),
            ("Bitcoin, Apple Inc.", ["Bitcoin", "Apple Inc."]),
            ("Bitcoin,,Ethereum,", ["Bitcoin", "Ethereum"]),
            (",", []),
            ("", []),
            (None, []),
        ],
    )
    def test_split(self, raw, expected):
        assert split_asset_ids(raw) == expected
