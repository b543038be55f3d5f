"""Application context for in-process service management.

Holds the read-only record store and the query engines built on it.
The HTTP layer resolves it through a dependency; tests and scripts can
construct one directly around a hand-made store.
"""

from datetime import datetime
from typing import Callable, Optional

from market_mock.config.settings import Settings, get_settings
from market_mock.core.identifiers import new_id
from market_mock.core.timezone import now_utc
from market_mock.domain.store import RecordStore
from market_mock.providers import SyntheticRecordSource, build_record_store
from market_mock.services import PriceQueryEngine, PortfolioQueryEngine


class AppContext:
    """
    Application context providing access to the record store and engines.

    The store is generated on first access unless one is supplied, and is
    never replaced afterwards.
    """

    def __init__(
        self,
        store: Optional[RecordStore] = None,
        settings: Optional[Settings] = None,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], datetime] = now_utc,
    ):
        """
        Initialize application context.

        Args:
            store: Optional prebuilt store. If not provided, one is generated
                from the synthetic source on first use.
            settings: Optional settings. Uses the global settings if not provided.
            id_factory: Source of fresh identifiers for placeholders and snapshots.
            clock: Source of the current instant.
        """
        self._store = store
        self._settings = settings
        self._id_factory = id_factory
        self._clock = clock

        # Engine instances (lazy initialized)
        self._price_engine: Optional[PriceQueryEngine] = None
        self._portfolio_engine: Optional[PortfolioQueryEngine] = None

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    @property
    def store(self) -> RecordStore:
        """Get the record store, generating it on first access."""
        if self._store is None:
            settings = self.settings
            source = SyntheticRecordSource(
                seed=settings.data_seed,
                clock=self._clock,
                history_start=settings.price_history_start,
                interval_days=settings.price_interval_days,
                window_months=settings.position_window_months,
            )
            self._store = build_record_store(source)
        return self._store

    @property
    def is_loaded(self) -> bool:
        """Check if the store has been built."""
        return self._store is not None

    @property
    def prices(self) -> PriceQueryEngine:
        """Get the PriceQueryEngine instance."""
        if self._price_engine is None:
            self._price_engine = PriceQueryEngine(
                store=self.store,
                id_factory=self._id_factory,
            )
        return self._price_engine

    @property
    def portfolios(self) -> PortfolioQueryEngine:
        """Get the PortfolioQueryEngine instance."""
        if self._portfolio_engine is None:
            self._portfolio_engine = PortfolioQueryEngine(
                store=self.store,
                id_factory=self._id_factory,
                clock=self._clock,
            )
        return self._portfolio_engine


# Global application context (one per process)
_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext()
    return _app_context


def set_app_context(context: Optional[AppContext]) -> None:
    """Set the global application context."""
    global _app_context
    _app_context = context
