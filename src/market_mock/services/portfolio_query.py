"""Portfolio query engine: position snapshots by date."""

from datetime import datetime
from typing import Callable, Optional

from market_mock.core.date_matcher import same_calendar_day
from market_mock.core.exceptions import AppError, InternalFailureError
from market_mock.core.identifiers import new_id
from market_mock.core.timezone import now_utc, isoformat_utc, parse_query_date
from market_mock.domain.store import RecordStore
from market_mock.domain.views import PortfolioSnapshot


class PortfolioQueryEngine:
    """
    Builds portfolio snapshots from the stored positions.

    A snapshot without a date holds every position (one per asset per day),
    with no deduplication.
    """

    def __init__(
        self,
        store: RecordStore,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._store = store
        self._id_factory = id_factory
        self._clock = clock

    def query_portfolio(self, as_of: Optional[str] = None) -> PortfolioSnapshot:
        """
        Return the positions held on `as_of`, or all positions.

        The snapshot's as_of echoes the input, or the current instant in
        ISO-8601 form when no date is given.

        Raises:
            InvalidDateError: If as_of does not parse.
            InternalFailureError: On any unexpected fault while selecting.
        """
        day = parse_query_date(as_of) if as_of else None

        try:
            if day is None:
                positions = self._store.positions
            else:
                positions = tuple(
                    p for p in self._store.positions if same_calendar_day(p.as_of, day)
                )

            return PortfolioSnapshot(
                id=self._id_factory(),
                as_of=as_of or isoformat_utc(self._clock()),
                positions=positions,
            )
        except AppError:
            raise
        except Exception as exc:
            raise InternalFailureError() from exc
