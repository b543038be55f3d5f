"""Price query engine: asset and date filtering over the price history."""

from datetime import datetime
from typing import Callable, Optional, Sequence, Union

from market_mock.core.date_matcher import same_calendar_day, in_range
from market_mock.core.exceptions import AppError, MissingParameterError, InternalFailureError
from market_mock.core.identifiers import new_id
from market_mock.core.timezone import parse_query_date
from market_mock.domain.models import PriceRecord
from market_mock.domain.store import RecordStore
from market_mock.domain.views import PricePlaceholder

PriceResult = Union[PriceRecord, PricePlaceholder]


class PriceQueryEngine:
    """
    Selects price records by asset and date.

    - Range query (both `start` and `end`): inclusive, full precision.
      Takes precedence over `as_of`.
    - Day query (`as_of`): same local calendar day, then reduced to the
      latest record per requested asset, with a zero-price placeholder for
      assets that have none.
    - No dates: every record of the requested assets, in store order.
    """

    def __init__(
        self,
        store: RecordStore,
        id_factory: Callable[[], str] = new_id,
    ):
        self._store = store
        self._id_factory = id_factory

    def query_prices(
        self,
        asset_ids: Optional[Sequence[str]],
        as_of: Optional[str] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> list[PriceResult]:
        """
        Return prices for the requested assets.

        Raises:
            MissingParameterError: If asset_ids is absent or empty.
            InvalidDateError: If a date that would be applied does not parse.
            InternalFailureError: On any unexpected fault while selecting.
        """
        if not asset_ids:
            raise MissingParameterError("assets")

        requested = list(dict.fromkeys(asset_ids))

        # Only a complete range counts; a lone start or end is ignored
        date_range: Optional[tuple[datetime, datetime]] = None
        day: Optional[datetime] = None
        if start and end:
            date_range = (parse_query_date(start), parse_query_date(end))
        elif as_of:
            day = parse_query_date(as_of)

        try:
            records = self._filter(requested, date_range, day)
            if day is not None:
                return self._latest_per_asset(requested, records)
            return records
        except AppError:
            raise
        except Exception as exc:
            raise InternalFailureError() from exc

    def _filter(
        self,
        requested: list[str],
        date_range: Optional[tuple[datetime, datetime]],
        day: Optional[datetime],
    ) -> list[PriceRecord]:
        wanted = set(requested)
        records = [p for p in self._store.historical_prices if p.asset in wanted]

        if date_range is not None:
            start, end = date_range
            records = [p for p in records if in_range(p.timestamp, start, end)]
        elif day is not None:
            records = [p for p in records if same_calendar_day(p.timestamp, day)]

        return records

    def _latest_per_asset(
        self,
        requested: list[str],
        records: list[PriceRecord],
    ) -> list[PriceResult]:
        # Ties keep the record seen first in store order
        latest: dict[str, PriceRecord] = {}
        for record in records:
            current = latest.get(record.asset)
            if current is None or record.timestamp > current.timestamp:
                latest[record.asset] = record

        results: list[PriceResult] = []
        for asset in requested:
            if asset in latest:
                results.append(latest[asset])
            else:
                results.append(PricePlaceholder(id=self._id_factory(), asset=asset))
        return results
