"""Synthetic record source for offline/testing use."""

import random
import uuid
from datetime import date, datetime, timedelta
from typing import Callable, Optional, Sequence

import pytz
from dateutil.relativedelta import relativedelta

from market_mock.core.timezone import now_utc
from market_mock.domain.models import Asset, AssetType, PriceRecord, PositionRecord


_ASSETS: tuple[tuple[str, AssetType], ...] = (
    ("Bitcoin", AssetType.CRYPTO),
    ("Ethereum", AssetType.CRYPTO),
    ("Apple Inc.", AssetType.STOCK),
    ("Google", AssetType.STOCK),
    ("US Dollar", AssetType.FIAT),
    ("British Pound", AssetType.FIAT),
)

# Upper bounds for the random draws
_BASE_PRICE_RANGE = 10000
_PRICE_STEP_RANGE = 1000
_MAX_QUANTITY = 100
_MAX_POSITION_PRICE = 10


class SyntheticRecordSource:
    """
    Random record source with reproducible output.

    Prices: one point per asset every `interval_days` from `history_start`
    up to now. All assets share one base price drawn once.
    Positions: one record per asset per day over the trailing
    `window_months`, excluding today.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        clock: Callable[[], datetime] = now_utc,
        history_start: date = date(2023, 1, 1),
        interval_days: int = 7,
        window_months: int = 1,
    ):
        """Initialize with optional random seed for reproducibility."""
        self._rng = random.Random(seed)
        self._clock = clock
        self._history_start = history_start
        self._interval = timedelta(days=interval_days)
        self._window = relativedelta(months=window_months)

    def generate_assets(self) -> list[Asset]:
        """Return the fixed asset list with freshly drawn ids."""
        return [Asset(id=self._new_uuid(), name=name, type=asset_type) for name, asset_type in _ASSETS]

    def generate_prices(self, assets: Sequence[Asset]) -> list[PriceRecord]:
        """Return weekly prices per asset from history_start to now inclusive."""
        start = pytz.UTC.localize(datetime.combine(self._history_start, datetime.min.time()))
        end = self._clock()
        base_price = self._rng.random() * _BASE_PRICE_RANGE

        prices: list[PriceRecord] = []
        for asset in assets:
            current = start
            while current <= end:
                prices.append(
                    PriceRecord(
                        id=self._new_uuid(),
                        asset=asset.name,
                        price=int(base_price + self._rng.random() * _PRICE_STEP_RANGE),
                        timestamp=current,
                    )
                )
                current += self._interval
        return prices

    def generate_positions(self, assets: Sequence[Asset]) -> list[PositionRecord]:
        """Return one position per asset per day for the trailing window."""
        today = self._clock().astimezone(pytz.UTC).date()
        day = today - self._window

        positions: list[PositionRecord] = []
        index = 1
        while day < today:
            as_of = pytz.UTC.localize(datetime.combine(day, datetime.min.time()))
            for asset in assets:
                positions.append(
                    PositionRecord(
                        id=index,
                        asset=asset.id,
                        quantity=self._rng.randint(1, _MAX_QUANTITY),
                        as_of=as_of,
                        price=self._rng.randint(1, _MAX_POSITION_PRICE),
                    )
                )
                index += 1
            day += timedelta(days=1)
        return positions

    def _new_uuid(self) -> str:
        return str(uuid.UUID(int=self._rng.getrandbits(128), version=4))
