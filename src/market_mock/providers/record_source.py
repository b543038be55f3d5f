"""Record source protocol and store construction."""

from typing import Protocol, Sequence

from market_mock.domain.models import Asset, PriceRecord, PositionRecord
from market_mock.domain.store import RecordStore


class RecordSource(Protocol):
    """
    Protocol for sources that populate the record store at startup.

    Implementations must be deterministic for a given seed so that tests
    and demos can reproduce a store exactly.
    """

    def generate_assets(self) -> list[Asset]:
        """Return the fixed list of assets served by the API."""
        ...

    def generate_prices(self, assets: Sequence[Asset]) -> list[PriceRecord]:
        """Return the price history for the given assets, grouped by asset."""
        ...

    def generate_positions(self, assets: Sequence[Asset]) -> list[PositionRecord]:
        """Return daily positions for the given assets, grouped by day."""
        ...


def build_record_store(source: RecordSource) -> RecordStore:
    """Populate a RecordStore from a RecordSource."""
    assets = source.generate_assets()
    return RecordStore.from_records(
        assets=assets,
        historical_prices=source.generate_prices(assets),
        positions=source.generate_positions(assets),
    )
