"""In-memory record store shared by the query engines."""

from dataclasses import dataclass, field
from typing import Iterable

from market_mock.domain.models import Asset, PriceRecord, PositionRecord


@dataclass(frozen=True)
class RecordStore:
    """
    Immutable collection of assets, price history and positions.

    Built once at startup; every request reads from the same instance.
    Record order is insertion order and is preserved by all queries.
    """

    assets: tuple[Asset, ...] = field(default_factory=tuple)
    historical_prices: tuple[PriceRecord, ...] = field(default_factory=tuple)
    positions: tuple[PositionRecord, ...] = field(default_factory=tuple)

    @classmethod
    def from_records(
        cls,
        assets: Iterable[Asset],
        historical_prices: Iterable[PriceRecord],
        positions: Iterable[PositionRecord],
    ) -> "RecordStore":
        """Build a store, checking that records only reference known assets."""
        assets = tuple(assets)
        historical_prices = tuple(historical_prices)
        positions = tuple(positions)

        names = {a.name for a in assets}
        ids = {a.id for a in assets}
        for price in historical_prices:
            if price.asset not in names:
                raise ValueError(f"Price {price.id} references unknown asset name: {price.asset}")
        for position in positions:
            if position.asset not in ids:
                raise ValueError(f"Position {position.id} references unknown asset id: {position.asset}")

        return cls(assets=assets, historical_prices=historical_prices, positions=positions)

