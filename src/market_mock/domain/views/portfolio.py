"""View models for query engine outputs."""

from dataclasses import dataclass, field

from market_mock.domain.models import PositionRecord


@dataclass(frozen=True)
class PricePlaceholder:
    """Stand-in for an asset with no price on the requested day."""

    id: str
    asset: str
    price: int = 0


@dataclass(frozen=True)
class PortfolioSnapshot:
    """Positions held as of a date (or of the moment of the request)."""

    id: str
    as_of: str
    positions: tuple[PositionRecord, ...] = field(default_factory=tuple)
