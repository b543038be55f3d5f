"""Historical price domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PriceRecord:
    """
    A single point of an asset's price history.

    `asset` holds the asset *name*, not its id.
    """

    id: str
    asset: str
    price: int
    timestamp: datetime
