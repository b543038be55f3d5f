"""Portfolio position domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PositionRecord:
    """
    Holding of one asset on one calendar day.

    `asset` holds the asset *id*; `as_of` is midnight UTC of the day.
    """

    id: int
    asset: str
    quantity: int
    as_of: datetime
    price: int
