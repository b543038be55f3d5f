"""Pydantic schemas for portfolio endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from market_mock.core.timezone import isoformat_utc
from market_mock.domain.models import PositionRecord
from market_mock.domain.views import PortfolioSnapshot


class PositionResponse(BaseModel):
    """A single position: asset id, quantity and unit price on a day."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    asset: str = Field(..., description="Asset id")
    quantity: int
    as_of: str = Field(..., alias="asOf")
    price: int

    @classmethod
    def from_record(cls, record: PositionRecord) -> "PositionResponse":
        return cls(
            id=record.id,
            asset=record.asset,
            quantity=record.quantity,
            as_of=isoformat_utc(record.as_of),
            price=record.price,
        )


class PortfolioResponse(BaseModel):
    """Portfolio snapshot: positions held as of a date."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    as_of: str = Field(..., alias="asOf")
    positions: list[PositionResponse]

    @classmethod
    def from_snapshot(cls, snapshot: PortfolioSnapshot) -> "PortfolioResponse":
        return cls(
            id=snapshot.id,
            as_of=snapshot.as_of,
            positions=[PositionResponse.from_record(p) for p in snapshot.positions],
        )
