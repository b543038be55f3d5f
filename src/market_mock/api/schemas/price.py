"""Pydantic schemas for price endpoints."""

from typing import Optional

from pydantic import BaseModel, Field

from market_mock.core.timezone import to_epoch_millis
from market_mock.domain.models import PriceRecord
from market_mock.services import PriceResult


class PriceResponse(BaseModel):
    """A price point; placeholders carry no timestamp and a zero price."""

    id: str
    asset: str = Field(..., description="Asset name")
    price: int
    timestamp: Optional[int] = Field(None, description="Milliseconds since the Unix epoch")

    @classmethod
    def from_result(cls, result: PriceResult) -> "PriceResponse":
        if isinstance(result, PriceRecord):
            return cls(
                id=result.id,
                asset=result.asset,
                price=result.price,
                timestamp=to_epoch_millis(result.timestamp),
            )
        return cls(id=result.id, asset=result.asset, price=result.price)
