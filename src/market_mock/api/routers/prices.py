"""Price history API: GET /prices."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from market_mock.api.deps import get_price_engine
from market_mock.api.params import split_asset_ids
from market_mock.api.schemas import PriceResponse, ErrorResponse
from market_mock.services import PriceQueryEngine

router = APIRouter(prefix="/prices", tags=["prices"])


@router.get(
    "",
    response_model=list[PriceResponse],
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_prices(
    assets: Optional[str] = Query(None, description="Comma-separated asset names (required)"),
    as_of: Optional[str] = Query(None, alias="asOf", description="Latest price per asset on this day"),
    start: Optional[str] = Query(None, alias="from", description="Range start, inclusive"),
    end: Optional[str] = Query(None, alias="to", description="Range end, inclusive"),
    engine: PriceQueryEngine = Depends(get_price_engine),
):
    """
    Return price history for the requested assets.

    - assets: required, e.g. `Bitcoin,Ethereum`.
    - from/to: only applied when both are given; takes precedence over asOf.
    - asOf: one entry per requested asset, the latest price that day
      (price 0 with no timestamp when there is none).
    """
    results = engine.query_prices(
        split_asset_ids(assets),
        as_of=as_of,
        start=start,
        end=end,
    )
    return [PriceResponse.from_result(r) for r in results]
