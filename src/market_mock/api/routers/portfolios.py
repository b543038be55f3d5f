"""Portfolio API: GET /portfolios."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from market_mock.api.deps import get_portfolio_engine
from market_mock.api.schemas import PortfolioResponse, ErrorResponse
from market_mock.services import PortfolioQueryEngine

router = APIRouter(prefix="/portfolios", tags=["portfolios"])


@router.get(
    "",
    response_model=PortfolioResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_portfolio(
    as_of: Optional[str] = Query(None, alias="asOf", description="Only positions held on this day"),
    engine: PortfolioQueryEngine = Depends(get_portfolio_engine),
):
    """Return a portfolio snapshot, optionally narrowed to one day."""
    snapshot = engine.query_portfolio(as_of=as_of)
    return PortfolioResponse.from_snapshot(snapshot)
