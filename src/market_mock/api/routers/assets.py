"""Asset catalogue API: GET /assets."""

from fastapi import APIRouter, Depends

from market_mock.api.deps import get_record_store
from market_mock.api.schemas import AssetResponse
from market_mock.domain.store import RecordStore

router = APIRouter(prefix="/assets", tags=["assets"])


@router.get("", response_model=list[AssetResponse])
def list_assets(store: RecordStore = Depends(get_record_store)):
    """List every asset served by the API."""
    return [AssetResponse.model_validate(asset) for asset in store.assets]
