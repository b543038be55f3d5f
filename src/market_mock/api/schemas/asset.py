"""Pydantic schemas for asset endpoints."""

from pydantic import BaseModel

from market_mock.domain.models import AssetType


class AssetResponse(BaseModel):
    """Response schema for a single asset."""

    model_config = {"from_attributes": True}

    id: str
    name: str
    type: AssetType
