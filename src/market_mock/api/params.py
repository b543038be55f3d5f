"""Query parameter parsing helpers."""

from typing import Optional


def split_asset_ids(raw: Optional[str]) -> list[str]:
    """Split a comma-separated asset parameter, dropping blank entries."""
    if not raw:
        return []
    return [token.strip() for token in raw.split(",") if token.strip()]
