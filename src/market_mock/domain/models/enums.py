"""Enumerations for domain models."""

from enum import Enum


class AssetType(str, Enum):
    """Asset classes served by the API."""

    CRYPTO = "crypto"
    STOCK = "stock"
    FIAT = "fiat"
