"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import AssetListSource, SupplySource, TokenMetadataSource
from .publishing import CatalogWriter, ChangePublisher, PublicationResult

__all__ = [
    "AssetListSource",
    "CatalogWriter",
    "ChangePublisher",
    "PublicationResult",
    "SupplySource",
    "TokenMetadataSource",
]
