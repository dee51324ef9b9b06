"""Public interface for the chainlist asset list adapter."""

from __future__ import annotations

from .client import ChainlistAssetSource, ChainlistClient
from .schema import AssetListPayload, AssetPayload
from .translator import dump_asset, dump_assets, parse_asset, parse_assets

__all__ = [
    "AssetListPayload",
    "AssetPayload",
    "ChainlistAssetSource",
    "ChainlistClient",
    "dump_asset",
    "dump_assets",
    "parse_asset",
    "parse_assets",
]
