"""Domain model for tokens and asset list records."""

from __future__ import annotations

from .catalog import CatalogRecord
from .enums import (
    BRIDGE_ORIGIN_CHAIN,
    HOME_CHAIN,
    IBC_TRANSFER_PORT,
    UNKNOWN_TOKEN_NAME,
    CatalogType,
    TokenKind,
)
from .token import BridgeInfo, IbcInfo, TokenDescriptor

__all__ = [
    "BRIDGE_ORIGIN_CHAIN",
    "HOME_CHAIN",
    "IBC_TRANSFER_PORT",
    "UNKNOWN_TOKEN_NAME",
    "BridgeInfo",
    "CatalogRecord",
    "CatalogType",
    "IbcInfo",
    "TokenDescriptor",
    "TokenKind",
]
