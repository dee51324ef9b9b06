"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class TokenKind(StrEnum):
    """How a token reached the chain, as reported by the metadata source."""

    NATIVE = "native"
    TOKEN_FACTORY = "tokenFactory"
    IBC = "ibc"
    ERC20 = "erc20"
    UNKNOWN = "unknown"


class CatalogType(StrEnum):
    """``type`` tag written to asset list records."""

    NATIVE = "native"
    IBC = "ibc"
    BRIDGE = "bridge"


HOME_CHAIN = "injective"
BRIDGE_ORIGIN_CHAIN = "ethereum"
IBC_TRANSFER_PORT = "transfer"
UNKNOWN_TOKEN_NAME = "Unknown"
