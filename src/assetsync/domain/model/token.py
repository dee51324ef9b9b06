"""Token descriptors resolved from the on-chain registry."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import UNKNOWN_TOKEN_NAME, TokenKind


@dataclass(frozen=True, slots=True)
class IbcInfo:
    channel_id: str
    base_denom: str
    hash: str | None = None
    path: str | None = None


@dataclass(frozen=True, slots=True)
class BridgeInfo:
    contract_address: str


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenDescriptor:
    """Metadata describing one on-chain denomination."""

    denom: str
    symbol: str
    decimals: int
    token_kind: TokenKind
    name: str = UNKNOWN_TOKEN_NAME
    coin_gecko_id: str | None = None
    ibc: IbcInfo | None = None
    bridge: BridgeInfo | None = None

    def __post_init__(self) -> None:
        if self.decimals < 0:
            raise ValueError(f"Token {self.denom!r} has negative decimals: {self.decimals}")

    @property
    def has_coin_gecko_id(self) -> bool:
        return bool(self.coin_gecko_id)
