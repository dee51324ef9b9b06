"""Translate Injective token list entries into token descriptors."""

from __future__ import annotations

from logging import getLogger

from assetsync.domain.model import (
    UNKNOWN_TOKEN_NAME,
    BridgeInfo,
    IbcInfo,
    TokenDescriptor,
    TokenKind,
)

from .schema import TokenListEntry

log = getLogger(__name__)

PEGGY_PREFIX = "peggy"

TOKEN_KINDS: dict[str, TokenKind] = {
    "native": TokenKind.NATIVE,
    "tokenFactory": TokenKind.TOKEN_FACTORY,
    "ibc": TokenKind.IBC,
    "erc20": TokenKind.ERC20,
}


def token_kind(token_type: str | None) -> TokenKind:
    """Map the list's ``tokenType``; anything we cannot publish is ``unknown``."""
    if token_type is None:
        return TokenKind.UNKNOWN
    return TOKEN_KINDS.get(token_type, TokenKind.UNKNOWN)


def bridge_contract(entry: TokenListEntry) -> str | None:
    if entry.address and entry.address.startswith("0x"):
        return entry.address
    if entry.denom.startswith(f"{PEGGY_PREFIX}0x"):
        return entry.denom.removeprefix(PEGGY_PREFIX)
    return None


def parse_token(entry: TokenListEntry) -> TokenDescriptor:
    kind = token_kind(entry.token_type)

    ibc: IbcInfo | None = None
    bridge: BridgeInfo | None = None
    if kind is TokenKind.IBC:
        ibc = IbcInfo(
            channel_id=entry.channel_id or "",
            base_denom=entry.base_denom or "",
            hash=entry.hash,
            path=entry.path,
        )
    elif kind is TokenKind.ERC20:
        contract = bridge_contract(entry)
        if contract is None:
            log.warning("Bridged token %s has no contract address", entry.denom)
        else:
            bridge = BridgeInfo(contract_address=contract)

    return TokenDescriptor(
        denom=entry.denom,
        symbol=entry.symbol or "",
        name=entry.name or UNKNOWN_TOKEN_NAME,
        decimals=entry.decimals,
        coin_gecko_id=entry.coin_gecko_id,
        token_kind=kind,
        ibc=ibc,
        bridge=bridge,
    )
