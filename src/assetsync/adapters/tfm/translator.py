"""Turn TFM IBC token metadata into IBC token descriptors."""

from __future__ import annotations

from typing import TYPE_CHECKING

from assetsync.domain.model import UNKNOWN_TOKEN_NAME, IbcInfo, TokenDescriptor, TokenKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .schema import IbcTokenPayload

DEFAULT_IBC_DECIMALS = 18
IBC_DENOM_PREFIX = "ibc/"


def parse_ibc_token(payload: IbcTokenPayload) -> TokenDescriptor | None:
    """Return an IBC descriptor, or ``None`` when the entry carries no denom."""

    denom = (payload.contract_addr or "").strip()
    if not denom:
        return None
    symbol = payload.symbol or UNKNOWN_TOKEN_NAME
    return TokenDescriptor(
        denom=denom,
        symbol=symbol,
        name=payload.name or UNKNOWN_TOKEN_NAME,
        decimals=payload.decimals or DEFAULT_IBC_DECIMALS,
        coin_gecko_id="",
        token_kind=TokenKind.IBC,
        ibc=IbcInfo(
            channel_id="",
            base_denom=symbol,
            hash=denom.removeprefix(IBC_DENOM_PREFIX),
        ),
    )


def parse_ibc_tokens(payloads: Iterable[IbcTokenPayload]) -> list[TokenDescriptor]:
    """Translate and dedupe by denom, keeping the first occurrence."""

    seen: set[str] = set()
    descriptors: list[TokenDescriptor] = []
    for payload in payloads:
        descriptor = parse_ibc_token(payload)
        if descriptor is None or descriptor.denom in seen:
            continue
        seen.add(descriptor.denom)
        descriptors.append(descriptor)
    return descriptors


def dump_ibc_token(descriptor: TokenDescriptor) -> dict[str, object]:
    ibc = descriptor.ibc or IbcInfo(channel_id="", base_denom=descriptor.symbol)
    return {
        "name": descriptor.name,
        "denom": descriptor.denom,
        "decimals": descriptor.decimals,
        "coinGeckoId": descriptor.coin_gecko_id or "",
        "tokenType": str(descriptor.token_kind),
        "tokenVerification": "external",
        "ibc": {
            "hash": ibc.hash or "",
            "path": ibc.path or "",
            "channelId": ibc.channel_id,
            "symbol": descriptor.symbol,
            "baseDenom": ibc.base_denom,
            "isNative": False,
        },
    }
