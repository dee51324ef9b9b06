from __future__ import annotations

import pytest

from assetsync.adapters.injective import TokenListEntry, TokenListPayload, parse_token, token_kind
from assetsync.domain.model import BridgeInfo, IbcInfo, TokenKind


@pytest.mark.parametrize(
    ("token_type", "expected"),
    [
        ("native", TokenKind.NATIVE),
        ("tokenFactory", TokenKind.TOKEN_FACTORY),
        ("ibc", TokenKind.IBC),
        ("erc20", TokenKind.ERC20),
        ("cw20", TokenKind.UNKNOWN),
        ("insuranceFund", TokenKind.UNKNOWN),
        (None, TokenKind.UNKNOWN),
    ],
)
def test_token_kind_mapping(token_type: str | None, expected: TokenKind) -> None:
    assert token_kind(token_type) is expected


def test_parse_token_list(token_list_payload: list[dict[str, object]]) -> None:
    entries = TokenListPayload.validate_python(token_list_payload)
    inj, atom, usdt, ninja, cw20, usdc = (parse_token(entry) for entry in entries)

    assert inj.token_kind is TokenKind.NATIVE
    assert inj.coin_gecko_id == "injective-protocol"

    assert atom.ibc == IbcInfo(
        channel_id="channel-1",
        base_denom="uatom",
        hash="C4CFF46FD6DE35CA4CF4CE031E643C8FDC9BA4B99AE598E9B0ED98FE3A2319F9",
        path="transfer/channel-1",
    )
    assert atom.name == "Cosmos Hub"

    assert usdt.bridge == BridgeInfo(contract_address="0xdAC17F958D2ee523a2206206994597C13D831ec7")

    assert ninja.token_kind is TokenKind.TOKEN_FACTORY
    assert ninja.coin_gecko_id is None
    assert not ninja.has_coin_gecko_id

    assert cw20.token_kind is TokenKind.UNKNOWN
    assert usdc.decimals == 0
    assert usdc.ibc is not None
    assert usdc.ibc.channel_id == "channel-84"


def test_bridge_contract_falls_back_to_peggy_denom() -> None:
    entry = TokenListEntry.model_validate(
        {"denom": "peggy0xABCDEF", "symbol": "ABC", "decimals": 18, "tokenType": "erc20"}
    )

    descriptor = parse_token(entry)

    assert descriptor.bridge == BridgeInfo(contract_address="0xABCDEF")


def test_missing_name_defaults_to_unknown() -> None:
    entry = TokenListEntry.model_validate(
        {"denom": "factory/inj1x/abc", "symbol": "ABC", "decimals": 6, "tokenType": "tokenFactory"}
    )

    assert parse_token(entry).name == "Unknown"
