from __future__ import annotations

import json
from typing import TYPE_CHECKING

import httpx
import pytest

from assetsync.adapters.chainlist import ChainlistAssetSource, ChainlistClient, dump_asset
from assetsync.domain.errors import SourceUnavailableError
from tests.support.http import make_client_factory

if TYPE_CHECKING:
    from collections.abc import Callable

    from assetsync.config.http_resilience import ResilienceConfig

ASSETS_URL = "https://raw.example/chain/injective/assets.json"


def _client(
    resilience: ResilienceConfig,
    handler: Callable[[httpx.Request], httpx.Response],
) -> ChainlistClient:
    return ChainlistClient(
        url=ASSETS_URL,
        resilience=resilience,
        client_factory=make_client_factory(handler),
    )


def test_fetch_assets_parses_records(
    resilience: ResilienceConfig,
    chainlist_payload: list[dict[str, object]],
) -> None:
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        return httpx.Response(200, json=chainlist_payload)

    records = _client(resilience, handler).fetch_assets()

    assert requested == [ASSETS_URL]
    assert [record.denom for record in records] == [
        str(payload["denom"]) for payload in chainlist_payload
    ]


def test_fetch_assets_raises_on_http_error(resilience: ResilienceConfig) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text="Not Found")

    with pytest.raises(SourceUnavailableError):
        _client(resilience, handler).fetch_assets()


@pytest.mark.parametrize(
    "body",
    [
        b"not json",
        json.dumps({"assets": []}).encode(),
        json.dumps([1, 2]).encode(),
    ],
)
def test_source_falls_back_to_empty_list_on_bad_payload(
    resilience: ResilienceConfig,
    body: bytes,
    caplog: pytest.LogCaptureFixture,
) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=body)

    source = ChainlistAssetSource(_client(resilience, handler))

    assert source() == []
    assert "Error fetching existing assets" in caplog.text


def test_source_keeps_odd_entries_beside_valid_ones(
    resilience: ResilienceConfig,
    chainlist_payload: list[dict[str, object]],
    caplog: pytest.LogCaptureFixture,
) -> None:
    odd_entry = {"denom": "inj", "type": "staking", "decimals": "eighteen"}
    body = [chainlist_payload[1], odd_entry]

    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=body)

    records = ChainlistAssetSource(_client(resilience, handler))()

    assert [record.denom for record in records] == [chainlist_payload[1]["denom"], "inj"]
    assert [dump_asset(record) for record in records] == body
    assert "verbatim" in caplog.text
    assert "Error fetching existing assets" not in caplog.text


def test_source_falls_back_to_empty_list_on_transport_error(
    resilience: ResilienceConfig,
) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    assert ChainlistAssetSource(_client(resilience, handler))() == []
