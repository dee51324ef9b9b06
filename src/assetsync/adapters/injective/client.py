"""HTTP clients for Injective bank supply and token metadata."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from assetsync.adapters.http_resilience import ClientFactory, ResilientClient
from assetsync.config.chain import SUPPLY_PAGE_LIMIT
from assetsync.domain.errors import ResolverUnavailableError

from .schema import SupplyResponse, TokenListPayload
from .translator import parse_token

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from assetsync.config.http_resilience import ResilienceConfig
    from assetsync.domain.model import TokenDescriptor

log = getLogger(__name__)

SUPPLY_PATH = "/cosmos/bank/v1beta1/supply"


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class BankSupplyClient:
    """Lists every denomination with total supply through the LCD."""

    resilience: ResilienceConfig
    page_limit: int = SUPPLY_PAGE_LIMIT
    client_factory: ClientFactory = field(default=_default_client_factory)

    def __call__(self) -> list[str]:
        return asyncio.run(self._fetch_denoms_async())

    async def _fetch_denoms_async(self) -> list[str]:
        denoms: list[str] = []
        seen_keys: set[str] = set()
        next_key: str | None = None
        try:
            async with self.client_factory(self.resilience) as client:
                while True:
                    page = await self._request_page(client=client, key=next_key)
                    denoms.extend(coin.denom for coin in page.supply)
                    next_key = page.pagination.next_key if page.pagination else None
                    if next_key is None:
                        break
                    if next_key in seen_keys:
                        raise ResolverUnavailableError(
                            f"Bank supply pagination repeated key {next_key!r}"
                        )
                    seen_keys.add(next_key)
        except httpx.HTTPError as exc:
            raise ResolverUnavailableError(f"Could not fetch bank supply: {exc}") from exc
        except ValidationError as exc:
            raise ResolverUnavailableError(f"Malformed bank supply response: {exc}") from exc

        log.info("Fetched %s denoms from bank supply", len(denoms))
        return denoms

    async def _request_page(self, *, client: ResilientClient, key: str | None) -> SupplyResponse:
        params: dict[str, str | int] = {"pagination.limit": self.page_limit}
        if key is not None:
            params["pagination.key"] = key
        response = await client.get(SUPPLY_PATH, params=httpx.QueryParams(params))
        response.raise_for_status()
        return SupplyResponse.model_validate_json(response.content)


@dataclass(slots=True)
class InjectiveTokenListSource:
    """Token metadata backed by the published Injective token list.

    The list is downloaded once per instance and indexed by exact denom.
    """

    url: str
    resilience: ResilienceConfig
    client_factory: ClientFactory = field(default=_default_client_factory)
    _tokens: dict[str, TokenDescriptor] | None = field(default=None, init=False, repr=False)

    def lookup(self, denoms: Sequence[str]) -> Mapping[str, TokenDescriptor]:
        tokens = self._load()
        return {denom: tokens[denom] for denom in denoms if denom in tokens}

    def _load(self) -> dict[str, TokenDescriptor]:
        if self._tokens is None:
            self._tokens = asyncio.run(self._fetch_tokens_async())
        return self._tokens

    async def _fetch_tokens_async(self) -> dict[str, TokenDescriptor]:
        try:
            async with self.client_factory(self.resilience) as client:
                response = await client.get(self.url)
                response.raise_for_status()
                entries = TokenListPayload.validate_json(response.content)
        except httpx.HTTPError as exc:
            raise ResolverUnavailableError(f"Could not fetch token list: {exc}") from exc
        except ValidationError as exc:
            raise ResolverUnavailableError(f"Malformed token list at {self.url}: {exc}") from exc

        tokens: dict[str, TokenDescriptor] = {}
        for entry in entries:
            # first entry wins, the list occasionally repeats denoms
            tokens.setdefault(entry.denom, parse_token(entry))
        log.info("Loaded %s tokens from %s", len(tokens), self.url)
        return tokens
