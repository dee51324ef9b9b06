"""Fetch the previously published asset list."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from assetsync.adapters.http_resilience import ClientFactory, ResilientClient
from assetsync.domain.errors import SourceUnavailableError

from .schema import AssetListPayload
from .translator import parse_assets

if TYPE_CHECKING:
    from assetsync.config.http_resilience import ResilienceConfig
    from assetsync.domain.model import CatalogRecord

log = getLogger(__name__)


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class ChainlistClient:
    """Reads ``assets.json`` from a raw file URL."""

    url: str
    resilience: ResilienceConfig
    client_factory: ClientFactory = field(default=_default_client_factory)

    def fetch_assets(self) -> list[CatalogRecord]:
        return asyncio.run(self._fetch_assets_async())

    async def _fetch_assets_async(self) -> list[CatalogRecord]:
        try:
            async with self.client_factory(self.resilience) as client:
                response = await client.get(self.url)
                response.raise_for_status()
                entries = AssetListPayload.validate_json(response.content)
        except httpx.HTTPError as exc:
            raise SourceUnavailableError(f"Could not fetch asset list: {exc}") from exc
        except ValidationError as exc:
            msg = f"Asset list at {self.url} is not a JSON array of objects: {exc}"
            raise SourceUnavailableError(msg) from exc
        return parse_assets(entries)


@dataclass(slots=True)
class ChainlistAssetSource:
    """Asset list source that falls back to an empty list on any fetch failure."""

    client: ChainlistClient

    def __call__(self) -> list[CatalogRecord]:
        try:
            return self.client.fetch_assets()
        except SourceUnavailableError as exc:
            log.warning("Error fetching existing assets, starting from an empty list: %s", exc)
            return []

