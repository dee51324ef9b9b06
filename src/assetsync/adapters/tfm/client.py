"""HTTP client for the TFM IBC token metadata API."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import TypeAdapter, ValidationError

from assetsync.adapters.http_resilience import ClientFactory, ResilientClient
from assetsync.domain.errors import ResolverUnavailableError

from .schema import IbcTokenPayload

if TYPE_CHECKING:
    from assetsync.config.http_resilience import ResilienceConfig

log = getLogger(__name__)

_IbcTokenList = TypeAdapter(list[IbcTokenPayload])


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class TfmClient:
    url: str
    resilience: ResilienceConfig
    client_factory: ClientFactory = field(default=_default_client_factory)

    def fetch_ibc_tokens(self) -> list[IbcTokenPayload] | None:
        """Return the token entries, or ``None`` when the payload is not a list."""
        return asyncio.run(self._fetch_async())

    async def _fetch_async(self) -> list[IbcTokenPayload] | None:
        try:
            async with self.client_factory(self.resilience) as client:
                response = await client.get(self.url)
                response.raise_for_status()
                payload = response.json()
                if not isinstance(payload, list):
                    log.warning("TFM returned %s instead of a token list", type(payload).__name__)
                    return None
                return _IbcTokenList.validate_python(payload)
        except httpx.HTTPError as exc:
            raise ResolverUnavailableError(f"Could not fetch IBC token metadata: {exc}") from exc
        except (ValueError, ValidationError) as exc:
            raise ResolverUnavailableError(f"Malformed IBC token metadata: {exc}") from exc
