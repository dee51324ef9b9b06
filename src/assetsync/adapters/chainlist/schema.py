"""Pydantic models describing the chainlist ``assets.json`` entries."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class AssetPayload(BaseModel):
    """One entry of the published asset list.

    Curated entries carry keys this model does not declare (images, IBC
    counter-party info, ...). ``extra="allow"`` keeps them so they survive a
    round trip unchanged.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    denom: str
    type: str
    origin_denom: str | None = None
    origin_chain: str | None = None
    symbol: str | None = None
    decimals: int | None = None
    description: str | None = None
    coin_gecko_id: str | None = Field(default=None, alias="coinGeckoId")
    enable: bool | None = None
    channel: str | None = None
    port: str | None = None
    contract: str | None = None


# entries are validated one by one so a single odd entry cannot sink the list
AssetListPayload = TypeAdapter(list[dict[str, Any]])
