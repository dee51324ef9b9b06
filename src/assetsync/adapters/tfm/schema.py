"""Pydantic models for the TFM IBC token metadata endpoint."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class IbcTokenPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str | None = None
    symbol: str | None = None
    contract_addr: str | None = Field(default=None, alias="contractAddr")
    decimals: int | None = None
    number_of_pools: int | None = Field(default=None, alias="numberOfPools")
    image_url: str | None = Field(default=None, alias="imageUrl")
    is_trading: bool | None = Field(default=None, alias="isTrading")
