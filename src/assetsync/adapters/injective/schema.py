"""Pydantic models for the Cosmos bank LCD and the Injective token list."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class InjectiveBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Coin(InjectiveBaseModel):
    denom: str
    amount: str


class Pagination(InjectiveBaseModel):
    next_key: str | None = None
    total: int | None = None

    _normalize_next_key = field_validator("next_key", mode="before")(_blank_to_none)


class SupplyResponse(InjectiveBaseModel):
    supply: list[Coin]
    pagination: Pagination | None = None


class TokenListEntry(InjectiveBaseModel):
    denom: str
    name: str | None = None
    symbol: str | None = None
    decimals: int = Field(default=0, ge=0)
    coin_gecko_id: str | None = Field(default=None, alias="coinGeckoId")
    token_type: str | None = Field(default=None, alias="tokenType")
    address: str | None = None
    channel_id: str | None = Field(default=None, alias="channelId")
    base_denom: str | None = Field(default=None, alias="baseDenom")
    hash: str | None = None
    path: str | None = None

    _normalize_blank = field_validator(
        "name", "symbol", "coin_gecko_id", "token_type", "address", mode="before"
    )(_blank_to_none)

    @field_validator("decimals", mode="before")
    @classmethod
    def _null_decimals(cls, value: object) -> object:
        return 0 if value is None else value


TokenListPayload = TypeAdapter(list[TokenListEntry])
