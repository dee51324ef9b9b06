"""Translate asset list entries to and from domain records.

Entries read from the published list are written back key for key, in their
original order; only a backfilled ``coinGeckoId`` differs.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from assetsync.domain.model import CatalogRecord

from .schema import AssetPayload

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

log = getLogger(__name__)

COIN_GECKO_ID_KEY = "coinGeckoId"


def _text(entry: Mapping[str, object], key: str) -> str | None:
    value = entry.get(key)
    return value if isinstance(value, str) else None


def _opaque_asset(entry: Mapping[str, object]) -> CatalogRecord:
    """Record for an entry our schema rejects; only its identity is interpreted."""

    return CatalogRecord(
        denom=_text(entry, "denom") or "",
        type=_text(entry, "type") or "",
        origin_chain=_text(entry, "origin_chain"),
        coin_gecko_id=_text(entry, COIN_GECKO_ID_KEY),
        source_entry=dict(entry),
    )


def parse_asset(entry: Mapping[str, object]) -> CatalogRecord:
    try:
        payload = AssetPayload.model_validate(entry)
    except ValidationError as exc:
        log.warning(
            "Keeping asset list entry %r verbatim (%s validation errors)",
            entry.get("denom"),
            exc.error_count(),
        )
        return _opaque_asset(entry)

    return CatalogRecord(
        denom=payload.denom,
        type=payload.type,
        origin_denom=payload.origin_denom,
        origin_chain=payload.origin_chain,
        symbol=payload.symbol,
        decimals=payload.decimals,
        description=payload.description,
        coin_gecko_id=payload.coin_gecko_id,
        enable=payload.enable,
        channel=payload.channel,
        port=payload.port,
        contract=payload.contract,
        extra=dict(payload.model_extra or {}),
        source_entry=dict(entry),
    )


def parse_assets(entries: Iterable[Mapping[str, object]]) -> list[CatalogRecord]:
    return [parse_asset(entry) for entry in entries]


def dump_asset(record: CatalogRecord) -> dict[str, object]:
    """Return the JSON shape of ``record``.

    Records read from the list reproduce their source entry, ``null`` values
    included. New records omit the optional fields they do not set.
    """

    if record.source_entry is not None:
        dumped = dict(record.source_entry)
        if record.coin_gecko_id and record.coin_gecko_id != dumped.get(COIN_GECKO_ID_KEY):
            # assignment keeps the key where it was
            dumped[COIN_GECKO_ID_KEY] = record.coin_gecko_id
        return dumped

    payload = AssetPayload(
        denom=record.denom,
        type=str(record.type),
        origin_denom=record.origin_denom,
        origin_chain=record.origin_chain,
        symbol=record.symbol,
        decimals=record.decimals,
        description=record.description,
        coin_gecko_id=record.coin_gecko_id,
        enable=record.enable,
        channel=record.channel,
        port=record.port,
        contract=record.contract,
        **record.extra,
    )
    return payload.model_dump(by_alias=True, exclude_none=True)


def dump_assets(records: Iterable[CatalogRecord]) -> list[dict[str, object]]:
    return [dump_asset(record) for record in records]
