"""Fold freshly resolved tokens into the published asset list.

The fold is strictly left to right. Each descriptor only sees the records
produced by the steps before it, so when the same denom shows up twice in one
batch the first occurrence creates the record and the second is treated as a
duplicate of it.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from assetsync.domain.classification import classify

from .normalize import denom_key
from .records import record_from_descriptor

if TYPE_CHECKING:
    from collections.abc import Iterable

    from assetsync.domain.model import CatalogRecord, TokenDescriptor

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReconciliationResult:
    """Merged asset list plus what changed, in processing order."""

    records: tuple[CatalogRecord, ...]
    appended: tuple[str, ...] = ()
    backfilled: tuple[str, ...] = ()

    @property
    def changed(self) -> bool:
        return bool(self.appended or self.backfilled)


def reconcile(
    existing: Iterable[CatalogRecord],
    descriptors: Iterable[TokenDescriptor],
) -> ReconciliationResult:
    """Merge ``descriptors`` into ``existing`` without touching curated fields.

    Matched records only ever gain a missing coinGeckoId. Unmatched descriptors
    become new records appended after everything that was already there.
    Raises :class:`~assetsync.domain.errors.ClassificationGapError` for a
    descriptor whose kind has no mapping.
    """

    records: list[CatalogRecord] = list(existing)
    index_by_key: dict[str, int] = {}
    for position, record in enumerate(records):
        index_by_key.setdefault(denom_key(record.denom), position)

    appended: list[str] = []
    backfilled: list[str] = []

    for descriptor in descriptors:
        # reject unmapped kinds even when the denom is already listed
        classify(descriptor.token_kind, denom=descriptor.denom)

        key = denom_key(descriptor.denom)
        position = index_by_key.get(key)

        if position is None:
            records.append(record_from_descriptor(descriptor))
            index_by_key[key] = len(records) - 1
            appended.append(descriptor.denom)
            continue

        current = records[position]
        coin_gecko_id = descriptor.coin_gecko_id
        if current.has_coin_gecko_id or not coin_gecko_id:
            continue

        log.debug(
            "Backfilling coinGeckoId for %s (curated=%s): %s",
            current.denom,
            current.is_curated,
            coin_gecko_id,
        )
        records[position] = current.with_coin_gecko_id(coin_gecko_id)
        backfilled.append(current.denom)

    log.info(
        "Reconciled asset list: records=%s, appended=%s, backfilled=%s",
        len(records),
        len(appended),
        len(backfilled),
    )
    return ReconciliationResult(
        records=tuple(records),
        appended=tuple(appended),
        backfilled=tuple(backfilled),
    )
