"""Build asset list records for newly discovered tokens."""

from __future__ import annotations

from typing import TYPE_CHECKING

from assetsync.domain.classification import (
    classify,
    origin_chain,
    origin_denom,
    type_specific_fields,
)
from assetsync.domain.model import CatalogRecord

if TYPE_CHECKING:
    from assetsync.domain.model import TokenDescriptor


def record_from_descriptor(descriptor: TokenDescriptor) -> CatalogRecord:
    """Translate ``descriptor`` into a fresh, auto-generated asset list record."""

    return CatalogRecord(
        denom=descriptor.denom,
        type=classify(descriptor.token_kind, denom=descriptor.denom),
        origin_denom=origin_denom(descriptor),
        origin_chain=origin_chain(descriptor),
        symbol=descriptor.symbol,
        decimals=descriptor.decimals,
        description=descriptor.name,
        coin_gecko_id=descriptor.coin_gecko_id,
        **type_specific_fields(descriptor),
    )
