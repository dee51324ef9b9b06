"""Records of the published asset list."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True, kw_only=True)
class CatalogRecord:
    """One asset list entry.

    ``type`` is kept as a plain string: curated lists use tags beyond
    :class:`~assetsync.domain.model.enums.CatalogType` and those are carried
    through untouched. Keys the model does not know about live in ``extra``.
    ``source_entry`` is the entry exactly as read from the published list;
    records built from on-chain tokens have none.
    """

    denom: str
    type: str
    origin_denom: str | None = None
    origin_chain: str | None = None
    symbol: str | None = None
    decimals: int | None = None
    description: str | None = None
    coin_gecko_id: str | None = None
    enable: bool | None = None
    channel: str | None = None
    port: str | None = None
    contract: str | None = None
    extra: Mapping[str, object] = field(default_factory=dict)
    source_entry: Mapping[str, object] | None = field(default=None, repr=False)

    @property
    def is_curated(self) -> bool:
        """Manually added entries carry an ``origin_chain`` provenance marker."""
        return bool(self.origin_chain)

    @property
    def has_coin_gecko_id(self) -> bool:
        return bool(self.coin_gecko_id)

    def with_coin_gecko_id(self, coin_gecko_id: str) -> CatalogRecord:
        return replace(self, coin_gecko_id=coin_gecko_id)
