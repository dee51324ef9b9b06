"""Application service for refreshing the published asset list."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from .reconciliation import ReconciliationResult, reconcile
from .resolution import resolve_descriptors

if TYPE_CHECKING:
    from pathlib import Path

    from .ports.fetching import AssetListSource, SupplySource, TokenMetadataSource
    from .ports.publishing import CatalogWriter, ChangePublisher, PublicationResult

log = getLogger(__name__)


@dataclass(slots=True)
class SyncAssetListResult:
    """Outcome of an asset list sync run."""

    existing: int
    supply: int
    resolved: int
    reconciliation: ReconciliationResult
    output_path: Path
    publication: PublicationResult | None = None

    @property
    def appended(self) -> int:
        return len(self.reconciliation.appended)

    @property
    def backfilled(self) -> int:
        return len(self.reconciliation.backfilled)


def sync_asset_list(
    *,
    asset_source: AssetListSource,
    supply_source: SupplySource,
    metadata_source: TokenMetadataSource,
    writer: CatalogWriter,
    publisher: ChangePublisher | None = None,
    require_coingecko_id: bool = False,
) -> SyncAssetListResult:
    """Fetch, reconcile and write the asset list, then optionally propose it.

    The existing list is loaded before anything else and never modified in
    place. Publication happens strictly after the merged list is on disk; a
    failed proposal is reported in the result rather than undoing the write.
    """

    existing = asset_source()
    log.info("Loaded %s existing assets", len(existing))

    denoms = supply_source()
    descriptors = resolve_descriptors(
        denoms,
        source=metadata_source,
        require_coingecko_id=require_coingecko_id,
    )

    reconciliation = reconcile(existing, descriptors)
    output_path = writer.write(reconciliation.records)
    log.info("Wrote %s assets to %s", len(reconciliation.records), output_path)

    publication: PublicationResult | None = None
    if publisher is not None:
        if reconciliation.changed:
            publication = publisher.publish(output_path, reconciliation)
        else:
            log.info("Asset list unchanged; skipping publication")

    return SyncAssetListResult(
        existing=len(existing),
        supply=len(denoms),
        resolved=len(descriptors),
        reconciliation=reconciliation,
        output_path=output_path,
        publication=publication,
    )
