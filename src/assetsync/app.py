"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from assetsync.adapters.chainlist import ChainlistAssetSource, ChainlistClient
from assetsync.adapters.filesystem import JsonCatalogFile, write_json
from assetsync.adapters.git import GitWorkspace
from assetsync.adapters.github import GitHubPublisher, GitHubPullRequests
from assetsync.adapters.injective import BankSupplyClient, InjectiveTokenListSource
from assetsync.adapters.tfm import TfmClient, dump_ibc_token, parse_ibc_tokens
from assetsync.config import get_chain_config, get_publish_config, get_storage_config
from assetsync.domain.sync import SyncAssetListResult, sync_asset_list

if TYPE_CHECKING:
    from pathlib import Path

    from assetsync.config import ChainConfig, StorageConfig
    from assetsync.domain.ports import (
        AssetListSource,
        CatalogWriter,
        ChangePublisher,
        SupplySource,
        TokenMetadataSource,
    )

log = getLogger(__name__)


def build_publisher(*, token: str | None = None, branch: str | None = None) -> GitHubPublisher:
    """Build the git + GitHub publisher; fails fast when no access token is configured."""

    config = get_publish_config(token=token)
    return GitHubPublisher(
        workspace=GitWorkspace(repo_dir=config.repo_dir),
        pull_requests=GitHubPullRequests(config=config),
        branch=branch,
    )


def sync_assets(
    *,
    output_path: Path | None = None,
    require_coingecko_id: bool = False,
    publish: bool = False,
    token: str | None = None,
    branch: str | None = None,
    chain: ChainConfig | None = None,
    storage: StorageConfig | None = None,
    asset_source: AssetListSource | None = None,
    supply_source: SupplySource | None = None,
    metadata_source: TokenMetadataSource | None = None,
    writer: CatalogWriter | None = None,
    publisher: ChangePublisher | None = None,
) -> SyncAssetListResult:
    """Refresh the asset list using the configured adapters."""

    chain_config = chain or get_chain_config()
    storage_config = storage or get_storage_config()

    effective_publisher = publisher
    if publish and effective_publisher is None:
        # token problems surface before any network traffic
        effective_publisher = build_publisher(token=token, branch=branch)

    log.info(
        "Starting asset sync: asset_list=%s, require_coingecko_id=%s, publish=%s",
        chain_config.asset_list_url,
        require_coingecko_id,
        publish,
    )
    result = sync_asset_list(
        asset_source=asset_source
        or ChainlistAssetSource(
            ChainlistClient(url=chain_config.asset_list_url, resilience=chain_config.raw_content)
        ),
        supply_source=supply_source
        or BankSupplyClient(resilience=chain_config.lcd, page_limit=chain_config.supply_page_limit),
        metadata_source=metadata_source
        or InjectiveTokenListSource(
            url=chain_config.token_list_url, resilience=chain_config.raw_content
        ),
        writer=writer or JsonCatalogFile(output_path or storage_config.assets_output_path),
        publisher=effective_publisher if publish else None,
        require_coingecko_id=require_coingecko_id,
    )

    log.info(
        "Finished asset sync: existing=%s, supply=%s, resolved=%s, appended=%s, backfilled=%s",
        result.existing,
        result.supply,
        result.resolved,
        result.appended,
        result.backfilled,
    )
    return result


def export_ibc_tokens(
    *,
    output_path: Path | None = None,
    chain: ChainConfig | None = None,
    storage: StorageConfig | None = None,
    client: TfmClient | None = None,
) -> int | None:
    """Snapshot TFM IBC token metadata as descriptors; returns the count written."""

    chain_config = chain or get_chain_config()
    storage_config = storage or get_storage_config()
    active_client = client or TfmClient(
        url=chain_config.ibc_metadata_url, resilience=chain_config.raw_content
    )

    payloads = active_client.fetch_ibc_tokens()
    if payloads is None:
        return None

    descriptors = parse_ibc_tokens(payloads)
    path = write_json(
        output_path or storage_config.ibc_output_path,
        [dump_ibc_token(descriptor) for descriptor in descriptors],
    )
    log.info("Wrote %s IBC tokens to %s", len(descriptors), path)
    return len(descriptors)
