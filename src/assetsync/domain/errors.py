"""Errors raised while syncing the asset list."""

from __future__ import annotations


class AssetSyncError(RuntimeError):
    """Base class for asset sync failures."""


class SourceUnavailableError(AssetSyncError):
    """The previously published asset list could not be fetched or parsed."""


class ResolverUnavailableError(AssetSyncError):
    """On-chain supply or token metadata could not be fetched."""


class ClassificationGapError(AssetSyncError):
    """A token kind has no asset list mapping."""

    def __init__(self, denom: str, kind: str, *, reason: str | None = None) -> None:
        message = f"Cannot classify token {denom!r} of kind {kind!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.denom = denom
        self.kind = kind


class PublishError(AssetSyncError):
    """Writing, committing, pushing or proposing the asset list failed."""
