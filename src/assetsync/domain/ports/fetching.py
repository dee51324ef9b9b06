"""Ports for fetching the asset list and on-chain token data."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from assetsync.domain.model import CatalogRecord, TokenDescriptor


@runtime_checkable
class AssetListSource(Protocol):
    """Callable port returning the previously published asset list.

    Implementations degrade to an empty list when the list cannot be fetched.
    """

    def __call__(self) -> list[CatalogRecord]: ...


@runtime_checkable
class SupplySource(Protocol):
    """Callable port returning every denomination with on-chain supply."""

    def __call__(self) -> Sequence[str]: ...


@runtime_checkable
class TokenMetadataSource(Protocol):
    """Looks up token metadata for denominations.

    Denominations the source does not recognise are absent from the result.
    """

    def lookup(self, denoms: Sequence[str]) -> Mapping[str, TokenDescriptor]: ...


__all__ = ["AssetListSource", "SupplySource", "TokenMetadataSource"]
