"""Ports for persisting and proposing the merged asset list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from assetsync.domain.model import CatalogRecord
    from assetsync.domain.reconciliation import ReconciliationResult


@runtime_checkable
class CatalogWriter(Protocol):
    """Persists the merged asset list and returns where it was written."""

    def write(self, records: Sequence[CatalogRecord]) -> Path: ...


@dataclass(slots=True)
class PublicationResult:
    """Outcome of proposing the written asset list upstream."""

    branch: str
    pull_request_url: str | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@runtime_checkable
class ChangePublisher(Protocol):
    """Commits the written file and opens a change proposal for it."""

    def publish(self, path: Path, result: ReconciliationResult) -> PublicationResult: ...


__all__ = ["CatalogWriter", "ChangePublisher", "PublicationResult"]
