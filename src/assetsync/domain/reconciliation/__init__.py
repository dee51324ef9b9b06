"""Reconciliation of on-chain tokens with the curated asset list."""

from __future__ import annotations

from .engine import ReconciliationResult, reconcile
from .normalize import denom_key
from .records import record_from_descriptor

__all__ = [
    "ReconciliationResult",
    "denom_key",
    "reconcile",
    "record_from_descriptor",
]
