"""Match keys for asset list reconciliation."""

from __future__ import annotations


def denom_key(denom: str) -> str:
    """Lowercase ``denom``; no other normalisation is applied."""
    return denom.lower()
