"""Public interface for the Injective chain adapter."""

from __future__ import annotations

from .client import BankSupplyClient, InjectiveTokenListSource
from .schema import Coin, SupplyResponse, TokenListEntry, TokenListPayload
from .translator import parse_token, token_kind

__all__ = [
    "BankSupplyClient",
    "Coin",
    "InjectiveTokenListSource",
    "SupplyResponse",
    "TokenListEntry",
    "TokenListPayload",
    "parse_token",
    "token_kind",
]
