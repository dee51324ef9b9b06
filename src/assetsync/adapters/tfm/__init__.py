"""Public interface for the TFM IBC token metadata adapter."""

from __future__ import annotations

from .client import TfmClient
from .schema import IbcTokenPayload
from .translator import dump_ibc_token, parse_ibc_token, parse_ibc_tokens

__all__ = [
    "IbcTokenPayload",
    "TfmClient",
    "dump_ibc_token",
    "parse_ibc_token",
    "parse_ibc_tokens",
]
