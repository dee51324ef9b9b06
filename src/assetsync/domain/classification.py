"""Map token kinds onto asset list record fields.

Every function here is total over the admitted kinds (native, tokenFactory,
ibc, erc20). :func:`classify` rejects anything else with
:class:`ClassificationGapError`; there is no fallback type tag. The field
helpers fall through to neutral values for other kinds.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypedDict

from .errors import ClassificationGapError
from .model import (
    BRIDGE_ORIGIN_CHAIN,
    HOME_CHAIN,
    IBC_TRANSFER_PORT,
    CatalogType,
    TokenKind,
)

if TYPE_CHECKING:
    from .model import BridgeInfo, IbcInfo, TokenDescriptor


class TypeSpecificFields(TypedDict, total=False):
    enable: bool
    channel: str
    port: str
    contract: str


_CATALOG_TYPE_MAP: dict[TokenKind, CatalogType] = {
    TokenKind.NATIVE: CatalogType.NATIVE,
    TokenKind.TOKEN_FACTORY: CatalogType.NATIVE,
    TokenKind.IBC: CatalogType.IBC,
    TokenKind.ERC20: CatalogType.BRIDGE,
}


def _gap(descriptor: TokenDescriptor, *, reason: str | None = None) -> ClassificationGapError:
    return ClassificationGapError(descriptor.denom, str(descriptor.token_kind), reason=reason)


def classify(kind: TokenKind, *, denom: str = "") -> CatalogType:
    """Return the asset list ``type`` tag for ``kind``."""

    catalog_type = _CATALOG_TYPE_MAP.get(kind)
    if catalog_type is None:
        raise ClassificationGapError(denom, str(kind))
    return catalog_type


def origin_chain(descriptor: TokenDescriptor) -> str:
    kind = descriptor.token_kind
    if kind is TokenKind.IBC:
        # the token list names IBC assets after their source chain
        return descriptor.name.lower()
    if kind is TokenKind.ERC20:
        return BRIDGE_ORIGIN_CHAIN
    if kind in (TokenKind.NATIVE, TokenKind.TOKEN_FACTORY):
        return HOME_CHAIN
    # unknown provenance
    return ""


def origin_denom(descriptor: TokenDescriptor) -> str:
    kind = descriptor.token_kind
    if kind is TokenKind.IBC:
        return _ibc_info(descriptor).base_denom
    if kind is TokenKind.TOKEN_FACTORY:
        return descriptor.denom
    return descriptor.symbol.lower()


def type_specific_fields(descriptor: TokenDescriptor) -> TypeSpecificFields:
    kind = descriptor.token_kind
    if kind is TokenKind.IBC:
        return {
            "enable": True,
            "channel": _ibc_info(descriptor).channel_id,
            "port": IBC_TRANSFER_PORT,
        }
    if kind is TokenKind.ERC20:
        return {"contract": _bridge_info(descriptor).contract_address}
    return {}


def _ibc_info(descriptor: TokenDescriptor) -> IbcInfo:
    if descriptor.ibc is None:
        raise _gap(descriptor, reason="missing IBC metadata")
    return descriptor.ibc


def _bridge_info(descriptor: TokenDescriptor) -> BridgeInfo:
    if descriptor.bridge is None:
        raise _gap(descriptor, reason="missing bridge contract")
    return descriptor.bridge
