"""Resolve raw denominations into classified token descriptors."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .model import TokenKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .model import TokenDescriptor
    from .ports.fetching import TokenMetadataSource

log = getLogger(__name__)


def unique_denoms(denoms: Iterable[str]) -> list[str]:
    """Drop repeated and blank denominations, keeping first-seen order."""

    seen: set[str] = set()
    unique: list[str] = []
    for denom in denoms:
        if not denom or denom in seen:
            continue
        seen.add(denom)
        unique.append(denom)
    return unique


def resolve_descriptors(
    denoms: Iterable[str],
    *,
    source: TokenMetadataSource,
    require_coingecko_id: bool = False,
) -> list[TokenDescriptor]:
    """Return one admitted descriptor per resolvable denomination, in input order.

    Unknown token kinds never leave this function. With ``require_coingecko_id``
    tokens without a coinGeckoId are dropped as well. Source failures propagate
    as :class:`~assetsync.domain.errors.ResolverUnavailableError`.
    """

    requested = unique_denoms(denoms)
    metadata = source.lookup(requested)

    resolved: list[TokenDescriptor] = []
    unresolved = unknown = missing_coingecko = 0
    for denom in requested:
        descriptor = metadata.get(denom)
        if descriptor is None:
            unresolved += 1
            log.debug("No metadata for %s", denom)
            continue
        if descriptor.token_kind is TokenKind.UNKNOWN:
            unknown += 1
            continue
        if require_coingecko_id and not descriptor.has_coin_gecko_id:
            missing_coingecko += 1
            continue
        resolved.append(descriptor)

    log.info(
        "Resolved %s of %s denoms (unresolved=%s, unknown=%s, missing_coingecko=%s)",
        len(resolved),
        len(requested),
        unresolved,
        unknown,
        missing_coingecko,
    )
    return resolved
