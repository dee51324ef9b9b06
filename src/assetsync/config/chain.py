"""Endpoints for the chain data sources and the published asset list."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_or_default
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy

DEFAULT_LCD_URL = "https://sentry.lcd.injective.network"
DEFAULT_TOKEN_LIST_URL = (
    "https://raw.githubusercontent.com/InjectiveLabs/injective-lists/master/json/tokens/mainnet.json"
)
DEFAULT_ASSET_LIST_URL = (
    "https://raw.githubusercontent.com/shane-moore/chainlist/main/chain/injective/assets.json"
)
DEFAULT_IBC_METADATA_URL = "https://api.tfm.com/api/v1/ibc/chain/injective-1/tokens"

SUPPLY_PAGE_LIMIT = 1000


@dataclass(frozen=True, slots=True)
class ChainConfig:
    """Where the on-chain registry and the curated asset list are read from."""

    lcd: ResilienceConfig
    token_list_url: str
    asset_list_url: str
    ibc_metadata_url: str
    raw_content: ResilienceConfig
    supply_page_limit: int = SUPPLY_PAGE_LIMIT


def get_chain_config() -> ChainConfig:
    lcd_url = env_or_default("ASSETSYNC_LCD_URL", DEFAULT_LCD_URL)
    return ChainConfig(
        lcd=ResilienceConfig(
            name="lcd",
            base_url=lcd_url,
            timeout_seconds=20.0,
            ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
            cache=None,
        ),
        token_list_url=env_or_default("ASSETSYNC_TOKEN_LIST_URL", DEFAULT_TOKEN_LIST_URL),
        asset_list_url=env_or_default("ASSETSYNC_ASSET_LIST_URL", DEFAULT_ASSET_LIST_URL),
        ibc_metadata_url=env_or_default("ASSETSYNC_IBC_METADATA_URL", DEFAULT_IBC_METADATA_URL),
        raw_content=ResilienceConfig(
            name="raw-content",
            timeout_seconds=30.0,
            retry=RetryPolicy(total=3),
            cache=CacheConfig(backend="sqlite", ttl_seconds=300.0),
        ),
    )
