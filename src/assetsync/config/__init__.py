"""Application configuration helpers."""

from __future__ import annotations

from .chain import ChainConfig, get_chain_config
from .env import env_or_default, env_path, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import NO_RETRY, CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .publish import PublishConfig, get_publish_config
from .storage import StorageConfig, get_storage_config

__all__ = [
    "NO_RETRY",
    "CacheConfig",
    "ChainConfig",
    "ConfigurationError",
    "MissingConfigurationError",
    "PublishConfig",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "StorageConfig",
    "configure_logging",
    "env_or_default",
    "env_path",
    "get_chain_config",
    "get_publish_config",
    "get_storage_config",
    "require_env_vars",
]
