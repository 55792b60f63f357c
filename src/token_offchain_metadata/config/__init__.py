"""
Configuration management for token_offchain_metadata.

Use get_config() to access all configuration settings.

Example:
    from token_offchain_metadata.config import get_config

    config = get_config()

    # IPFS gateway used to resolve ipfs:// and ipns:// token lists
    gateway = config.sources.IPFS_GATEWAY_URL

    # Token lists loaded by TokenMetadataStore.fetch_default_token_lists()
    token_lists = config.sources.DEFAULT_TOKEN_LISTS
"""

from .base import BaseConfig, ConfigError
from .manager import ConfigManager, get_config, reload_config
from .sources import DEFAULT_IPFS_GATEWAY, DEFAULT_TOKEN_LISTS, TokenSourceConfig

__all__ = [
    "BaseConfig",
    "ConfigError",
    "TokenSourceConfig",
    "DEFAULT_IPFS_GATEWAY",
    "DEFAULT_TOKEN_LISTS",
    "ConfigManager",
    "get_config",
    "reload_config",
]
