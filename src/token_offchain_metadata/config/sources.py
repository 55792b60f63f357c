"""
Token list source configuration: IPFS gateway, default lists and fetch limits.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .base import BaseConfig, ConfigError

DEFAULT_IPFS_GATEWAY = "https://ipfs.io/"

DEFAULT_TOKEN_LISTS = [
    "ipns://tokens.uniswap.org",
    "https://tokens.coingecko.com/uniswap/all.json",
]


@dataclass
class TokenSourceConfig(BaseConfig):
    """Where token lists come from and how they are retrieved."""

    IPFS_GATEWAY_URL: str = field(
        default_factory=lambda: BaseConfig.get_env("IPFS_GATEWAY_URL", DEFAULT_IPFS_GATEWAY)
    )
    DEFAULT_TOKEN_LISTS: List[str] = field(
        default_factory=lambda: BaseConfig.get_env_list("DEFAULT_TOKEN_LISTS", DEFAULT_TOKEN_LISTS)
    )
    FETCH_TIMEOUT_SECONDS: float = field(
        default_factory=lambda: BaseConfig.get_env_float("FETCH_TIMEOUT_SECONDS", 30.0)
    )

    def _validate_config(self):
        super()._validate_config()
        if not self.IPFS_GATEWAY_URL.startswith("https://"):
            raise ConfigError(f"IPFS gateway must be an https:// URL, got: {self.IPFS_GATEWAY_URL}")
        if self.FETCH_TIMEOUT_SECONDS <= 0:
            raise ConfigError(
                f"FETCH_TIMEOUT_SECONDS must be positive, got: {self.FETCH_TIMEOUT_SECONDS}"
            )

    @property
    def fetch_settings(self) -> Dict[str, Any]:
        """Settings handed to the default token list fetcher."""
        return {
            "timeout_seconds": self.FETCH_TIMEOUT_SECONDS,
        }
