"""
Token metadata storage.
"""

from .token_metadata_store import (
    LogoImage,
    TokenListMetadata,
    TokenMetadata,
    TokenMetadataStore,
)

__all__ = [
    "LogoImage",
    "TokenListMetadata",
    "TokenMetadata",
    "TokenMetadataStore",
]
