"""
Error types for token list ingestion and token metadata lookups.

Every error raised by this package derives from TokenMetadataError so callers
can decide, per token list, whether a failure is fatal or skippable.
"""

from typing import Any, Optional, Sequence


class TokenMetadataError(Exception):
    """Base exception for token metadata operations."""
    pass


class InvalidAddressError(TokenMetadataError, ValueError):
    """Raised when a chain ID / address pair cannot be canonicalized."""

    def __init__(self, address: Any, chain_id: Optional[Any] = None, reason: Optional[str] = None):
        self.address = address
        self.chain_id = chain_id
        message = reason or f"Invalid EVM address: {address!r}"
        if chain_id is not None:
            message = f"{message} (chain {chain_id})"
        super().__init__(message)


class UnsupportedProtocolError(TokenMetadataError, ValueError):
    """Raised when a URL uses a scheme other than https, ipfs or ipns."""

    def __init__(self, protocol: str, href: Optional[str] = None):
        self.protocol = protocol
        self.href = href
        super().__init__(f"Unsupported URL protocol: {protocol}")


class RetrievalError(TokenMetadataError):
    """Raised when a token list cannot be retrieved."""

    def __init__(
        self,
        url: str,
        status_text: str = "",
        status: Optional[int] = None,
        message: Optional[str] = None,
    ):
        self.url = url
        self.status = status
        self.status_text = status_text
        super().__init__(message or f"Failed to fetch token list: {status_text}")


class ValidationError(TokenMetadataError):
    """
    Raised when a token list document fails schema validation.

    Carries every structural issue found, not only the first one.
    """

    def __init__(self, url: str, issues: Sequence[Any]):
        self.url = url
        self.issues = list(issues)
        super().__init__(
            f"Unable to parse token list {url}: {len(self.issues)} validation issue(s)"
        )
