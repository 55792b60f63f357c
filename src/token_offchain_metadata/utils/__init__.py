"""
Address and URL utilities.
"""

from .chain_address import (
    ChainAddress,
    ChainAddressKey,
    canonical_chain_address_key,
    canonicalize_address,
    get_chain_address_key,
    is_address,
    is_chain_id,
)
from .url import (
    HttpsUrlString,
    IpfsUrlString,
    IpnsUrlString,
    Web3URL,
    is_https_url,
    normalize_href,
    to_https_url,
)

__all__ = [
    "ChainAddress",
    "ChainAddressKey",
    "canonical_chain_address_key",
    "canonicalize_address",
    "get_chain_address_key",
    "is_address",
    "is_chain_id",
    "HttpsUrlString",
    "IpfsUrlString",
    "IpnsUrlString",
    "Web3URL",
    "is_https_url",
    "normalize_href",
    "to_https_url",
]
