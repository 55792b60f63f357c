"""
Token offchain metadata.

Retrieve token logo images from a token address, using
`token lists <https://tokenlists.org/>`_ as the source of metadata.

Loading token metadata from a token list::

    from token_offchain_metadata import TokenMetadataStore, to_https_url

    store = TokenMetadataStore()
    await store.fetch_tokens_from_list(to_https_url("ipns://tokens.uniswap.org"))

Retrieving token metadata::

    metadata = store.get_token_from_address(
        ChainAddress(chain_id=1, address="0x6B175474E89094C44Da98b954EedeAC495271d0F")
    )

Manually adding token image sources::

    store.add_token_logo_image_sources(
        ChainAddress(chain_id=1, address="0x6B175474E89094C44Da98b954EedeAC495271d0F"),
        "/static/images/dai.png",
    )

If the token was bridged by one of the loaded lists, the source is added to
the metadata of all associated tokens across chains.
"""

from .core.storage import LogoImage, TokenListMetadata, TokenMetadata, TokenMetadataStore
from .errors import (
    InvalidAddressError,
    RetrievalError,
    TokenMetadataError,
    UnsupportedProtocolError,
    ValidationError,
)
from .fetchers import AiohttpTokenListFetcher, FetchCapability, FetchResponse, JsonResponse
from .processors import TokenList, ValidationIssue, validate_token_list
from .utils import (
    ChainAddress,
    ChainAddressKey,
    HttpsUrlString,
    IpfsUrlString,
    IpnsUrlString,
    Web3URL,
    canonicalize_address,
    get_chain_address_key,
    is_address,
    is_https_url,
    to_https_url,
)

__all__ = [
    "TokenMetadataStore",
    "TokenMetadata",
    "TokenListMetadata",
    "LogoImage",
    "ChainAddress",
    "ChainAddressKey",
    "canonicalize_address",
    "get_chain_address_key",
    "is_address",
    "HttpsUrlString",
    "IpfsUrlString",
    "IpnsUrlString",
    "Web3URL",
    "is_https_url",
    "to_https_url",
    "TokenList",
    "ValidationIssue",
    "validate_token_list",
    "AiohttpTokenListFetcher",
    "FetchCapability",
    "FetchResponse",
    "JsonResponse",
    "TokenMetadataError",
    "InvalidAddressError",
    "UnsupportedProtocolError",
    "RetrievalError",
    "ValidationError",
]
