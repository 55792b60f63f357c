"""
In-memory index of token logo metadata built from token lists.

Tokens are keyed by chain-address key. Bridged tokens declared in a list's
``extensions.bridgeInfo`` share the TokenMetadata object of the token that
declared them, so a logo added through either key is visible through both.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ...config.manager import get_config
from ...errors import RetrievalError, ValidationError
from ...fetchers.base import FetchCapability
from ...fetchers.token_list_fetcher import fetch_token_list
from ...processors.token_list_validation import TokenList, TokenListVersion, validate_token_list
from ...utils.chain_address import ChainAddress, ChainAddressKey, canonical_chain_address_key
from ...utils.url import is_https_url, normalize_href, to_https_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogoImage:
    """An image source for a token logo."""
    src: str


@dataclass(eq=False)
class TokenMetadata:
    """
    Metadata for a token.

    Instances are shared between bridged chain addresses and compare by
    identity. ``logo_images`` is replaced, never mutated in place, so a tuple
    obtained earlier stays a stable snapshot.
    """
    logo_images: Tuple[LogoImage, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"logoImages": [{"src": image.src} for image in self.logo_images]}


@dataclass(frozen=True)
class TokenListMetadata:
    """Metadata that describes a loaded token list."""
    name: str
    timestamp: str
    version: TokenListVersion
    href: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "timestamp": self.timestamp,
            "version": self.version.model_dump(),
            "href": self.href,
        }


class TokenMetadataStore:
    """
    Stores token metadata and provides methods for fetching and retrieving it.

    Designed for a single mutating caller: there is no internal locking, and
    concurrent fetch_tokens_from_list calls may interleave their merges.
    """

    def __init__(self):
        """Initialize an empty store."""
        self._token_lists: Dict[str, TokenListMetadata] = {}
        self._tokens_by_address: Dict[ChainAddressKey, TokenMetadata] = {}

    def __len__(self) -> int:
        """Number of indexed chain-address keys."""
        return len(self._tokens_by_address)

    async def fetch_tokens_from_list(
        self, token_list_url: str, fetch: Optional[FetchCapability] = None
    ) -> None:
        """
        Fetch, parse, and store the contents of a token list.

        Tokens are merged one by one. If anything fails, merges already applied
        stay in the store and the list itself is not recorded.

        Args:
            token_list_url: HTTPS URL of the token list (resolve IPFS/IPNS
                URLs with to_https_url first)
            fetch: Fetch capability, defaults to the aiohttp fetcher

        Raises:
            RetrievalError: If the response is unsuccessful or not JSON
            ValidationError: If the document does not match the token list shape
        """
        fetch = fetch or fetch_token_list
        logger.info(f"Fetching token list: {token_list_url}")

        response = await fetch(token_list_url)
        if not response.ok:
            raise RetrievalError(token_list_url, status_text=response.status_text,
                                 status=getattr(response, "status", None))

        try:
            document = await response.json()
        except ValueError as e:
            raise RetrievalError(
                token_list_url,
                status_text=response.status_text,
                message=f"Token list is not valid JSON: {e}",
            ) from e

        result = validate_token_list(document)
        if result.failed:
            for issue in result.issues:
                logger.error(f"Token list {token_list_url}: {issue}")
            raise ValidationError(token_list_url, result.issues)

        self._merge_token_list(result.output)

        href = normalize_href(token_list_url)
        self._token_lists[href] = TokenListMetadata(
            name=result.output.name,
            timestamp=result.output.timestamp,
            version=result.output.version,
            href=href,
        )
        logger.info(
            f"Loaded token list '{result.output.name}' "
            f"({len(result.output.tokens)} tokens, {len(self)} indexed addresses)"
        )

    def _merge_token_list(self, token_list: TokenList) -> None:
        skipped = 0
        for token in token_list.tokens:
            if not token.logo_uri or not is_https_url(token.logo_uri):
                skipped += 1
                continue

            token_metadata = self.add_token_logo_image_sources(token.chain_address, token.logo_uri)

            for bridged in token.bridged_chain_addresses:
                # Link the bridged token to this token's metadata on first sight only
                key = canonical_chain_address_key(bridged)
                if key not in self._tokens_by_address:
                    self._tokens_by_address[key] = token_metadata

                # An earlier list may have given the bridged key its own object
                self.add_token_logo_image_sources(bridged, token.logo_uri)

        if skipped:
            logger.debug(f"Skipped {skipped} tokens without an https logo in '{token_list.name}'")

    async def fetch_default_token_lists(
        self, fetch: Optional[FetchCapability] = None, ipfs_gateway: Optional[str] = None
    ) -> None:
        """
        Load every configured default token list, in order.

        Lists are resolved through ``ipfs_gateway``, or the configured IPFS
        gateway when omitted. The first failure is raised and stops the
        remaining lists from loading.
        """
        sources = get_config().sources
        gateway = ipfs_gateway or sources.IPFS_GATEWAY_URL
        for href in sources.DEFAULT_TOKEN_LISTS:
            url = to_https_url(href, gateway)
            await self.fetch_tokens_from_list(url, fetch=fetch)

    def add_token_logo_image_sources(self, chain_address: ChainAddress, *new_sources: str) -> TokenMetadata:
        """
        Add new image sources to a token's metadata, if they are not already present.

        Args:
            chain_address: The chain ID and address of the token to add image sources to
            new_sources: Image sources to add, deduplicated by exact string match

        Returns:
            The updated token metadata, shared with any bridged chain addresses

        Raises:
            InvalidAddressError: If the chain address is malformed
        """
        key = canonical_chain_address_key(chain_address)
        token_metadata = self._tokens_by_address.get(key)
        if token_metadata is None:
            token_metadata = TokenMetadata()
            self._tokens_by_address[key] = token_metadata

        known = {image.src for image in token_metadata.logo_images}
        logo_images = list(token_metadata.logo_images)
        for src in new_sources:
            if src not in known:
                known.add(src)
                logo_images.append(LogoImage(src))

        if len(logo_images) != len(token_metadata.logo_images):
            token_metadata.logo_images = tuple(logo_images)
        return token_metadata

    def get_token_from_address(self, chain_address: ChainAddress) -> Optional[TokenMetadata]:
        """
        Retrieve a token's metadata by its chain address.

        Raises:
            InvalidAddressError: If the chain address is malformed
        """
        return self._tokens_by_address.get(canonical_chain_address_key(chain_address))

    @property
    def token_lists(self) -> List[TokenListMetadata]:
        """Metadata of the token lists that were loaded."""
        return list(self._token_lists.values())

    def get_token_list_metadata(self, token_list_url: str) -> Optional[TokenListMetadata]:
        """From a given URL or href, return the token list metadata if it was loaded."""
        return self._token_lists.get(normalize_href(token_list_url))
