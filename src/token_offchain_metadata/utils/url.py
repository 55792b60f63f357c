"""
Web3 URL helpers.

Token lists and logos are often published on IPFS/IPNS. These helpers turn
such URLs into HTTPS URLs served by a gateway.
"""

from typing import NewType, Union
from urllib.parse import urlsplit, urlunsplit

from ..config.sources import DEFAULT_IPFS_GATEWAY
from ..errors import UnsupportedProtocolError

HttpsUrlString = NewType("HttpsUrlString", str)
IpfsUrlString = NewType("IpfsUrlString", str)
IpnsUrlString = NewType("IpnsUrlString", str)

# A Web3-native URL, using the HTTPS, IPFS or IPNS protocols.
Web3URL = Union[HttpsUrlString, IpfsUrlString, IpnsUrlString]

CONTENT_ADDRESSED_SCHEMES = ("ipfs", "ipns")


def is_https_url(href: str) -> bool:
    """Return True if ``href`` starts with ``https://``."""
    return href.startswith("https://")


def _build_gateway_url(scheme: str, root: str, path: str, query: str, fragment: str,
                       gateway: str) -> HttpsUrlString:
    base = gateway.rstrip("/")
    url = f"{base}/{scheme}/{root}{path}"
    if query:
        url = f"{url}?{query}"
    if fragment:
        url = f"{url}#{fragment}"
    return HttpsUrlString(url)


def to_https_url(href: Web3URL, ipfs_gateway: str = DEFAULT_IPFS_GATEWAY) -> HttpsUrlString:
    """
    Given the href of a Web3 URL, return an HTTPS URL.

    ``https://`` URLs are returned unchanged. ``ipfs://<cid>/<path>`` and
    ``ipns://<name>/<path>`` become ``<gateway>/ipfs/<cid>/<path>`` and
    ``<gateway>/ipns/<name>/<path>``, keeping query and fragment.

    Args:
        href: The Web3 URL to convert
        ipfs_gateway: HTTPS gateway used for IPFS and IPNS URLs

    Raises:
        UnsupportedProtocolError: If the URL (or the gateway) is not supported
        ValueError: If an IPFS/IPNS URL has no content identifier
    """
    parts = urlsplit(href)
    scheme = parts.scheme.lower()

    if scheme == "https":
        return HttpsUrlString(href)

    if scheme not in CONTENT_ADDRESSED_SCHEMES:
        raise UnsupportedProtocolError(f"{scheme}:", href)

    if not is_https_url(ipfs_gateway):
        raise UnsupportedProtocolError(f"{urlsplit(ipfs_gateway).scheme}:", ipfs_gateway)
    if not parts.netloc:
        raise ValueError(f"Missing content identifier in {href!r}")

    return _build_gateway_url(
        scheme, parts.netloc, parts.path, parts.query, parts.fragment, ipfs_gateway
    )


def normalize_href(href: str) -> str:
    """
    Canonical spelling of a URL, used to key loaded token lists.

    Lowercases scheme and host and gives an empty path a single ``/``,
    so ``https://Example.com`` and ``https://example.com/`` compare equal.
    """
    parts = urlsplit(href)
    return urlunsplit((
        parts.scheme.lower(),
        parts.netloc.lower(),
        parts.path or "/",
        parts.query,
        parts.fragment,
    ))
