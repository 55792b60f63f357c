"""
Tests for Web3 URL resolution.
"""

import pytest

from token_offchain_metadata.errors import UnsupportedProtocolError
from token_offchain_metadata.utils.url import is_https_url, normalize_href, to_https_url


class TestToHttpsUrl:
    """Test IPFS/IPNS to HTTPS resolution."""

    def test_https_returned_unchanged(self):
        """HTTPS URLs pass through untouched."""
        href = "https://tokens.coingecko.com/uniswap/all.json?x=%20y#frag"
        assert to_https_url(href) == href

    def test_ipfs_with_gateway(self):
        """ipfs://<cid>/<path> maps under <gateway>/ipfs/."""
        resolved = to_https_url("ipfs://bafybeigdyrzt/images/icon.png", "https://ipfs.io/")
        assert resolved == "https://ipfs.io/ipfs/bafybeigdyrzt/images/icon.png"

    def test_ipfs_preserves_query_and_fragment(self):
        """Query string and fragment survive resolution."""
        resolved = to_https_url("ipfs://cid/path?x=1#y", "https://ipfs.io/")
        assert resolved == "https://ipfs.io/ipfs/cid/path?x=1#y"

    def test_ipns_default_gateway(self):
        """ipns:// uses the default gateway when none is given."""
        assert to_https_url("ipns://tokens.uniswap.org") == "https://ipfs.io/ipns/tokens.uniswap.org"

    def test_ipns_with_path(self):
        """IPNS paths are kept."""
        resolved = to_https_url("ipns://tokens.uniswap.org/lists/default.json", "https://ipfs.io/")
        assert resolved == "https://ipfs.io/ipns/tokens.uniswap.org/lists/default.json"

    @pytest.mark.parametrize("gateway", [
        "https://cloudflare-ipfs.com",
        "https://cloudflare-ipfs.com/",
    ])
    def test_custom_gateway_trailing_slash(self, gateway):
        """Gateways with or without a trailing slash give the same URL."""
        assert to_https_url("ipfs://cid/logo.svg", gateway) == "https://cloudflare-ipfs.com/ipfs/cid/logo.svg"

    def test_gateway_with_path_prefix(self):
        """Gateways mounted under a path keep their prefix."""
        resolved = to_https_url("ipfs://cid", "https://example.com/gw/")
        assert resolved == "https://example.com/gw/ipfs/cid"

    def test_scheme_is_case_insensitive(self):
        """Upper-case schemes are recognised."""
        assert to_https_url("IPFS://cid/a", "https://ipfs.io") == "https://ipfs.io/ipfs/cid/a"

    @pytest.mark.parametrize("href,protocol", [
        ("ftp://example.com/list.json", "ftp:"),
        ("http://example.com/list.json", "http:"),
        ("ar://txid", "ar:"),
    ])
    def test_unsupported_protocol(self, href, protocol):
        """Other schemes raise UnsupportedProtocolError naming the scheme."""
        with pytest.raises(UnsupportedProtocolError, match=f"Unsupported URL protocol: {protocol}") as exc_info:
            to_https_url(href)

        assert exc_info.value.protocol == protocol

    def test_non_https_gateway_rejected(self):
        """Content-addressed URLs are never resolved through an insecure gateway."""
        with pytest.raises(UnsupportedProtocolError):
            to_https_url("ipfs://cid", "http://localhost:8080/")

    def test_missing_cid_rejected(self):
        """An IPFS URL without a CID cannot be resolved."""
        with pytest.raises(ValueError, match="Missing content identifier"):
            to_https_url("ipfs:///path")


class TestIsHttpsUrl:
    """Test the literal https:// prefix check."""

    @pytest.mark.parametrize("href,expected", [
        ("https://example.com/dai.png", True),
        ("https://", True),
        ("http://example.com/dai.png", False),
        ("ipfs://cid/dai.png", False),
        ("HTTPS://example.com/dai.png", False),
        ("/static/images/dai.png", False),
    ])
    def test_prefix(self, href, expected):
        assert is_https_url(href) is expected


class TestNormalizeHref:
    """Test token list href normalization."""

    def test_empty_path_gets_slash(self):
        assert normalize_href("https://example.com") == "https://example.com/"

    def test_scheme_and_host_lowercased(self):
        assert normalize_href("HTTPS://Example.COM/Lists/All.json") == "https://example.com/Lists/All.json"

    def test_query_and_fragment_kept(self):
        assert normalize_href("https://example.com/a?b=1#c") == "https://example.com/a?b=1#c"
