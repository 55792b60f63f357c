"""
EVM address helpers: syntax checks, checksum canonicalization and the
chain-address keys used to index token metadata across chains.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, NewType

from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address

from ..errors import InvalidAddressError

# Lowercase only: inputs are lowercased before matching.
_ADDRESS_RE = re.compile(r"0x[a-f0-9]{40}")

ADDRESS_CACHE_SIZE = 8192

ChainAddressKey = NewType("ChainAddressKey", str)


@dataclass(frozen=True)
class ChainAddress:
    """An address on a specific chain."""

    chain_id: int
    address: str


def is_address(value: Any) -> bool:
    """Return True if ``value`` is a syntactically valid EVM address (any casing)."""
    if not isinstance(value, str):
        return False
    return _is_lowercase_address(value.lower())


@lru_cache(maxsize=ADDRESS_CACHE_SIZE)
def _is_lowercase_address(value: str) -> bool:
    return _ADDRESS_RE.fullmatch(value) is not None


def is_chain_id(value: Any) -> bool:
    """Return True for positive integer chain IDs (bools excluded)."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


def canonicalize_address(address: str, chain_id: int) -> ChecksumAddress:
    """
    Validate an address and return its EIP-55 checksum form.

    Args:
        address: Address string, ``0x`` followed by 40 hex digits in any casing
        chain_id: Chain the address lives on

    Returns:
        Checksummed address

    Raises:
        InvalidAddressError: If the address or chain ID is malformed
    """
    if not is_chain_id(chain_id):
        raise InvalidAddressError(address, chain_id, reason=f"Invalid chain ID: {chain_id!r}")
    if not is_address(address):
        raise InvalidAddressError(address, chain_id)
    # eth_utils expects a lowercase 0x prefix
    return to_checksum_address("0x" + address[2:])


def get_chain_address_key(chain_address: ChainAddress) -> ChainAddressKey:
    """
    Given a chain ID and an address, return a string that uniquely identifies
    the address across chains.

    Treat the key as opaque. The address must already be syntactically valid.
    """
    return ChainAddressKey(f"{chain_address.chain_id}_{chain_address.address[2:].lower()}")


def canonical_chain_address_key(chain_address: ChainAddress) -> ChainAddressKey:
    """Validate ``chain_address`` and derive its key."""
    checksum_address = canonicalize_address(chain_address.address, chain_address.chain_id)
    return get_chain_address_key(ChainAddress(chain_address.chain_id, checksum_address))
