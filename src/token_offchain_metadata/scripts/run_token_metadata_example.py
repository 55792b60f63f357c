#!/usr/bin/env python3
"""
Example: load the default token lists and look up a bridged token.

Fetches each default token list, attaches a local logo to DAI on Ethereum,
and prints the metadata of DAI's bridged counterpart on Base.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

import aiohttp

from token_offchain_metadata.config import get_config
from token_offchain_metadata.core.storage import TokenMetadataStore
from token_offchain_metadata.errors import TokenMetadataError
from token_offchain_metadata.fetchers.base import FetchCapability
from token_offchain_metadata.utils.chain_address import ChainAddress
from token_offchain_metadata.utils.url import to_https_url

logger = logging.getLogger(__name__)

DAI_ETHEREUM = ChainAddress(chain_id=1, address="0x6B175474E89094C44Da98b954EedeAC495271d0F")
DAI_BASE = ChainAddress(chain_id=8453, address="0x50c5725949A6F0c72E6C4a641F24049A917DB0Cb")
LOCAL_DAI_LOGO = "/static/images/dai.png"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Load token lists and print token logo metadata")
    parser.add_argument(
        "--list",
        dest="token_lists",
        action="append",
        help="Token list URL (https, ipfs or ipns); repeatable. Defaults to DEFAULT_TOKEN_LISTS",
    )
    parser.add_argument("--gateway", help="IPFS gateway, defaults to IPFS_GATEWAY_URL")
    return parser.parse_args(argv)


async def main(argv: Optional[List[str]] = None, fetch: Optional[FetchCapability] = None) -> int:
    """Run the example."""
    args = parse_args(argv)
    store = TokenMetadataStore()

    try:
        if args.token_lists:
            gateway = args.gateway or get_config().sources.IPFS_GATEWAY_URL
            for token_list_href in args.token_lists:
                await store.fetch_tokens_from_list(to_https_url(token_list_href, gateway), fetch=fetch)
        else:
            await store.fetch_default_token_lists(fetch=fetch, ipfs_gateway=args.gateway)
        logger.info("Done.")
    except (TokenMetadataError, aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.error(f"Token list ingestion failed: {e}")
        return 1

    store.add_token_logo_image_sources(DAI_ETHEREUM, LOCAL_DAI_LOGO)

    metadata = store.get_token_from_address(DAI_BASE)
    print(json.dumps(metadata.to_dict() if metadata else None, indent=2))
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
