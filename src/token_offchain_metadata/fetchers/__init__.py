"""
Token list fetchers.

KISS: the metadata store only needs "fetch a URL, give me JSON".
"""

from .base import FetchCapability, FetchResponse, JsonResponse
from .token_list_fetcher import AiohttpTokenListFetcher, fetch_token_list

__all__ = [
    'FetchCapability',
    'FetchResponse',
    'JsonResponse',
    'AiohttpTokenListFetcher',
    'fetch_token_list',
]
