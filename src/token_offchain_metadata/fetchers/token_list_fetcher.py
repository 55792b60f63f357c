"""
Default token list fetcher backed by aiohttp.
"""

import logging
from typing import Optional

import aiohttp

from ..config.manager import get_config
from .base import JsonResponse

logger = logging.getLogger(__name__)


class AiohttpTokenListFetcher:
    """
    Retrieve token list documents over HTTPS.

    The body is read eagerly so the returned response outlives the HTTP
    session. IPFS gateways commonly serve token lists as ``text/plain``, so
    the content type is recorded but not enforced.
    """

    def __init__(
        self,
        session: Optional[aiohttp.ClientSession] = None,
        timeout_seconds: Optional[float] = None,
    ):
        """
        Initialize fetcher.

        Args:
            session: Session to reuse; a short-lived one is opened per call if omitted
            timeout_seconds: Total request timeout, defaults to FETCH_TIMEOUT_SECONDS
        """
        self.session = session
        if timeout_seconds is None:
            timeout_seconds = get_config().sources.FETCH_TIMEOUT_SECONDS
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self.logger = logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")

    async def __call__(self, url: str) -> JsonResponse:
        if self.session is not None:
            return await self._get(self.session, url)

        async with aiohttp.ClientSession() as session:
            return await self._get(session, url)

    async def _get(self, session: aiohttp.ClientSession, url: str) -> JsonResponse:
        self.logger.debug(f"GET {url}")
        async with session.get(url, timeout=self.timeout) as response:
            body = await response.text()
            result = JsonResponse(
                url=url,
                status=response.status,
                status_text=response.reason or "",
                body=body,
                content_type=response.headers.get("Content-Type"),
            )

        if not result.ok:
            self.logger.warning(f"Token list request failed: HTTP {result.status} {url}")
        return result


async def fetch_token_list(url: str) -> JsonResponse:
    """Fetch ``url`` with a fetcher built from the configured fetch settings."""
    return await AiohttpTokenListFetcher(**get_config().sources.fetch_settings)(url)
