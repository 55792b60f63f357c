"""
Fetch capability used to retrieve token list documents.

Anything callable as ``await fetch(url)`` returning an object with ``ok``,
``status_text`` and an awaitable ``json()`` can be used.
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Protocol

import ujson


class FetchResponse(Protocol):
    """Minimal response surface consumed by TokenMetadataStore."""

    ok: bool
    status_text: str

    async def json(self) -> Any:
        ...


FetchCapability = Callable[[str], Awaitable[FetchResponse]]


@dataclass
class JsonResponse:
    """A fully read HTTP response whose body is parsed on demand."""
    url: str
    status: int
    status_text: str
    body: str = ""
    content_type: Optional[str] = None

    @property
    def ok(self) -> bool:
        """True for 2xx statuses."""
        return 200 <= self.status < 300

    async def json(self) -> Any:
        """Parse the body as JSON (raises ValueError on malformed input)."""
        return ujson.loads(self.body)
