"""
HTTP transport backed by httpx.

This module is a black box that:
- Issues a single GET request per call
- Returns the status code and body text
- Leaves error classification to the Authenticator
"""

import logging
from typing import Mapping, Optional

import httpx

from .interfaces import TransportResponse

logger = logging.getLogger(__name__)


class HttpxTransport:
    """
    Transport implementation using httpx.AsyncClient.

    When no client is injected a new AsyncClient is opened and closed
    for every request. An injected client is owned by the caller.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = 30.0,
        follow_redirects: bool = True,
        raise_for_status: bool = False
    ):
        """
        Initialize the transport.

        Args:
            client: Optional shared AsyncClient
            timeout: Request timeout in seconds (None disables it)
            follow_redirects: Follow HTTP redirects
            raise_for_status: Raise httpx.HTTPStatusError on non-2xx responses
        """
        self.client = client
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.raise_for_status = raise_for_status

    async def get(self, url: str, headers: Mapping[str, str]) -> TransportResponse:
        if self.client is not None:
            response = await self.client.get(url, headers=headers)
        else:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=self.follow_redirects
            ) as client:
                response = await client.get(url, headers=headers)

        logger.debug(f"GET {url} -> {response.status_code}")

        if self.raise_for_status:
            response.raise_for_status()

        return TransportResponse(status_code=response.status_code, text=response.text)
