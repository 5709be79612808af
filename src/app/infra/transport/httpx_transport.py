# src/app/infra/transport/httpx_transport.py
"""
httpx based transport used outside of tests.
"""
from __future__ import annotations

import logging
from typing import Optional

import httpx

from src.app.infra.transport.base import Transport, TransportResponse

logger = logging.getLogger(__name__)


class HttpxTransport(Transport):
    """
    Transport backed by a shared ``httpx.AsyncClient``.

    Network errors (``httpx.TransportError`` and subclasses, including
    timeouts) are not caught here; the caller decides how to surface them.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 15.0,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    async def get(self, url: str) -> TransportResponse:
        response = await self._client.get(url)
        logger.debug("GET %s -> %s (%d bytes)", url, response.status_code, len(response.content))
        return TransportResponse(
            content=response.content,
            status_code=response.status_code,
            headers=dict(response.headers),
            url=str(response.url),
        )

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()
