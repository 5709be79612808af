# src/app/infra/transport/base.py
"""
Abstract base class for HTTP transports.
This interface allows swapping the network layer (httpx in production, a
canned-response stub in tests) without touching the fetch pipeline.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Mapping, Optional


@dataclass(frozen=True)
class TransportResponse:
    """Raw bytes plus the status metadata of one GET."""
    content: bytes
    status_code: Optional[int]  # None when the response did not come over HTTP
    headers: Mapping[str, str] = field(default_factory=dict)
    url: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code <= 299


class Transport(ABC):
    """
    Abstract capability for performing an HTTP GET.

    Implementations:
    - HttpxTransport: httpx.AsyncClient based, used by the app
    - TransportStub (tests): canned bytes/status or a forced failure
    """

    @abstractmethod
    async def get(self, url: str) -> TransportResponse:
        """
        Fetch a resource.

        Args:
            url: Absolute URL of the resource

        Returns:
            The body and status metadata, whatever the status code is

        Raises:
            Any connectivity, timeout, TLS or DNS failure of the underlying
            client, unchanged.
        """
        pass
