from __future__ import annotations

from typing import Optional

import pytest

from src.app.infra.transport.base import Transport, TransportResponse


class TransportStub(Transport):
    def __init__(self) -> None:
        self.responses: dict[str, TransportResponse] = {}
        self.default_response: Optional[TransportResponse] = None
        self.error: Optional[BaseException] = None
        self.requested_urls: list[str] = []

    def respond(self, content: bytes, status_code: Optional[int] = 200, url: Optional[str] = None) -> None:
        response = TransportResponse(content=content, status_code=status_code, url=url)
        if url is None:
            self.default_response = response
        else:
            self.responses[url] = response

    async def get(self, url: str) -> TransportResponse:
        self.requested_urls.append(url)
        if self.error is not None:
            raise self.error
        if url in self.responses:
            return self.responses[url]
        if self.default_response is not None:
            return self.default_response
        return TransportResponse(content=b"", status_code=200, url=url)


@pytest.fixture
def transport_stub() -> TransportStub:
    return TransportStub()
