"""Transport contract consumed by the server bridge.

Any object with this shape can be served — the ASGI adapter in
``perch.server.asgi`` and the in-memory request in ``perch.testing``
are the two shipped with perch.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from perch.http.response import Response


@dataclass(frozen=True, slots=True)
class ResponseDescriptor:
    """What a transport writes back: status, headers and body."""

    status: int
    headers: tuple[tuple[str, str], ...]
    body: bytes

    @classmethod
    def from_response(cls, response: Response) -> ResponseDescriptor:
        return cls(status=response.status, headers=response.headers, body=response.raw)


class TransportRequest(Protocol):
    """One raw incoming request.

    ``respond`` must be called exactly once; transports raise
    ``TransportError`` on a second call.
    """

    @property
    def method(self) -> str: ...

    @property
    def url(self) -> str: ...

    @property
    def headers(self) -> Iterable[tuple[str, str]]: ...

    async def body(self, limit: int) -> bytes:
        """Read the whole body. May raise ``PayloadTooLarge`` past *limit* bytes."""
        ...

    async def respond(self, descriptor: ResponseDescriptor) -> None: ...
