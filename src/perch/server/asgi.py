"""ASGI transport — adapts one ASGI HTTP connection to ``TransportRequest``.

The only component that touches raw ASGI messages. The scope becomes
method, URL and headers; ``receive`` is drained into the body; the
response descriptor goes out through ``send``.
"""

from perch._internal.asgi import HTTPScope, Receive, Scope, Send
from perch.errors import PayloadTooLarge, TransportError
from perch.http.headers import Headers
from perch.server.sender import send_response
from perch.server.transport import ResponseDescriptor


class ASGIRequest:
    """A ``TransportRequest`` backed by an ASGI scope, receive and send."""

    __slots__ = ("_receive", "_responded", "_scope", "_send")

    def __init__(self, scope: Scope, receive: Receive, send: Send) -> None:
        self._scope = HTTPScope.from_scope(scope)
        self._receive = receive
        self._send = send
        self._responded = False

    @property
    def method(self) -> str:
        return self._scope.method

    @property
    def url(self) -> str:
        return self._scope.url

    @property
    def headers(self) -> tuple[tuple[str, str], ...]:
        return Headers.from_raw(self._scope.headers).raw

    async def body(self, limit: int) -> bytes:
        """Drain ``http.request`` messages into one byte string."""
        chunks: list[bytes] = []
        size = 0
        while True:
            message = await self._receive()
            if message["type"] == "http.disconnect":
                break
            chunk = message.get("body", b"")
            if chunk:
                size += len(chunk)
                if size > limit:
                    raise PayloadTooLarge(limit)
                chunks.append(chunk)
            if not message.get("more_body", False):
                break
        return b"".join(chunks)

    async def respond(self, descriptor: ResponseDescriptor) -> None:
        if self._responded:
            msg = f"{self.method} {self.url} was already answered"
            raise TransportError(msg)
        self._responded = True
        await send_response(descriptor, self._send)
