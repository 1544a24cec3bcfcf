"""ASGI response sending — translates response descriptors to ASGI messages."""

from perch._internal.asgi import Send
from perch.server.transport import ResponseDescriptor


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


async def send_response(descriptor: ResponseDescriptor, send: Send) -> None:
    """Translate a response descriptor into ASGI send() calls."""
    raw_headers: list[tuple[bytes, bytes]] = [
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in descriptor.headers
        if name.lower() != "content-length"
    ]

    body = descriptor.body if _body_allowed(descriptor.status) else b""

    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send(
        {
            "type": "http.response.start",
            "status": descriptor.status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body,
        }
    )
