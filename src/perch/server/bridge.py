"""Server bridge — from transport requests to responses.

The only component that knows about transports. Builds the immutable
``Request``, runs the handler and folds its outcome:

- ``Ok(Response)`` or ``Err(Response)`` → sent as is
- ``HTTPError`` (raised or carried) → its status, detail as plain text
- anything else (raised or carried) → logged, then ``500`` with the
  error message as plain text

Each request is served in its own task, so requests are independent and
may complete out of order.
"""

import logging
from collections.abc import AsyncIterable
from typing import Any

import anyio

from perch._internal.invoke import invoke
from perch.config import ServerConfig
from perch.errors import HTTPError, PayloadTooLarge
from perch.http.request import Request
from perch.http.response import Response
from perch.result import Err, Ok, Result
from perch.server.errors import handle_http_error, handle_internal_error
from perch.server.transport import ResponseDescriptor, TransportRequest

logger = logging.getLogger("perch.server")


def _fold(outcome: Result[Any, Any], method: str, url: str, config: ServerConfig) -> Response:
    """Turn a settled handler outcome into the response to send."""
    match outcome:
        case Ok(Response() as response) | Err(Response() as response):
            return response
        case Ok(value):
            error = TypeError(f"Handler produced {type(value).__name__}, not a Response")
            return handle_internal_error(error, method, url, config)
        case Err(HTTPError() as exc):
            return handle_http_error(exc, method, url)
        case Err(error):
            return handle_internal_error(error, method, url, config)


async def serve_request(
    handler: Any,
    transport: TransportRequest,
    config: ServerConfig | None = None,
) -> Response:
    """Serve one transport request and respond to it exactly once.

    Returns the response that was sent. Only a failing ``respond``
    propagates; every handler fault ends as a response.
    """
    config = config or ServerConfig()
    method, url = transport.method, transport.url

    try:
        body = await transport.body(config.max_content_length)
        if len(body) > config.max_content_length:
            raise PayloadTooLarge(config.max_content_length)
        request = Request.build(method, url, headers=transport.headers, body=body)
        outcome = await invoke(handler, request)
    except HTTPError as exc:
        response = handle_http_error(exc, method, url)
    except Exception as exc:
        response = handle_internal_error(exc, method, url, config)
    else:
        response = _fold(outcome, method, url, config)

    await transport.respond(ResponseDescriptor.from_response(response))
    return response


async def _serve_logged(
    handler: Any,
    transport: TransportRequest,
    config: ServerConfig | None,
) -> None:
    try:
        await serve_request(handler, transport, config)
    except Exception:
        logger.exception("Failed to respond to %s %s", transport.method, transport.url)


async def stream(
    handler: Any,
    requests: AsyncIterable[TransportRequest],
    *,
    config: ServerConfig | None = None,
) -> None:
    """Serve every request from *requests* until the iterable ends.

    Requests are pulled one at a time; each is then served in its own
    task, so a slow handler never holds up the next request. Returns
    once the iterable is exhausted and every request has been answered.
    """
    async with anyio.create_task_group() as tg:
        async for transport in requests:
            tg.start_soon(_serve_logged, handler, transport, config)
