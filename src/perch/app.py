"""Perch application — an ASGI entry point around a handler.

The handler is usually a router, optionally behind guards::

    from perch import App, compose, route
    from perch.routing.handlers import get

    app = App(route(get("/", index)))

Any ASGI server can host ``app``. Setup (hooks) happens before the
first request; the handler and config are fixed at construction.
"""

import inspect
import logging
from collections.abc import AsyncIterable, Callable
from typing import Any

from perch._internal.asgi import Receive, Scope, Send
from perch.config import ServerConfig
from perch.server.asgi import ASGIRequest
from perch.server.bridge import serve_request, stream
from perch.server.transport import TransportRequest

logger = logging.getLogger("perch.server")


class App:
    """ASGI 3.0 application serving one perch handler.

    ``handler`` is called with each ``Request`` and may return a
    computation, a ``Result`` or a bare ``Response``.
    """

    __slots__ = ("_shutdown_hooks", "_startup_hooks", "config", "handler")

    def __init__(self, handler: Callable[[Any], Any], config: ServerConfig | None = None) -> None:
        self.handler = handler
        self.config: ServerConfig = config or ServerConfig()
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []

    # -- Lifecycle hooks --

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register an async or sync startup hook via decorator.

        Hooks run in registration order during ASGI lifespan startup,
        before the server begins accepting HTTP requests.
        """
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register an async or sync shutdown hook via decorator.

        Hooks run in registration order during ASGI lifespan shutdown.
        """
        self._shutdown_hooks.append(func)
        return func

    # -- Serving --

    async def stream(self, requests: AsyncIterable[TransportRequest]) -> None:
        """Serve an async iterable of transport requests (non-ASGI transports)."""
        await stream(self.handler, requests, config=self.config)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles lifespan directly, then delegates HTTP scopes to the
        server bridge. Other scope types are ignored.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        if scope["type"] != "http":
            return

        await serve_request(self.handler, ASGIRequest(scope, receive, send), self.config)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol."""
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    await _run_hooks(self._startup_hooks)
                except Exception as exc:
                    logger.exception("Startup hook failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await _run_hooks(self._shutdown_hooks)
                await send({"type": "lifespan.shutdown.complete"})
                return


async def _run_hooks(hooks: list[Callable[..., Any]]) -> None:
    for hook in hooks:
        result = hook()
        if inspect.isawaitable(result):
            await result
