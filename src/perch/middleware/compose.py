"""Middleware composition.

Middleware is just another handler shape: the router never learns that
a check ran. The composed handler is simple (``handler(request)``), so
it registers like any other::

    authorize = with_middleware(check_accept)

    post("/fuga/piyo", authorize(lambda options, request: Response.json(options)))
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from perch._internal.invoke import invoke
from perch.http.request import Request
from perch.middleware.protocol import Check
from perch.result import Err, Ok, Result

logger = logging.getLogger("perch.middleware")


def with_middleware(
    check: Check,
) -> Callable[[Callable[..., Any]], Callable[[Request], Any]]:
    """Wrap handlers so *check* runs first.

    On success the handler is called as ``handler(options, request)``.
    On failure the check's error (normally a ``Response``) becomes the
    composed result's ``Err`` and the handler never runs.
    """

    def decorate(handler: Callable[..., Any]) -> Callable[[Request], Any]:
        async def checked(request: Request) -> Result[Any, Any]:
            match await invoke(check, request):
                case Err(error):
                    logger.debug("%s %s rejected by %r", request.method, request.url, check)
                    return Err(error)
                case Ok(options):
                    return await invoke(handler, options, request)

        checked.__name__ = getattr(handler, "__name__", checked.__name__)
        checked.__qualname__ = getattr(handler, "__qualname__", checked.__qualname__)
        return checked

    return decorate


def all_of(*checks: Check) -> Check:
    """Run *checks* in order as a single check.

    Stops at the first failure. Mapping options are merged left to right
    (later checks win on collisions); otherwise the last check's options
    are kept.
    """

    async def combined(request: Request) -> Result[Any, Any]:
        options: Any = {}
        for check in checks:
            match await invoke(check, request):
                case Err(error):
                    return Err(error)
                case Ok(value):
                    if isinstance(options, Mapping) and isinstance(value, Mapping):
                        options = {**options, **value}
                    else:
                        options = value
        return Ok(options)

    return combined
