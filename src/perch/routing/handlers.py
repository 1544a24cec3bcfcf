"""Per-method route entry factories.

Each factory binds a pattern to a handler and returns a ``RouteEntry``:
a predicate that accepts requests with the right method and path, plus
a wrapper that calls the handler in the shape it was registered with.

Two handler shapes exist, and the shape is fixed at registration time:

- ``HandlerKind.SIMPLE`` — ``handler(request)``
- ``HandlerKind.CONTEXT`` — ``handler(options, request)`` where
  ``options`` always carries the compiled ``pattern``

Handlers produced by ``explode``, ``parse_request`` or ``context_aware``
are ``ContextHandler`` instances and register as CONTEXT automatically::

    from perch.routing.handlers import get, post

    routes = (
        get("/", index),
        post(re.compile(r"/hoge/(?P<ID>[a-z]+)$"), explode(update_hoge)),
    )
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import StrEnum
from types import SimpleNamespace
from typing import Any

from perch._internal.types import Handler, Options, Predicate
from perch.errors import ConfigurationError
from perch.http.request import Request
from perch.routing.pattern import Pattern, compile_pattern, matches


class HandlerKind(StrEnum):
    """How a route entry calls its handler."""

    SIMPLE = "simple"
    CONTEXT = "context"


@dataclass(frozen=True, slots=True)
class ContextHandler:
    """A handler that takes ``(options, request)``.

    Marks the function so the factories register it as
    ``HandlerKind.CONTEXT`` without inspecting its signature.
    """

    func: Callable[[Options, Request], Any]

    def __call__(self, options: Options, request: Request) -> Any:
        return self.func(options, request)


def context_aware(func: Callable[[Options, Request], Any]) -> ContextHandler:
    """Decorator: register *func* as a context-aware handler."""
    return ContextHandler(func)


@dataclass(frozen=True, slots=True)
class MethodPredicate:
    """True iff the request uses ``method`` and its path matches ``pattern``."""

    method: str
    pattern: Pattern

    def __call__(self, request: Request) -> bool:
        return request.method == self.method and matches(self.pattern, request)


@dataclass(frozen=True, slots=True)
class BoundHandler:
    """Calls the registered handler in its registered shape."""

    func: Handler
    kind: HandlerKind
    pattern: Pattern

    def __call__(self, request: Request, options: Options | None = None) -> Any:
        if self.kind is HandlerKind.CONTEXT:
            return self.func({"pattern": self.pattern, **(options or {})}, request)
        return self.func(request)


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """A ``(predicate, handler)`` pair.

    Unpacks like a tuple::

        predicate, handler = get("/", index)
    """

    predicate: Predicate
    handler: Callable[..., Any]

    def __iter__(self) -> Iterator[Any]:
        yield self.predicate
        yield self.handler


def factorize_handler(
    method: str,
) -> Callable[..., RouteEntry]:
    """Build the route entry factory for one HTTP *method*."""
    method = method.upper()

    def factory(
        pattern: str | re.Pattern[str] | Pattern,
        handler: Handler,
        *,
        kind: HandlerKind | None = None,
    ) -> RouteEntry:
        if not callable(handler):
            msg = f"Handler for {method} {pattern!r} is not callable."
            raise ConfigurationError(msg)
        compiled = compile_pattern(pattern)
        if kind is None:
            kind = HandlerKind.CONTEXT if isinstance(handler, ContextHandler) else HandlerKind.SIMPLE
        return RouteEntry(
            predicate=MethodPredicate(method, compiled),
            handler=BoundHandler(handler, kind, compiled),
        )

    factory.__name__ = method.lower()
    factory.__qualname__ = method.lower()
    factory.__doc__ = f"Route {method} requests whose path matches *pattern* to *handler*."
    return factory


delete = factorize_handler("DELETE")
get = factorize_handler("GET")
patch = factorize_handler("PATCH")
post = factorize_handler("POST")
put = factorize_handler("PUT")

# Namespace mirroring the module-level factories: ``handlers.get(...)``
handlers = SimpleNamespace(delete=delete, get=get, patch=patch, post=post, put=put)

