"""Ordered, first-match router.

The route table is an immutable tuple built once during setup. Entries
are tried strictly in registration order; the first predicate that
holds wins, and a 404 fallback always applies when none does.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from perch.errors import ConfigurationError
from perch.http.request import Request
from perch.http.response import Response
from perch.result import succeed
from perch.routing.handlers import RouteEntry

logger = logging.getLogger("perch.routing")


def _as_entry(entry: Any) -> RouteEntry:
    """Accept a ``RouteEntry`` or any ``(predicate, handler)`` pair."""
    if isinstance(entry, RouteEntry):
        return entry
    try:
        predicate, handler = entry
    except (TypeError, ValueError):
        msg = f"Route entries must be (predicate, handler) pairs, got {entry!r}."
        raise ConfigurationError(msg) from None
    if not callable(predicate) or not callable(handler):
        msg = f"Route entry members must be callable, got {entry!r}."
        raise ConfigurationError(msg)
    return RouteEntry(predicate, handler)


class Router:
    """Immutable route table with first-match dispatch.

    Usage::

        router = Router((get("/", index), post("/hoge", create_hoge)))
        outcome = await router(request)

    Calling the router does not start any work: it returns the matched
    handler's computation (or the 404 fallback) for the caller to await.
    A value that is not a ``Request`` is returned unchanged, so a router
    can sit behind a guard that already replaced the request with a
    response.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[Any] = ()) -> None:
        self._entries: tuple[RouteEntry, ...] = tuple(_as_entry(entry) for entry in entries)

    @property
    def entries(self) -> tuple[RouteEntry, ...]:
        """The route table, in registration order."""
        return self._entries

    def __iter__(self) -> Iterator[RouteEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __add__(self, other: Router) -> Router:
        """A new router trying this table first, then *other*'s."""
        return Router((*self._entries, *other._entries))

    def __call__(self, input: Any) -> Any:  # noqa: A002
        if not isinstance(input, Request):
            return input

        for entry in self._entries:
            if entry.predicate(input):
                logger.debug("%s %s -> %r", input.method, input.url, entry.handler)
                return entry.handler(input)

        logger.debug("%s %s -> no route, 404", input.method, input.url)
        return succeed(Response.not_found())


def route(*entries: Any) -> Router:
    """Build a router from route entries, in the order given.

    Route tables compose by unpacking::

        route(*hoge_routes, *piyo_routes, *fuga_routes)
    """
    return Router(entries)
