"""Perch — ordered request routing, parsing and middleware for async Python.

Declare (predicate, handler) pairs, dispatch each request to the first
match, and hand handlers parsed query strings, URL captures and bodies.

Basic usage::

    import re

    from perch import App, Response, explode, route
    from perch.routing.handlers import get, put

    async def index(request):
        return Response.ok(b"Hello, Hoge!")

    @explode
    async def update_hoge(meta, body):
        return Response.json({"id": meta["ID"], **body})

    app = App(
        route(
            get("/", index),
            put(re.compile(r"/hoge/(?P<ID>[a-z]+)$"), update_hoge),
        )
    )

``app`` is an ASGI callable; run it with any ASGI server.
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "BadRequest",
    "ConfigurationError",
    "Err",
    "HTTPError",
    "Headers",
    "Ok",
    "PerchError",
    "Rejection",
    "Request",
    "Response",
    "Router",
    "ServerConfig",
    "build_context",
    "compose",
    "context_aware",
    "explode",
    "fail",
    "handlers",
    "parse_body",
    "parse_query_string",
    "parse_request",
    "parse_url_parameters",
    "route",
    "succeed",
    "with_middleware",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast while providing a clean top-level API.
    """
    if name == "App":
        from perch.app import App

        return App

    if name == "ServerConfig":
        from perch.config import ServerConfig

        return ServerConfig

    if name == "Request":
        from perch.http.request import Request

        return Request

    if name == "Response":
        from perch.http.response import Response

        return Response

    if name == "Headers":
        from perch.http.headers import Headers

        return Headers

    if name in ("Ok", "Err", "succeed", "fail"):
        from perch import result as _result

        return getattr(_result, name)

    if name in ("Router", "route"):
        from perch.routing import router as _router

        return getattr(_router, name)

    if name in ("handlers", "context_aware"):
        from perch.routing import handlers as _handlers

        return getattr(_handlers, name)

    if name in (
        "build_context",
        "explode",
        "parse_body",
        "parse_query_string",
        "parse_request",
        "parse_url_parameters",
    ):
        from perch import parsing as _parsing

        return getattr(_parsing, name)

    if name == "with_middleware":
        from perch.middleware.compose import with_middleware

        return with_middleware

    if name == "compose":
        from perch.functional import compose

        return compose

    if name in ("PerchError", "ConfigurationError", "HTTPError", "BadRequest", "Rejection"):
        from perch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
