"""Request parsing — query string, URL parameters, body, merged context.

Parsers never fail on expected conditions: a missing query string, a
path the pattern does not match and an empty body all yield empty
values. Only a body that claims to be JSON or text and is not raises
``BadRequest``.

The parsers compose into context-aware handlers::

    @explode
    async def update_hoge(meta: dict[str, str], body: Any) -> Response:
        return Response.json({"id": meta["ID"], **body})

    put(re.compile(r"/hoge/(?P<ID>[a-z]+)$"), update_hoge)
"""

from __future__ import annotations

import json as json_module
import re
from collections.abc import Callable, Mapping
from typing import Any
from urllib.parse import parse_qsl

from perch._internal.types import Parser
from perch.errors import BadRequest
from perch.http.request import Request
from perch.routing.handlers import ContextHandler
from perch.routing.pattern import Literal, Pattern, Regex, compile_pattern


def _media_type(content_type: str | None) -> tuple[str, dict[str, str]]:
    """Split a Content-Type value into its lower-cased media type and parameters."""
    if not content_type:
        return "", {}
    media_type, *raw_params = content_type.split(";")
    params: dict[str, str] = {}
    for raw in raw_params:
        name, sep, value = raw.strip().partition("=")
        if sep:
            params[name.strip().lower()] = value.strip().strip('"')
    return media_type.strip().lower(), params


def _pattern_of(options: Any) -> Pattern | None:
    """The pattern carried by route options; any other value counts as none."""
    if not isinstance(options, Mapping):
        return None
    pattern = options.get("pattern")
    if not isinstance(pattern, str | re.Pattern | Literal | Regex):
        return None
    return compile_pattern(pattern)


def parse_query_string(request: Request) -> dict[str, str]:
    """Key/value pairs after the first ``?`` of the request URL.

    Pairs split on the first ``=`` only; ``+`` and percent-escapes are
    decoded; a key without ``=`` maps to ``""``; the last of repeated
    keys wins. Yields ``{}`` when there is no query string.
    """
    query = request.query_string
    if not query:
        return {}
    return dict(parse_qsl(query, keep_blank_values=True))


def parse_url_parameters(
    pattern: str | re.Pattern[str] | Pattern | None,
    request: Request,
) -> dict[str, str]:
    """Named captures of *pattern* applied to the request path.

    Yields ``{}`` when no pattern is given, when it is a literal, or when
    it does not match.
    """
    if pattern is None:
        return {}
    return compile_pattern(pattern).captures(request.path)


def parse_body(request: Request) -> Any:
    """Decode the body according to its Content-Type.

    - empty body → ``{}``, whatever the content type
    - ``application/json`` → the decoded JSON value
    - ``text/*`` → ``str``, using the ``charset`` parameter (UTF-8 by default)
    - anything else → the raw bytes, unchanged
    """
    if not request.raw:
        return {}

    media_type, params = _media_type(request.content_type)

    if media_type == "application/json":
        try:
            return json_module.loads(request.raw)
        except ValueError as exc:
            raise BadRequest(f"Malformed JSON body: {exc}") from exc

    if media_type.startswith("text/"):
        charset = params.get("charset", "utf-8")
        try:
            return request.raw.decode(charset)
        except (LookupError, UnicodeDecodeError) as exc:
            raise BadRequest(f"Body is not valid {charset} text") from exc

    return request.raw


def build_context(options: Any, request: Request) -> dict[str, str]:
    """Merge headers, URL captures and query pairs into one mapping.

    Later sources win on key collisions: query string over URL captures
    over headers (including the ``method`` and ``url`` pseudo-headers).
    """
    return {
        **dict(request.headers),
        **parse_url_parameters(_pattern_of(options), request),
        **parse_query_string(request),
    }


def parse_request(*parsers: Parser) -> Callable[[Callable[..., Any]], ContextHandler]:
    """Feed a handler the results of *parsers*, positionally.

    Each parser is called as ``parser(options, request)``. The wrapped
    handler is context-aware, so the route factories pass it options::

        with_meta = parse_request(build_context)
        get(re.compile(r"/hoge/(?P<ID>.+)$"), with_meta(lambda meta: ...))
    """

    def decorate(handler: Callable[..., Any]) -> ContextHandler:
        def parse_and_call(options: Any, request: Request) -> Any:
            return handler(*(parser(options, request) for parser in parsers))

        return ContextHandler(parse_and_call)

    return decorate


def _body(options: Any, request: Request) -> Any:
    return parse_body(request)


def explode(handler: Callable[..., Any]) -> ContextHandler:
    """Call *handler* as ``handler(meta, body)``.

    ``meta`` is ``build_context(options, request)``; ``body`` is
    ``parse_body(request)``.
    """
    return parse_request(build_context, _body)(handler)
