"""HTTP response with chainable .with_*() transformation API.

Each transformation returns a new Response. Immutable by convention,
built incrementally by design.
"""

from __future__ import annotations

import json as json_module
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    Construct with a body (or use one of the named constructors), then
    chain ``.with_*()`` calls to set status and headers::

        Response.ok(b"Hello, Hoge!").with_content_type("text/plain")
    """

    raw: bytes = b""
    status: int = 200
    headers: tuple[tuple[str, str], ...] = ()

    # -- Chainable transformations --

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Return a new Response with additional headers."""
        new = tuple(headers.items())
        return replace(self, headers=(*self.headers, *new))

    def with_content_type(self, content_type: str) -> Response:
        """Return a new Response whose Content-Type is *content_type*."""
        kept = tuple(pair for pair in self.headers if pair[0].lower() != "content-type")
        return replace(self, headers=(*kept, ("content-type", content_type)))

    # -- Accessors --

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return the first value of header *name* (case-insensitive)."""
        name_lower = name.lower()
        for key, value in self.headers:
            if key.lower() == name_lower:
                return value
        return default

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.header("content-type")

    @property
    def text(self) -> str:
        """Body decoded as UTF-8."""
        return self.raw.decode("utf-8")

    # -- Named constructors --

    @classmethod
    def of(
        cls,
        status: int,
        headers: Mapping[str, str] | None = None,
        raw: bytes = b"",
    ) -> Response:
        """Build a response from status, header mapping and body."""
        return cls(raw=raw, status=status, headers=tuple((headers or {}).items()))

    @classmethod
    def ok(cls, raw: bytes = b"", headers: Mapping[str, str] | None = None) -> Response:
        """200 OK."""
        return cls.of(200, headers, raw)

    @classmethod
    def created(cls, raw: bytes = b"", headers: Mapping[str, str] | None = None) -> Response:
        """201 Created."""
        return cls.of(201, headers, raw)

    @classmethod
    def no_content(cls, headers: Mapping[str, str] | None = None) -> Response:
        """204 No Content."""
        return cls.of(204, headers)

    @classmethod
    def bad_request(cls, raw: bytes = b"", headers: Mapping[str, str] | None = None) -> Response:
        """400 Bad Request."""
        return cls.of(400, headers, raw)

    @classmethod
    def unauthorized(cls, raw: bytes = b"", headers: Mapping[str, str] | None = None) -> Response:
        """401 Unauthorized."""
        return cls.of(401, headers, raw)

    @classmethod
    def forbidden(cls, raw: bytes = b"", headers: Mapping[str, str] | None = None) -> Response:
        """403 Forbidden."""
        return cls.of(403, headers, raw)

    @classmethod
    def not_found(cls, raw: bytes = b"", headers: Mapping[str, str] | None = None) -> Response:
        """404 Not Found. The router fallback uses the empty default."""
        return cls.of(404, headers, raw)

    @classmethod
    def payload_too_large(
        cls, raw: bytes = b"", headers: Mapping[str, str] | None = None
    ) -> Response:
        """413 Payload Too Large."""
        return cls.of(413, headers, raw)

    @classmethod
    def internal_server_error(
        cls, raw: bytes = b"", headers: Mapping[str, str] | None = None
    ) -> Response:
        """500 Internal Server Error."""
        return cls.of(500, headers, raw)

    @classmethod
    def text_body(cls, text: str, status: int = 200) -> Response:
        """A ``text/plain`` UTF-8 response."""
        return cls(raw=text.encode("utf-8"), status=status).with_content_type(
            "text/plain; charset=utf-8"
        )

    @classmethod
    def json(cls, data: Any, status: int = 200) -> Response:
        """An ``application/json`` response serialising *data*."""
        return cls(raw=json_module.dumps(data).encode("utf-8"), status=status).with_content_type(
            "application/json"
        )
