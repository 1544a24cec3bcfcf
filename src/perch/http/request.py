"""Immutable HTTP request.

A request is two things: a header mapping and a fully buffered body.
The header mapping also carries the pseudo-headers ``method`` and
``url`` so that every piece of request metadata lives in one place —
predicates, parsers and handlers all read from ``request.headers``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from perch.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Constructed once per incoming transport request, never mutated::

        Request({"method": "GET", "url": "/hoge?status=active"}, b"")

    A plain mapping passed as ``headers`` is converted to ``Headers``.
    """

    headers: Headers = field(default_factory=Headers)
    raw: bytes = b""

    def __post_init__(self) -> None:
        if not isinstance(self.headers, Headers):
            object.__setattr__(self, "headers", Headers(self.headers))
        if not isinstance(self.raw, bytes):
            object.__setattr__(self, "raw", bytes(self.raw))

    # -- Computed properties --

    @property
    def method(self) -> str:
        """The HTTP method (``method`` pseudo-header)."""
        return self.headers.get("method", "")

    @property
    def url(self) -> str:
        """Path plus query string (``url`` pseudo-header)."""
        return self.headers.get("url", "")

    @property
    def path(self) -> str:
        """The URL with everything from the first ``?`` onward removed."""
        return self.url.partition("?")[0]

    @property
    def query_string(self) -> str:
        """The raw text after the first ``?``, or ``""``."""
        return self.url.partition("?")[2]

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get("content-type")

    # -- Factory --

    @classmethod
    def build(
        cls,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | Iterable[tuple[str, str]] = (),
        body: bytes = b"",
    ) -> Request:
        """Create a Request from transport-level parts.

        Transport headers come first; ``method`` and ``url`` are added
        last so a stray transport header cannot shadow them.
        """
        pseudo = {"method": method.upper(), "url": url}
        return cls(Headers(headers).merge(pseudo), body)
