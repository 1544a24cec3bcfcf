"""Perch exception hierarchy.

Shared across the Router, parsers, middleware and the server bridge so
every module raises and catches the same types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from perch.http.response import Response


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when a route table or handler registration is invalid.

    Always raised at setup time, never while a request is being served.
    """


class TransportError(PerchError):
    """Raised when a transport request is misused (e.g. answered twice)."""


@dataclass(frozen=True, slots=True)
class HTTPError(PerchError):
    """An error that maps directly to an HTTP status code.

    Raised by parsers and handlers. The server bridge converts it into a
    plain-text response carrying ``status`` and ``detail``.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class BadRequest(HTTPError):  # noqa: N818
    """400 — the request body could not be parsed."""

    def __init__(self, detail: str = "Bad Request") -> None:
        super().__init__(status=400, detail=detail)


class PayloadTooLarge(HTTPError):  # noqa: N818
    """413 — the request body exceeds ``ServerConfig.max_content_length``."""

    def __init__(self, limit: int, detail: str = "") -> None:
        super().__init__(
            status=413,
            detail=detail or f"Request body exceeds {limit} bytes",
        )


class Rejection(PerchError):  # noqa: N818
    """Short-circuit a request with a ready-made response.

    Raise it from a middleware check or a handler::

        async def authorize(request: Request) -> Options:
            if request.headers.get("accept") != "application/json":
                raise Rejection(Response.bad_request())
            return {"authorization_token": "hoge"}

    The raise is normalised to ``Err(response)``, exactly as if the check
    had returned the failure itself.
    """

    def __init__(self, response: Response) -> None:
        super().__init__(f"Rejected with status {response.status}")
        self.response = response
