"""Typed ASGI definitions.

Replaces the standard Scope = MutableMapping[str, Any] with a typed
dataclass for internal use. Users never see these.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from dataclasses import dataclass
from typing import Any, TypeAlias

# Raw ASGI 3.0 types
Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]


@dataclass(frozen=True, slots=True)
class HTTPScope:
    """Typed HTTP scope parsed from raw ASGI scope dict.

    Internal only -- users interact with Request, not this.
    """

    type: str
    method: str
    path: str
    raw_path: bytes
    query_string: bytes
    headers: tuple[tuple[bytes, bytes], ...]

    @classmethod
    def from_scope(cls, scope: Scope) -> "HTTPScope":
        """Parse raw ASGI scope into typed object."""
        return cls(
            type=scope["type"],
            method=scope["method"],
            path=scope["path"],
            raw_path=scope.get("raw_path") or b"",
            query_string=scope.get("query_string", b""),
            headers=tuple(tuple(pair) for pair in scope.get("headers", ())),
        )

    @property
    def url(self) -> str:
        """Path plus query string, as the client sent it.

        Built from ``raw_path`` when the server supplies one, so percent
        escapes such as ``%3F`` reach routing undecoded.
        """
        raw_path = self.raw_path.partition(b"?")[0]
        path = raw_path.decode("latin-1") if raw_path else self.path
        if self.query_string:
            return f"{path}?{self.query_string.decode('latin-1')}"
        return path
