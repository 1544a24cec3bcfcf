"""Check protocol for middleware.

A check is any callable matching::

    async def authorize(request: Request) -> Any: ...

No base class required. The composer checks the outcome, not the
lineage. What the check produces decides what happens next:

- ``Ok(options)`` or a bare value — continue; the value is handed to
  the handler as its options
- ``Err(response)`` or ``raise Rejection(response)`` — stop; the
  response goes straight back to the client
"""

from typing import Any, Protocol

from perch.http.request import Request


class Check(Protocol):
    """Protocol for middleware checks.

    Accepts both functions and callable objects::

        # Function check
        async def authorize(request: Request) -> Any:
            if request.headers.get("accept") == "application/json":
                return Ok({"authorization_token": "hoge"})
            return Err(Response.bad_request())

        # Class check
        class RequireHeader:
            def __init__(self, name: str) -> None:
                self.name = name

            def __call__(self, request: Request) -> Any:
                ...
    """

    def __call__(self, request: Request) -> Any: ...
