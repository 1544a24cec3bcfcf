"""Middleware — pre-handler checks, no inheritance required.

A check is any callable matching::

    async def check(request: Request) -> Options | Ok[Options] | Err[Response]: ...

``with_middleware(check)(handler)`` runs the check, then hands its
options to ``handler(options, request)``, or short-circuits with the
check's failure.
"""

from perch.middleware.compose import all_of, with_middleware
from perch.middleware.protocol import Check

__all__ = [
    "Check",
    "all_of",
    "with_middleware",
]
