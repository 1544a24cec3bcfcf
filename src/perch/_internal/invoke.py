"""Invoke helpers — call handlers and checks uniformly.

Perch handlers can be ``def`` or ``async def``, and may return a
``Result``, a bare ``Response`` or raise ``Rejection``. Any code that
calls a user-provided callable goes through ``invoke`` so the
normalisation lives in exactly one place.

Usage::

    from perch._internal.invoke import invoke

    result = await invoke(handler, request)
"""

from typing import Any

from perch.errors import Rejection
from perch.result import Err, Result, settle


async def invoke(func: Any, *args: Any) -> Result[Any, Any]:
    """Call *func* and settle whatever it produced.

    A ``Rejection`` raised before the computation is even built (a plain
    ``def`` that raises) is folded the same way as one raised while
    awaiting it.
    """
    try:
        produced = func(*args)
    except Rejection as rejection:
        return Err(rejection.response)
    return await settle(produced)
