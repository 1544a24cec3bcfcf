"""Settled outcomes of deferred computations.

A deferred computation in perch is an ordinary coroutine: calling an
``async def`` builds it, nothing runs until it is awaited. What it
resolves to is a ``Result`` — either ``Ok(value)`` or ``Err(error)`` —
and callers branch on it with ``match``::

    match await handler(request):
        case Ok(response):
            ...
        case Err(error):
            ...

Handlers and middleware checks do not have to build results by hand.
``settle`` accepts whatever they produce (an awaitable, a ``Result`` or a
bare value) and normalises it.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any

from perch.errors import Rejection


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful outcome."""

    value: T


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed outcome. ``error`` is a Response for short-circuits."""

    error: E


type Result[T, E] = Ok[T] | Err[E]


async def succeed[T](value: T) -> Ok[T]:
    """A computation that resolves to ``Ok(value)`` once awaited."""
    return Ok(value)


async def fail[E](error: E) -> Err[E]:
    """A computation that resolves to ``Err(error)`` once awaited."""
    return Err(error)


async def settle(value: Any) -> Result[Any, Any]:
    """Await *value* if needed and wrap it into a ``Result``.

    - awaitables are awaited, repeatedly, until a non-awaitable remains;
    - ``Ok`` and ``Err`` pass through untouched;
    - a raised ``Rejection`` becomes ``Err(rejection.response)``;
    - anything else is a success.

    Other exceptions propagate: they are faults, not outcomes.
    """
    try:
        while inspect.isawaitable(value):
            value = await value
    except Rejection as rejection:
        return Err(rejection.response)
    if isinstance(value, Ok | Err):
        return value
    return Ok(value)
