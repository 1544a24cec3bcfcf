"""Shared type aliases used across perch modules."""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

# Route predicate: pure function of the request
Predicate: TypeAlias = Callable[[Any], bool]

# Simple handler: (request) -> Result | Response | awaitable of either
Handler: TypeAlias = Callable[..., Any]

# Options delivered to context-aware handlers (always carries "pattern")
Options: TypeAlias = Mapping[str, Any]

# Parser used by parse_request: (options, request) -> value
Parser: TypeAlias = Callable[[Any, Any], Any]
