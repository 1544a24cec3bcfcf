"""Path patterns — literal strings or regular expressions.

A pattern is resolved once, at registration time, into one of two
frozen variants. Neither variant normalises the path: trailing slashes,
case and percent-encoding are compared as-is.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from perch.errors import ConfigurationError
from perch.http.request import Request


@dataclass(frozen=True, slots=True)
class Literal:
    """Exact path equality.

    ``Literal("/hoge")`` matches ``/hoge`` and ``/hoge?x=1`` (once the
    query is stripped) but not ``/hoge/``.
    """

    path: str

    def matches(self, path: str, /) -> bool:
        return path == self.path

    def captures(self, path: str, /) -> dict[str, str]:
        """Literal patterns never capture."""
        return {}


@dataclass(frozen=True, slots=True)
class Regex:
    """Regular expression tested anywhere in the path.

    Named groups (``(?P<ID>[a-z]+)``) become URL parameters.
    """

    regex: re.Pattern[str]

    def matches(self, path: str, /) -> bool:
        return self.regex.search(path) is not None

    def captures(self, path: str, /) -> dict[str, str]:
        """Named groups of the first match; groups that did not take part are omitted."""
        match = self.regex.search(path)
        if match is None:
            return {}
        return {name: value for name, value in match.groupdict().items() if value is not None}


type Pattern = Literal | Regex


def compile_pattern(pattern: str | re.Pattern[str] | Pattern) -> Pattern:
    """Resolve a raw pattern argument into its variant.

    Raises ``ConfigurationError`` for anything that is neither a string
    nor a compiled regular expression.
    """
    if isinstance(pattern, Literal | Regex):
        return pattern
    if isinstance(pattern, re.Pattern):
        return Regex(pattern)
    if isinstance(pattern, str):
        return Literal(pattern)
    msg = f"Route pattern must be a str or re.Pattern, got {type(pattern).__name__}."
    raise ConfigurationError(msg)


def matches(pattern: Pattern, request: Request) -> bool:
    """Whether *pattern* accepts the request path (query string stripped)."""
    return pattern.matches(request.path)
