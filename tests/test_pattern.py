"""Tests for perch.routing.pattern — literal and regex path patterns."""

import re

import pytest

from perch.errors import ConfigurationError
from perch.http.request import Request
from perch.routing.pattern import Literal, Regex, compile_pattern, matches


def _request(url: str, method: str = "GET") -> Request:
    return Request({"method": method, "url": url})


class TestCompilePattern:
    def test_string_is_literal(self) -> None:
        assert compile_pattern("/hoge") == Literal("/hoge")

    def test_regex_is_regex(self) -> None:
        regex = re.compile(r"/hoge/(?P<ID>[a-z]+)$")
        assert compile_pattern(regex) == Regex(regex)

    def test_variants_pass_through(self) -> None:
        literal = Literal("/")
        assert compile_pattern(literal) is literal

    def test_rejects_other_types(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            compile_pattern(42)  # type: ignore[arg-type]
        assert "int" in str(exc_info.value)


class TestLiteral:
    def test_exact_match(self) -> None:
        assert matches(Literal("/hoge"), _request("/hoge"))

    def test_query_string_is_ignored(self) -> None:
        assert matches(Literal("/hoge"), _request("/hoge?status=active"))

    def test_no_normalisation(self) -> None:
        assert not matches(Literal("/hoge"), _request("/hoge/"))
        assert not matches(Literal("/hoge"), _request("/HOGE"))
        assert not matches(Literal("/hoge piyo"), _request("/hoge%20piyo"))

    def test_never_captures(self) -> None:
        assert Literal("/hoge").captures("/hoge") == {}


class TestRegex:
    def test_search_semantics(self) -> None:
        pattern = compile_pattern(re.compile(r"/hoge/(?P<ID>[a-z]+)$"))
        assert matches(pattern, _request("/hoge/piyo"))
        assert matches(pattern, _request("/api/hoge/piyo"))
        assert not matches(pattern, _request("/hoge/123"))

    def test_tested_against_stripped_path(self) -> None:
        pattern = compile_pattern(re.compile(r"/hoge/(?P<ID>[a-z]+)$"))
        assert matches(pattern, _request("/hoge/piyo?fuga=fuga"))

    def test_captures_named_groups(self) -> None:
        pattern = Regex(re.compile(r"/hoge/(?P<ID>.+?)$"))
        assert pattern.captures("/hoge/piyo") == {"ID": "piyo"}

    def test_captures_empty_without_match(self) -> None:
        pattern = Regex(re.compile(r"/hoge/(?P<ID>.+?)$"))
        assert pattern.captures("/") == {}

    def test_non_participating_groups_are_omitted(self) -> None:
        pattern = Regex(re.compile(r"/(?P<a>x)?(?P<b>y)"))
        assert pattern.captures("/y") == {"b": "y"}
