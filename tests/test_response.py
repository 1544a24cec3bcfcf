"""Tests for perch.http.response — immutable Response with chainable API."""

import dataclasses
import json

import pytest

from perch.http.response import Response


class TestResponse:
    def test_defaults(self) -> None:
        response = Response()
        assert response.raw == b""
        assert response.status == 200
        assert response.headers == ()

    def test_frozen(self) -> None:
        response = Response()
        with pytest.raises(dataclasses.FrozenInstanceError):
            response.status = 500  # type: ignore[misc]

    def test_with_status_returns_new(self) -> None:
        original = Response(b"ok")
        changed = original.with_status(201)
        assert original.status == 200
        assert changed.status == 201
        assert changed.raw == b"ok"

    def test_with_header_appends(self) -> None:
        response = Response().with_header("X-A", "1").with_header("X-B", "2")
        assert response.headers == (("X-A", "1"), ("X-B", "2"))

    def test_with_headers(self) -> None:
        response = Response().with_headers({"X-A": "1", "X-B": "2"})
        assert response.header("x-a") == "1"
        assert response.header("X-B") == "2"
        assert response.header("missing") is None

    def test_with_content_type_replaces(self) -> None:
        response = Response().with_content_type("text/html").with_content_type("text/plain")
        assert response.content_type == "text/plain"
        assert len(response.headers) == 1

    def test_text(self) -> None:
        assert Response("héllo".encode()).text == "héllo"


class TestNamedConstructors:
    @pytest.mark.parametrize(
        ("factory", "status"),
        [
            (Response.ok, 200),
            (Response.created, 201),
            (Response.bad_request, 400),
            (Response.unauthorized, 401),
            (Response.forbidden, 403),
            (Response.not_found, 404),
            (Response.payload_too_large, 413),
            (Response.internal_server_error, 500),
        ],
    )
    def test_status(self, factory, status: int) -> None:
        response = factory(b"body", {"x-hoge": "hoge"})
        assert response.status == status
        assert response.raw == b"body"
        assert response.header("x-hoge") == "hoge"

    def test_not_found_is_empty(self) -> None:
        response = Response.not_found()
        assert response.status == 404
        assert response.raw == b""

    def test_no_content(self) -> None:
        assert Response.no_content().status == 204

    def test_text_body(self) -> None:
        response = Response.text_body("boom", status=500)
        assert response.status == 500
        assert response.raw == b"boom"
        assert response.content_type == "text/plain; charset=utf-8"

    def test_json(self) -> None:
        response = Response.json({"status": "active"}, status=201)
        assert response.status == 201
        assert json.loads(response.raw) == {"status": "active"}
        assert response.content_type == "application/json"
