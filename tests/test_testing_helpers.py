"""Tests for perch.testing — MemoryRequest and TestClient."""

import pytest

from perch.app import App
from perch.errors import PayloadTooLarge, TransportError
from perch.http.request import Request
from perch.http.response import Response
from perch.server.transport import ResponseDescriptor
from perch.testing import MemoryRequest, TestClient


class TestMemoryRequest:
    def test_mapping_headers_become_pairs(self) -> None:
        transport = MemoryRequest("GET", "/", {"accept": "*/*"})
        assert transport.headers == (("accept", "*/*"),)

    @pytest.mark.asyncio
    async def test_body_limit(self) -> None:
        transport = MemoryRequest("POST", "/", raw=b"hoge")
        assert await transport.body(4) == b"hoge"
        with pytest.raises(PayloadTooLarge):
            await transport.body(3)

    @pytest.mark.asyncio
    async def test_captures_single_response(self) -> None:
        transport = MemoryRequest("GET", "/")
        descriptor = ResponseDescriptor(200, (), b"")
        await transport.respond(descriptor)
        assert transport.response is descriptor
        with pytest.raises(TransportError):
            await transport.respond(descriptor)


class TestTestClient:
    @pytest.mark.asyncio
    async def test_sends_headers_query_and_json(self) -> None:
        seen: list[Request] = []

        def handler(request: Request) -> Response:
            seen.append(request)
            return Response.created(b"done", {"X-Hoge": "hoge"})

        async with TestClient(App(handler)) as client:
            response = await client.patch("/hoge?x=1", headers={"X-Token": "t"}, json={"a": 1})

        (request,) = seen
        assert request.method == "PATCH"
        assert request.url == "/hoge?x=1"
        assert request.headers["x-token"] == "t"
        assert request.content_type == "application/json"
        assert request.raw == b'{"a": 1}'

        assert response.status == 201
        assert response.raw == b"done"
        assert response.header("x-hoge") == "hoge"
        assert response.header("content-length") is None
