"""Tests for perch.server.sender response emission rules."""

import pytest

from perch.server.sender import send_response
from perch.server.transport import ResponseDescriptor


def _descriptor(status: int, body: bytes, headers=()) -> ResponseDescriptor:
    return ResponseDescriptor(status=status, headers=tuple(headers), body=body)


class TestSendResponseNoBodyStatuses:
    @pytest.mark.asyncio
    async def test_204_drops_body_and_sets_zero_content_length(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        await send_response(_descriptor(204, b"unexpected-body"), send)

        assert messages[0]["type"] == "http.response.start"
        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"0"

        assert messages[1]["type"] == "http.response.body"
        assert messages[1]["body"] == b""

    @pytest.mark.asyncio
    async def test_304_drops_body(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        await send_response(_descriptor(304, b"unexpected-body"), send)

        assert dict(messages[0]["headers"])[b"content-length"] == b"0"
        assert messages[1]["body"] == b""

    @pytest.mark.asyncio
    async def test_200_preserves_body(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        await send_response(_descriptor(200, b"ok"), send)

        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"2"
        assert messages[1]["body"] == b"ok"


class TestSendResponseHeaders:
    @pytest.mark.asyncio
    async def test_names_lower_cased_and_length_recomputed(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        descriptor = _descriptor(
            200, b"hoge", [("X-Hoge", "hoge"), ("Content-Length", "999")]
        )
        await send_response(descriptor, send)

        headers = messages[0]["headers"]
        assert (b"x-hoge", b"hoge") in headers
        assert dict(headers)[b"content-length"] == b"4"
        assert len([name for name, _ in headers if name == b"content-length"]) == 1
