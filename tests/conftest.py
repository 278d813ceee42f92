"""Shared pytest fixtures for fastapi-cancellable-work tests."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

import pytest
from starlette.requests import Request

Message = dict[str, Any]


def _scope(method: str = "GET", path: str = "/") -> dict[str, Any]:
    return {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "scheme": "http",
        "path": path,
        "raw_path": path.encode(),
        "root_path": "",
        "query_string": b"",
        "headers": [(b"host", b"test")],
        "client": ("127.0.0.1", 50000),
        "server": ("test", 80),
    }


@pytest.fixture
def make_scope() -> Callable[..., dict[str, Any]]:
    """Factory for bare ASGI HTTP scopes."""
    return _scope


@pytest.fixture
def make_request() -> Any:
    """Factory for creating Starlette Request objects."""

    def _make(method: str = "GET", path: str = "/") -> Request:
        return Request(_scope(method, path))

    return _make


@pytest.fixture
def make_receive() -> Callable[..., Callable[[], Awaitable[Message]]]:
    """Factory for ASGI ``receive`` callables.

    The request body is delivered first. With ``disconnect_after=None`` the
    client never disconnects; otherwise ``http.disconnect`` is delivered that
    many seconds after the body has been read.
    """

    def _make(
        disconnect_after: float | None = None, body: bytes = b""
    ) -> Callable[[], Awaitable[Message]]:
        pending: list[Message] = [
            {"type": "http.request", "body": body, "more_body": False}
        ]

        async def receive() -> Message:
            if pending:
                return pending.pop(0)
            if disconnect_after is None:
                await asyncio.Event().wait()
            else:
                await asyncio.sleep(disconnect_after)
            return {"type": "http.disconnect"}

        return receive

    return _make


class SendRecorder:
    """ASGI ``send`` callable that keeps every message it is given."""

    def __init__(self) -> None:
        self.messages: list[Message] = []

    async def __call__(self, message: Message) -> None:
        self.messages.append(message)

    @property
    def status(self) -> int | None:
        for message in self.messages:
            if message["type"] == "http.response.start":
                return int(message["status"])
        return None

    @property
    def body(self) -> bytes:
        return b"".join(
            message.get("body", b"")
            for message in self.messages
            if message["type"] == "http.response.body"
        )


@pytest.fixture
def send_recorder() -> SendRecorder:
    return SendRecorder()
