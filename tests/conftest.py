"""Shared fixtures: a recording httpx transport so no test touches the network."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from chatlog.llm import OpenAIChatClient

RESPONSE_A = (
    b'{"id":"x","object":"chat.completion","created":1,'
    b'"choices":[{"index":0,"message":{"role":"assistant","content":"A"},"finish_reason":"stop"}],'
    b'"usage":{"prompt_tokens":10,"completion_tokens":1,"total_tokens":11}}'
)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served in ``requests``."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _handle(request: httpx.Request) -> httpx.Response:
            request.read()
            self.requests.append(request)
            return handler(request)

        super().__init__(_handle)


@pytest.fixture
def make_client():
    """Return a factory building an OpenAIChatClient backed by a canned handler."""
    clients: list[OpenAIChatClient] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response], **kwargs) -> tuple[OpenAIChatClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        client = OpenAIChatClient("sk-test", transport=transport, **kwargs)
        clients.append(client)
        return client, transport

    yield _make
    for c in clients:
        c.close()
