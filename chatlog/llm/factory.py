from __future__ import annotations

from chatlog.config import Settings

from .base import ChatClient
from .mock import MockChatClient
from .openai_compat import OpenAIChatClient


def build_client(settings: Settings) -> ChatClient:
    backend = settings.backend
    if backend == "mock":
        return MockChatClient(model=settings.model)
    if backend == "openai":
        if not settings.openai_api_key:
            raise RuntimeError("OPENAI_API_KEY is not set but CHATLOG_BACKEND=openai")
        return OpenAIChatClient(
            settings.openai_api_key,
            model=settings.model,
            base_url=settings.base_url,
            timeout_s=settings.timeout_s,
        )
    raise ValueError(f"Unknown CHATLOG_BACKEND={backend!r}, expected one of: openai|mock")
