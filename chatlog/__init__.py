"""Minimal synchronous client for OpenAI-style chat completions."""

from .errors import ApiError, DecodeError, ErrorKind, NoChoicesError, TransportError
from .llm import ChatClient, MockChatClient, OpenAIChatClient, build_client
from .schema import (
    DEFAULT_MODEL,
    Choice,
    CompletionRequest,
    CompletionResponse,
    Conversation,
    FinishReason,
    Message,
    Role,
    Usage,
)

__all__ = [
    "ApiError",
    "ChatClient",
    "Choice",
    "CompletionRequest",
    "CompletionResponse",
    "Conversation",
    "DEFAULT_MODEL",
    "DecodeError",
    "ErrorKind",
    "FinishReason",
    "Message",
    "MockChatClient",
    "NoChoicesError",
    "OpenAIChatClient",
    "Role",
    "TransportError",
    "Usage",
    "build_client",
]
