from .base import ChatClient
from .factory import build_client
from .mock import MockChatClient
from .openai_compat import OpenAIChatClient

__all__ = ["ChatClient", "MockChatClient", "OpenAIChatClient", "build_client"]
