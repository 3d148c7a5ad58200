from __future__ import annotations

from typing import Protocol, runtime_checkable

from chatlog.schema import CompletionResponse, Conversation


@runtime_checkable
class ChatClient(Protocol):
    def complete_chat(self, conversation: Conversation) -> CompletionResponse:
        """Exchange one conversation for one completion, or raise ApiError."""
        raise NotImplementedError
