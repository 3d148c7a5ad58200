from __future__ import annotations

from .conversation import Conversation, WireModel

DEFAULT_MODEL = "gpt-3.5-turbo"


class CompletionRequest(WireModel):
    """Body of ``POST /chat/completions``. Built per call and thrown away."""

    model: str
    messages: Conversation

    @classmethod
    def from_conversation(cls, conversation: Conversation, *, model: str = DEFAULT_MODEL) -> CompletionRequest:
        return cls(model=model, messages=conversation)
