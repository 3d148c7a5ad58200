from __future__ import annotations

import time

from chatlog.schema import (
    Choice,
    CompletionResponse,
    Conversation,
    FinishReason,
    Message,
    Role,
    Usage,
)


class MockChatClient:
    """Deterministic offline backend: useful to try the CLI without an API key."""

    def __init__(self, *, model: str = "mock") -> None:
        self.model = model
        self.calls: list[Conversation] = []

    def complete_chat(self, conversation: Conversation) -> CompletionResponse:
        self.calls.append(conversation)
        # Echo the most recent user turn.
        last_user = next((m.content for m in reversed(conversation.root) if m.role is Role.USER), "")
        prompt_tokens = sum(len(m.content.split()) for m in conversation)
        completion_tokens = len(last_user.split())
        return CompletionResponse(
            id=f"mock-{len(self.calls)}",
            object="chat.completion",
            created=int(time.time()),
            choices=[
                Choice(
                    index=0,
                    message=Message(role=Role.ASSISTANT, content=last_user),
                    finish_reason=FinishReason.STOP,
                )
            ],
            usage=Usage(
                prompt_tokens=prompt_tokens,
                completion_tokens=completion_tokens,
                total_tokens=prompt_tokens + completion_tokens,
            ),
        )
