from __future__ import annotations

from enum import Enum

from pydantic import Field

from chatlog.errors import NoChoicesError

from .conversation import Message, WireModel


class FinishReason(str, Enum):
    STOP = "stop"  # the model concluded on its own
    LENGTH = "length"  # cut at the token budget


class Choice(WireModel):
    index: int = Field(ge=0, strict=True)
    message: Message
    finish_reason: FinishReason


class Usage(WireModel):
    # total_tokens is reported by the server, not recomputed here.
    prompt_tokens: int = Field(ge=0, strict=True)
    completion_tokens: int = Field(ge=0, strict=True)
    total_tokens: int = Field(ge=0, strict=True)


class CompletionResponse(WireModel):
    """Decoded reply of ``POST /chat/completions``."""

    id: str
    object: str
    created: int = Field(ge=0, strict=True)
    choices: list[Choice]
    usage: Usage

    def first_choice(self) -> Choice:
        """
        Return the first candidate completion.

        Decoding accepts an empty ``choices`` list; this is where the caller
        finds out about it.
        """
        if not self.choices:
            raise NoChoicesError(f"completion {self.id!r} returned no choices")
        return self.choices[0]
