from __future__ import annotations

from enum import Enum
from typing import Iterator, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel, ValidationError

from chatlog.errors import DecodeError

W = TypeVar("W", bound="WireModel")


class Role(str, Enum):
    """Who authored a dialogue turn."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class WireModel(BaseModel):
    """Frozen model with a canonical compact JSON encoding."""

    model_config = ConfigDict(frozen=True)

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls: type[W], data: str | bytes) -> W:
        try:
            return cls.model_validate_json(data)
        except ValidationError as exc:
            raise DecodeError(f"invalid {cls.__name__}: {exc}") from exc


class Message(WireModel):
    role: Role
    content: str


class Conversation(RootModel[list[Message]]):
    """
    Ordered dialogue history. Order is chronological and kept as-is on the wire;
    repeated roles are allowed.
    """

    model_config = ConfigDict(frozen=True)

    root: list[Message] = []

    @classmethod
    def of(cls, *messages: Message) -> Conversation:
        return cls(list(messages))

    def __iter__(self) -> Iterator[Message]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, idx: int) -> Message:
        return self.root[idx]

    def append(self, role: Role, content: str) -> Conversation:
        """Return a new conversation with one more turn at the end."""
        return Conversation([*self.root, Message(role=role, content=content)])

    def system(self, content: str) -> Conversation:
        return self.append(Role.SYSTEM, content)

    def user(self, content: str) -> Conversation:
        return self.append(Role.USER, content)

    def assistant(self, content: str) -> Conversation:
        return self.append(Role.ASSISTANT, content)

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, data: str | bytes) -> Conversation:
        try:
            return cls.model_validate_json(data)
        except ValidationError as exc:
            raise DecodeError(f"invalid Conversation: {exc}") from exc
