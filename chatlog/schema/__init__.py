from .conversation import Conversation, Message, Role
from .request import DEFAULT_MODEL, CompletionRequest
from .response import Choice, CompletionResponse, FinishReason, Usage

__all__ = [
    "Choice",
    "CompletionRequest",
    "CompletionResponse",
    "Conversation",
    "DEFAULT_MODEL",
    "FinishReason",
    "Message",
    "Role",
    "Usage",
]
