from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    TRANSPORT = "transport"
    DECODE = "decode"
    EMPTY = "empty"


class ApiError(Exception):
    """Base failure of a chat completion call. Branch on ``kind``."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TransportError(ApiError):
    """The exchange did not complete: connect/TLS/read failure or a non-2xx reply."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(ApiError):
    """The payload does not match the expected shape."""

    kind = ErrorKind.DECODE


class NoChoicesError(ApiError):
    kind = ErrorKind.EMPTY
