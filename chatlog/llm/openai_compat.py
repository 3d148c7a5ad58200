from __future__ import annotations

from typing import Any

import httpx

from chatlog.errors import TransportError
from chatlog.schema import DEFAULT_MODEL, CompletionRequest, CompletionResponse, Conversation


class OpenAIChatClient:
    """
    Minimal OpenAI-compatible ChatCompletions client via raw HTTP.
    Works with OpenAI or any OpenAI-compatible gateway if you point base_url accordingly.

    One httpx.Client is opened here and shared by every call (and every thread).
    Nothing is retried and nothing is logged; failures surface as ApiError.
    """

    def __init__(
        self,
        api_key: str,
        *,
        model: str = DEFAULT_MODEL,
        base_url: str = "https://api.openai.com/v1",
        timeout_s: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")

        kwargs: dict[str, Any] = {}
        # None keeps httpx's own default timeout rather than disabling it.
        if timeout_s is not None:
            kwargs["timeout"] = timeout_s
        if transport is not None:
            kwargs["transport"] = transport
        self._client = httpx.Client(**kwargs)

    def complete_chat(self, conversation: Conversation) -> CompletionResponse:
        request = CompletionRequest.from_conversation(conversation, model=self.model)
        url = f"{self.base_url}/chat/completions"
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        # httpx encodes header values as ASCII while building the request.
        try:
            r = self._client.post(url, content=request.to_json().encode("utf-8"), headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as exc:
            raise TransportError(f"POST {url} failed: {exc}") from exc

        if not r.is_success:
            raise TransportError(
                f"POST {url} returned HTTP {r.status_code}: {r.text[:200]}",
                status_code=r.status_code,
            )
        return CompletionResponse.from_json(r.content)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> OpenAIChatClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
