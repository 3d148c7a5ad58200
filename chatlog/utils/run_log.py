from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from chatlog.errors import ApiError
from chatlog.schema import CompletionResponse, Conversation


@dataclass(frozen=True)
class RunLogPaths:
    run_id: str
    jsonl_path: Path


def make_run_id() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def init_run_log(log_dir: Path, run_id: str) -> RunLogPaths:
    log_dir.mkdir(parents=True, exist_ok=True)
    return RunLogPaths(run_id=run_id, jsonl_path=log_dir / f"run_{run_id}.jsonl")


def append_exchange(
    paths: RunLogPaths,
    conversation: Conversation,
    *,
    response: CompletionResponse | None = None,
    error: ApiError | None = None,
    extra: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Append one request/outcome pair as a JSON line.
    A response may accompany an error when it arrived but could not be used.
    The API key is never written.
    """
    payload: dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "run_id": paths.run_id,
        "messages": conversation.model_dump(mode="json"),
    }
    if response is not None:
        payload["response"] = response.model_dump(mode="json")
    if error is not None:
        payload["error"] = {"kind": error.kind.value, "message": error.message}
    if extra:
        payload.update(extra)
    with paths.jsonl_path.open("a", encoding="utf-8", newline="\n") as f:
        f.write(json.dumps(payload, ensure_ascii=False) + "\n")
    return payload
