from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from chatlog.schema import DEFAULT_MODEL


@dataclass(frozen=True)
class Settings:
    backend: str

    openai_api_key: str | None
    model: str
    base_url: str
    timeout_s: float | None

    log_dir: Path


def load_settings() -> Settings:
    # Allow users to keep secrets in a `.env` next to where they run (not committed).
    load_dotenv(find_dotenv(usecwd=True), override=False)

    def getenv(key: str, default: str | None = None) -> str | None:
        v = os.getenv(key)
        if v is None or v == "":
            return default
        return v

    backend = (getenv("CHATLOG_BACKEND", "openai") or "openai").strip().lower()

    openai_api_key = getenv("OPENAI_API_KEY", None) or getenv("OPENAI_KEY", None)
    model = getenv("CHATLOG_MODEL", DEFAULT_MODEL) or DEFAULT_MODEL
    base_url = getenv("CHATLOG_BASE_URL", "https://api.openai.com/v1") or ""

    raw_timeout = getenv("CHATLOG_TIMEOUT_S", None)
    timeout_s = float(raw_timeout) if raw_timeout is not None else None

    log_dir = Path(getenv("CHATLOG_LOG_DIR", "logs") or "logs").resolve()

    return Settings(
        backend=backend,
        openai_api_key=openai_api_key,
        model=model,
        base_url=base_url,
        timeout_s=timeout_s,
        log_dir=log_dir,
    )
