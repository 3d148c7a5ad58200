"""Tests for settings loading and client construction from settings."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from chatlog.config import Settings, load_settings
from chatlog.llm import MockChatClient, OpenAIChatClient, build_client

ENV_VARS = (
    "CHATLOG_BACKEND",
    "OPENAI_API_KEY",
    "OPENAI_KEY",
    "CHATLOG_MODEL",
    "CHATLOG_BASE_URL",
    "CHATLOG_TIMEOUT_S",
    "CHATLOG_LOG_DIR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for var in ENV_VARS:
        # setenv first so values loaded from a .env are undone at teardown
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    # Keep a developer's .env out of the picture.
    monkeypatch.chdir(tmp_path)


def _settings(**overrides) -> Settings:
    base = Settings(
        backend="openai",
        openai_api_key="sk-test",
        model="gpt-3.5-turbo",
        base_url="https://api.openai.com/v1",
        timeout_s=None,
        log_dir=Path("logs"),
    )
    return dataclasses.replace(base, **overrides)


class TestLoadSettings:
    def test_defaults(self, tmp_path):
        s = load_settings()
        assert s.backend == "openai"
        assert s.openai_api_key is None
        assert s.model == "gpt-3.5-turbo"
        assert s.base_url == "https://api.openai.com/v1"
        assert s.timeout_s is None
        assert s.log_dir == (tmp_path / "logs").resolve()

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("CHATLOG_BACKEND", " MOCK ")
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        monkeypatch.setenv("CHATLOG_MODEL", "gpt-4o")
        monkeypatch.setenv("CHATLOG_BASE_URL", "http://localhost:8080/v1")
        monkeypatch.setenv("CHATLOG_TIMEOUT_S", "30")
        s = load_settings()
        assert s.backend == "mock"
        assert s.openai_api_key == "sk-env"
        assert s.model == "gpt-4o"
        assert s.base_url == "http://localhost:8080/v1"
        assert s.timeout_s == 30.0

    def test_legacy_key_name(self, monkeypatch):
        monkeypatch.setenv("OPENAI_KEY", "sk-legacy")
        assert load_settings().openai_api_key == "sk-legacy"

    def test_empty_values_use_defaults(self, monkeypatch):
        monkeypatch.setenv("CHATLOG_MODEL", "")
        monkeypatch.setenv("OPENAI_API_KEY", "")
        s = load_settings()
        assert s.model == "gpt-3.5-turbo"
        assert s.openai_api_key is None

    def test_dotenv_file(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("CHATLOG_MODEL=from-dotenv\n", encoding="utf-8")
        assert load_settings().model == "from-dotenv"

    def test_environment_wins_over_dotenv(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("CHATLOG_MODEL=from-dotenv\n", encoding="utf-8")
        monkeypatch.setenv("CHATLOG_MODEL", "from-env")
        assert load_settings().model == "from-env"


class TestBuildClient:
    def test_openai(self):
        client = build_client(_settings(model="gpt-4o", base_url="http://gw/v1/", timeout_s=5.0))
        assert isinstance(client, OpenAIChatClient)
        assert client.model == "gpt-4o"
        assert client.base_url == "http://gw/v1"
        client.close()

    def test_openai_without_key(self):
        with pytest.raises(RuntimeError, match="OPENAI_API_KEY"):
            build_client(_settings(openai_api_key=None))

    def test_mock(self):
        client = build_client(_settings(backend="mock", openai_api_key=None))
        assert isinstance(client, MockChatClient)

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown CHATLOG_BACKEND"):
            build_client(_settings(backend="gemini"))
