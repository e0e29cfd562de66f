"""Shared test fixtures."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from chatask.core import config as config_mod
from chatask.core.config import Settings

_CREDENTIAL_VARS = ("DEEPSEEK_API_KEY", "COZE_API_KEY", "COZE_BOT_ID")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep host credentials, CHATASK_* overrides and any .env out of tests."""
    for name in list(os.environ):
        if name in _CREDENTIAL_VARS or name.upper().startswith("CHATASK_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config_mod, "_settings", None)


@pytest.fixture
def settings() -> Settings:
    """Settings with test credentials for both providers."""
    return Settings(
        deepseek_api_key="sk-deepseek-test",
        coze_api_key="pat-coze-test",
        coze_bot_id="7340000000000000000",
        log_level="DEBUG",
        _env_file=None,
    )


Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def mock_http() -> Callable[[Handler], httpx.AsyncClient]:
    """Return a factory for AsyncClients backed by an httpx.MockTransport."""

    def factory(handler: Handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory
