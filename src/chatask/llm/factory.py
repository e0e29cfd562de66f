"""Build provider clients from settings."""

from __future__ import annotations

import httpx

from chatask.core.config import Settings
from chatask.llm.base import BaseChatClient
from chatask.llm.coze import CozeClient
from chatask.llm.deepseek import DeepSeekClient
from chatask.llm.types import Provider

_CLIENTS: dict[Provider, type[BaseChatClient]] = {
    Provider.DEEPSEEK: DeepSeekClient,
    Provider.COZE: CozeClient,
}


def build_client(
    settings: Settings,
    provider: Provider | str | None = None,
    client: httpx.AsyncClient | None = None,
) -> BaseChatClient:
    """Create the client for ``provider`` (the configured default if omitted)."""
    config = settings.provider_config(provider)
    return _CLIENTS[config.provider](config, client=client)
