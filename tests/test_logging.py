"""Tests for logging helpers."""

import logging

from chatask.core.logging import mask_secret, setup_logging


def test_mask_secret():
    assert mask_secret("") == ""
    assert mask_secret("abc") == "***"
    assert mask_secret("sk-abcdef1234") == "*********1234"


def test_setup_logging_sets_level():
    setup_logging("DEBUG")
    assert logging.getLogger().level == logging.DEBUG
    setup_logging("warning")
    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("httpx").level == logging.WARNING


def test_api_key_not_logged(caplog):
    import asyncio

    import httpx

    from chatask.llm.deepseek import DeepSeekClient
    from chatask.llm.types import Provider, ProviderConfig

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("down", request=request)

    client = DeepSeekClient(
        ProviderConfig(provider=Provider.DEEPSEEK, api_key="sk-hidden-key"),
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    with caplog.at_level(logging.DEBUG, logger="chatask"):
        assert asyncio.run(client.ask_or_error("hi")).startswith("请求出错: ")
    assert "sk-hidden-key" not in caplog.text
