"""Coze bot chat client."""

from __future__ import annotations

from typing import Any

from chatask.llm.base import BaseChatClient
from chatask.llm.errors import ShapeError


class CozeClient(BaseChatClient):
    """Client for the Coze v2 bot chat API.

    The bot persona is passed through ``custom_variables.prompt``; history
    is always empty since every call is a fresh exchange.
    """

    _CHAT_URL = "https://api.coze.cn/open_api/v2/chat"

    def _get_provider_label(self) -> str:
        return "Coze"

    def is_configured(self) -> bool:
        return bool(self._config.api_key and self._config.bot_id)

    def build_request(self, prompt: str) -> dict[str, Any]:
        return {
            "bot_id": self._config.bot_id,
            "user": self._config.user,
            "query": prompt,
            "chat_history": [],
            "stream": False,
            "custom_variables": {"prompt": self._config.persona_prompt},
        }

    def parse_response(self, body: Any) -> str:
        try:
            content = body["messages"][0]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise ShapeError(
                "response has no messages[0].content",
                provider=self.provider,
            ) from e
        if not isinstance(content, str) or not content:
            raise ShapeError(
                "messages[0].content is empty or not text "
                f"({type(content).__name__})",
                provider=self.provider,
            )
        return content
