"""DeepSeek chat completions client."""

from __future__ import annotations

from typing import Any

from chatask.llm.base import BaseChatClient
from chatask.llm.errors import ShapeError
from chatask.llm.types import Message, Role


class DeepSeekClient(BaseChatClient):
    """Client for the OpenAI-shaped DeepSeek chat completions API."""

    _CHAT_URL = "https://api.deepseek.com/chat/completions"

    def _get_provider_label(self) -> str:
        return "DeepSeek"

    def build_request(self, prompt: str) -> dict[str, Any]:
        messages = [
            Message(role=Role.SYSTEM, content=self._config.system_prompt),
            Message(role=Role.USER, content=prompt),
        ]
        return {
            "model": self._config.model,
            "messages": [m.to_api() for m in messages],
            "stream": False,
        }

    def parse_response(self, body: Any) -> str:
        try:
            content = body["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise ShapeError(
                "response has no choices[0].message.content",
                provider=self.provider,
            ) from e
        if not isinstance(content, str) or not content:
            raise ShapeError(
                "choices[0].message.content is empty or not text "
                f"({type(content).__name__})",
                provider=self.provider,
            )
        return content
