"""Abstract base class for single-shot chat clients."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from chatask import __version__
from chatask.llm.errors import (
    DEFAULT_ERROR_PREFIX,
    ClientError,
    DecodeError,
    PromptError,
    TransportError,
)
from chatask.llm.types import ProviderConfig

logger = logging.getLogger(__name__)

USER_AGENT = f"chatask/{__version__}"


class BaseChatClient(ABC):
    """One request, one reply.

    Subclasses describe a provider through ``build_request`` and
    ``parse_response``; transport and error handling live here.
    """

    _CHAT_URL = ""

    def __init__(
        self,
        config: ProviderConfig,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._owns_client = client is None
        if client is None:
            client = httpx.AsyncClient(
                timeout=config.timeout, headers={"User-Agent": USER_AGENT}
            )
        self._client = client

    @property
    def provider(self) -> str:
        """Return the provider name."""
        return self._config.provider.value

    @property
    def chat_url(self) -> str:
        return self._config.endpoint or self._CHAT_URL

    def _get_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._config.api_key}",
        }

    def _get_provider_label(self) -> str:
        """Return a label for log messages."""
        return self._config.provider.value.capitalize()

    def is_configured(self) -> bool:
        """Check whether the credentials this provider needs are present."""
        return bool(self._config.api_key)

    @abstractmethod
    def build_request(self, prompt: str) -> dict[str, Any]:
        """Return the JSON body for a single prompt."""
        ...

    @abstractmethod
    def parse_response(self, body: Any) -> str:
        """Extract the reply text from a decoded response body.

        Raises ShapeError when the expected path is absent.
        """
        ...

    async def ask(self, prompt: str) -> str:
        """Send ``prompt`` and return the reply text, unmodified.

        Any text is sent as-is, whitespace included. Raises ClientError
        (TransportError, DecodeError, ShapeError, or PromptError for "")
        on failure.
        """
        if not prompt:
            raise PromptError("prompt is empty", provider=self.provider)

        label = self._get_provider_label()
        body = self.build_request(prompt)
        logger.debug("POST %s (%s, %d chars)", self.chat_url, label, len(prompt))

        try:
            response = await self._client.post(
                self.chat_url,
                content=json.dumps(body, ensure_ascii=False).encode("utf-8"),
                headers=self._get_headers(),
            )
        except httpx.HTTPError as e:
            logger.warning("%s connection error: %s", label, e)
            raise TransportError(str(e), provider=self.provider) from e

        if response.status_code != 200:
            logger.warning("%s API error: %s", label, response.status_code)
            raise TransportError(
                f"HTTP {response.status_code}: {response.text}",
                provider=self.provider,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.warning("%s returned a non-JSON body: %s", label, e)
            raise DecodeError(str(e), provider=self.provider) from e

        return self.parse_response(data)

    async def ask_or_error(
        self, prompt: str, error_prefix: str = DEFAULT_ERROR_PREFIX
    ) -> str:
        """Like ``ask`` but returns the rendered error string instead of raising."""
        try:
            return await self.ask(prompt)
        except ClientError as e:
            return e.render(error_prefix)

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> BaseChatClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()
