"""Binds a trigger (button click, CLI call) to a provider client.

The binder renders a placeholder, awaits the reply and renders either the
reply or the error string into a sink. Overlapping triggers are allowed;
only the most recent one is rendered.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Awaitable, Callable

from chatask.llm.base import BaseChatClient
from chatask.llm.errors import DEFAULT_ERROR_PREFIX, ClientError

logger = logging.getLogger(__name__)

Render = Callable[[str], Awaitable[None] | None]


class ReplyBinder:
    """Renders replies of one client into one target."""

    def __init__(
        self,
        client: BaseChatClient,
        render: Render,
        *,
        placeholder: str = "thinking...",
        error_prefix: str = DEFAULT_ERROR_PREFIX,
    ) -> None:
        self._client = client
        self._render = render
        self._placeholder = placeholder
        self._error_prefix = error_prefix
        self._seq = itertools.count(1)
        self._latest = 0
        self._in_flight = 0
        self.last_error: ClientError | None = None

    @property
    def busy(self) -> bool:
        """True while any triggered request is outstanding."""
        return self._in_flight > 0

    async def _emit(self, text: str) -> None:
        result = self._render(text)
        if result is not None:
            await result

    async def trigger(self, prompt: str) -> str | None:
        """Ask ``prompt`` and render the outcome.

        Returns the rendered text, or None when a newer trigger superseded
        this one before its response arrived.
        """
        seq = next(self._seq)
        self._latest = seq
        error: ClientError | None = None
        self._in_flight += 1
        try:
            await self._emit(self._placeholder)
            text = await self._client.ask(prompt)
        except ClientError as e:
            error = e
            text = e.render(self._error_prefix)
        finally:
            self._in_flight -= 1

        if seq != self._latest:
            logger.debug("Discarding stale reply #%d (latest is #%d)", seq, self._latest)
            return None
        self.last_error = error
        await self._emit(text)
        return text
