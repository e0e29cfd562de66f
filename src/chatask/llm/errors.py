"""Errors raised by provider clients.

Every failure of a single exchange surfaces as a ``ClientError`` subclass so
callers can render it without inspecting transport details.
"""

from __future__ import annotations

DEFAULT_ERROR_PREFIX = "请求出错: "


class ClientError(RuntimeError):
    """A chat exchange failed."""

    def __init__(self, message: str, *, provider: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.provider = provider

    def render(self, prefix: str = DEFAULT_ERROR_PREFIX) -> str:
        return f"{prefix}{self.message}"


class TransportError(ClientError):
    """The request could not be completed, or the server rejected it."""


class DecodeError(ClientError):
    """The response body is not valid JSON."""


class ShapeError(ClientError):
    """The JSON decoded but the reply path is missing or malformed."""


class PromptError(ClientError):
    """The prompt was empty, so no request was sent."""
