"""Types for chat-completion exchanges."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Role(str, Enum):
    SYSTEM = "system"
    USER = "user"


class Provider(str, Enum):
    DEEPSEEK = "deepseek"
    COZE = "coze"


@dataclass(frozen=True)
class Message:
    role: Role
    content: str

    def to_api(self) -> dict[str, Any]:
        return {"role": self.role.value, "content": self.content}


@dataclass(frozen=True)
class ProviderConfig:
    """Credentials and request defaults for one provider client."""

    provider: Provider
    api_key: str = ""
    model: str = ""  # DeepSeek
    system_prompt: str = ""  # DeepSeek
    bot_id: str = ""  # Coze
    user: str = ""  # Coze
    persona_prompt: str = ""  # Coze
    endpoint: str = ""  # Overrides the provider's fixed URL
    timeout: float = 60.0
