"""Application configuration via environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

from chatask.llm.types import Provider, ProviderConfig


class Settings(BaseSettings):
    model_config = {
        "env_prefix": "CHATASK_",
        "env_file": ".env",
        "extra": "ignore",
        "populate_by_name": True,
    }

    # API keys: no prefix, matching provider conventions
    deepseek_api_key: str = Field(default="", validation_alias="DEEPSEEK_API_KEY")
    coze_api_key: str = Field(default="", validation_alias="COZE_API_KEY")
    coze_bot_id: str = Field(default="", validation_alias="COZE_BOT_ID")

    # Default provider
    default_provider: Provider = Provider.DEEPSEEK

    # DeepSeek
    deepseek_model: str = "deepseek-chat"
    deepseek_system_prompt: str = "You are a helpful assistant."

    # Coze
    coze_user: str = "yvo"
    coze_persona_prompt: str = "你是一个AI助手"

    # Transport
    timeout_seconds: float = 60.0

    # Rendering
    error_prefix: str = "请求出错: "
    placeholder: str = "thinking..."

    # Logging
    log_level: str = "INFO"

    def provider_config(self, provider: Provider | str | None = None) -> ProviderConfig:
        """Build the client config for a provider (default provider if omitted)."""
        p = Provider(provider) if provider else self.default_provider
        if p is Provider.DEEPSEEK:
            return ProviderConfig(
                provider=p,
                api_key=self.deepseek_api_key,
                model=self.deepseek_model,
                system_prompt=self.deepseek_system_prompt,
                timeout=self.timeout_seconds,
            )
        return ProviderConfig(
            provider=p,
            api_key=self.coze_api_key,
            bot_id=self.coze_bot_id,
            user=self.coze_user,
            persona_prompt=self.coze_persona_prompt,
            timeout=self.timeout_seconds,
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
