"""Single-shot chat-completion clients for DeepSeek and Coze."""

__version__ = "0.1.0"
