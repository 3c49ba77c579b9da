"""LinuxBuddy provider layer.

All model calls go through a ChatProvider; LiteLLMProvider is the
Ollama-backed implementation used by the CLI.
"""

from linuxbuddy.providers.base import ChatProvider
from linuxbuddy.providers.litellm_provider import LiteLLMProvider

__all__ = [
    "ChatProvider",
    "LiteLLMProvider",
]
