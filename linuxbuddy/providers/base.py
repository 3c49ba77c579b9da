"""Abstract base class for chat backends.

Defines the ChatProvider interface the chat service streams from. The
service never calls a provider SDK directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator

from linuxbuddy.schemas.chat import ResponseType
from linuxbuddy.schemas.settings import Settings


class ChatProvider(ABC):
    """Abstract interface for a streaming chat-completion backend.

    Initialized from the resolved Settings. Exposes the model identity and
    a single async ``stream()`` method that yields response text fragments.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def model_id(self) -> str:
        """Model identifier sent to the backend."""
        return self._settings.model

    @abstractmethod
    def stream(
        self,
        messages: list[dict[str, str]],
        system: str,
        *,
        response_type: ResponseType = ResponseType.TEXT,
    ) -> AsyncIterator[str]:
        """Stream a chat completion as text fragments.

        Args:
            messages: Conversation messages in OpenAI format
                      (list of {"role": ..., "content": ...} dicts).
            system: System prompt for this call.
            response_type: Kind of answer requested; providers may tune
                           sampling for it.

        Returns:
            An async iterator of non-empty fragments in emission order.

        Raises:
            BackendError: When the request fails or the stream breaks,
                          raised from the iterator.
        """
