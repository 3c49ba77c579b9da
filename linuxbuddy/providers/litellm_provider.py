"""LiteLLM adapter implementing the ChatProvider interface.

Streams completions from an Ollama server through LiteLLM's unified API.
Transport and provider errors surface as BackendError; there is no retry.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

import litellm

# Suppress LiteLLM's "Give Feedback / Get Help" and "Provider List" banners
litellm.suppress_debug_info = True

from linuxbuddy.exceptions import BackendError
from linuxbuddy.providers.base import ChatProvider
from linuxbuddy.schemas.chat import ResponseType

logger = logging.getLogger(__name__)

_OLLAMA_PREFIX = "ollama_chat/"

# Deterministic sampling for command generation
_BASH_SAMPLING = {"temperature": 0.0, "top_p": 0.5, "top_k": 0}

_BACKEND_ERRORS = (
    TimeoutError,
    ConnectionError,
    litellm.exceptions.APIError,
    litellm.exceptions.APIConnectionError,
    litellm.exceptions.Timeout,
    litellm.exceptions.AuthenticationError,
    litellm.exceptions.BadRequestError,
    litellm.exceptions.NotFoundError,
    litellm.exceptions.RateLimitError,
    litellm.exceptions.ServiceUnavailableError,
    litellm.exceptions.InternalServerError,
)


def _short_error_reason(error: Exception) -> str:
    """Extract a short, user-friendly reason from a LiteLLM error.

    Maps error types and status codes to concise descriptions instead
    of dumping full JSON error payloads.
    """
    error_str = str(error).lower()
    if "timeout" in error_str or isinstance(error, TimeoutError):
        return "timeout"
    if isinstance(error, litellm.exceptions.NotFoundError) or "not found" in error_str:
        return "model not found"
    if "connection" in error_str or "refused" in error_str:
        return "connection error"
    if "503" in error_str or "unavailable" in error_str:
        return "service unavailable"
    if "500" in error_str or "internal" in error_str:
        return "server error"
    # Fallback: first 80 chars of the error
    return str(error)[:80]


class LiteLLMProvider(ChatProvider):
    """Ollama chat backend powered by LiteLLM.

    Model names without a provider prefix are routed as
    ``ollama_chat/<model>`` against the configured ``ollama_url``.
    """

    @property
    def model_id(self) -> str:
        model = self._settings.model
        if "/" in model:
            return model
        return f"{_OLLAMA_PREFIX}{model}"

    async def stream(
        self,
        messages: list[dict[str, str]],
        system: str,
        *,
        response_type: ResponseType = ResponseType.TEXT,
    ) -> AsyncIterator[str]:
        """Stream a completion via LiteLLM, yielding each text delta.

        Args:
            messages: Conversation messages in OpenAI format.
            system: System prompt for this call.
            response_type: Bash requests use deterministic sampling.

        Yields:
            Non-empty content deltas in the order received.

        Raises:
            BackendError: If opening or reading the stream fails.
        """
        full_messages = [{"role": "system", "content": system}, *messages]
        kwargs = self._build_completion_kwargs(full_messages, response_type)

        logger.debug(
            "Streaming %s from %s (%d messages)",
            kwargs["model"], kwargs["api_base"], len(full_messages),
        )

        try:
            response = await litellm.acompletion(**kwargs)
        except _BACKEND_ERRORS as e:
            raise BackendError(
                f"Request to {self._settings.model} at {self._settings.ollama_url} "
                f"failed ({_short_error_reason(e)})"
            ) from e

        try:
            async for chunk in response:
                delta = ""
                if chunk.choices and chunk.choices[0].delta:
                    delta = chunk.choices[0].delta.content or ""
                if delta:
                    yield delta
        except _BACKEND_ERRORS as e:
            raise BackendError(
                f"Stream from {self._settings.model} interrupted "
                f"({_short_error_reason(e)})"
            ) from e

    def _build_completion_kwargs(
        self,
        messages: list[dict[str, str]],
        response_type: ResponseType,
    ) -> dict:
        """Build the kwargs dict for litellm.acompletion."""
        kwargs: dict = {
            "model": self.model_id,
            "messages": messages,
            "api_base": self._settings.ollama_url,
            "timeout": float(self._settings.timeout),
            "stream": True,
        }
        if response_type == ResponseType.BASH:
            kwargs.update(_BASH_SAMPLING)
        return kwargs
