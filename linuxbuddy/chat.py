"""Chat service: turns a question and optional piped context into a
streamed, rendered answer.
"""

from __future__ import annotations

import logging

from linuxbuddy.output.renderer import render_response
from linuxbuddy.output.spinner import Spinner
from linuxbuddy.output.styled import StyledWriter
from linuxbuddy.providers.base import ChatProvider
from linuxbuddy.schemas.chat import ResponseType, SystemPrompt

logger = logging.getLogger(__name__)

BASH_INSTRUCTIONS = (
    "You are an expert on Linux systems and bash commands. "
    "Help the user write a bash command. "
    "Only output bash command or commands. Do not explain yourself."
)
GENERAL_INSTRUCTIONS = "You are a helpful assistant."

_CONTEXT_ACKNOWLEDGEMENTS: dict[ResponseType, str] = {
    ResponseType.BASH: (
        "Thank you for the additional context. "
        "What bash command can I provide for you?"
    ),
    ResponseType.TEXT: (
        "Thank you for the additional context. "
        "What would you like to know about the data you provided?"
    ),
}

CONTEXT_HEADER = "---------------------Context--------------------------"
QUESTION_HEADER = "---------------------Question-------------------------"
_RULE = "------------------------------------------------------"


def build_messages(
    question: str, context: str, response_type: ResponseType
) -> list[dict[str, str]]:
    """Build the conversation sent after the system prompt.

    Piped context goes first as its own user turn, followed by a canned
    assistant acknowledgement, so the question stays the final turn.
    """
    messages: list[dict[str, str]] = []
    if context:
        messages.append({"role": "user", "content": context})
        messages.append({
            "role": "assistant",
            "content": _CONTEXT_ACKNOWLEDGEMENTS[response_type],
        })
    messages.append({"role": "user", "content": question})
    return messages


class ChatService:
    """Asks the provider a question and renders the streamed answer."""

    def __init__(
        self,
        provider: ChatProvider,
        writer: StyledWriter,
        spinner: Spinner,
        *,
        verbose: bool = False,
    ) -> None:
        self._provider = provider
        self._writer = writer
        self._spinner = spinner
        self._verbose = verbose

    async def ask_bash(self, question: str, context: str = "") -> None:
        """Ask for a bash command; the model is told to output commands only."""
        await self.ask(question, context, BASH_INSTRUCTIONS, ResponseType.BASH)

    async def ask_general(self, question: str, context: str = "") -> None:
        """Ask a general question, optionally about piped data."""
        await self.ask(question, context, GENERAL_INSTRUCTIONS, ResponseType.TEXT)

    async def ask(
        self,
        question: str,
        context: str,
        instructions: str,
        response_type: ResponseType,
    ) -> None:
        """Send one question and render the response.

        Raises:
            BackendError: If the backend fails before or during streaming.
        """
        self._echo_prompt(question, context)

        system = SystemPrompt.for_environment(instructions, response_type).to_json()
        messages = build_messages(question, context, response_type)
        logger.debug(
            "Asking %s (%s, %d context chars)",
            self._provider.model_id, response_type, len(context),
        )

        fragments = self._provider.stream(
            messages, system, response_type=response_type
        )
        await render_response(fragments, self._writer, self._spinner, self._verbose)

    def _echo_prompt(self, question: str, context: str) -> None:
        """In verbose mode, show the context and question being sent."""
        if not self._verbose:
            return
        if context:
            self._writer.write_line(CONTEXT_HEADER)
            self._writer.write_line(context)
            self._writer.write_line(_RULE)
            self._writer.write_line()
        self._writer.write_line(QUESTION_HEADER)
        self._writer.write_line(question)
        self._writer.write_line(_RULE)
        self._writer.write_line()
