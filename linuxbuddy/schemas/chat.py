"""Chat request schemas.

Defines the response type requested from the model and the system prompt
that carries the user's environment to it.
"""

from __future__ import annotations

import getpass
import os
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class ResponseType(StrEnum):
    """Kind of answer the model is allowed to give."""

    BASH = "Bash"
    TEXT = "Text"


class SystemPrompt(BaseModel):
    """System prompt sent as JSON at the start of every conversation.

    Field aliases keep the PascalCase keys the prompt has always used,
    so serialize with ``model_dump_json(by_alias=True)``.
    """

    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(default="", alias="Username")
    current_date_time: str = Field(default="", alias="CurrentDateTime")
    current_working_directory: str = Field(default="", alias="CurrentWorkingDirectory")
    instructions: str = Field(default="", alias="Instructions")
    allowed_response_type: ResponseType = Field(
        default=ResponseType.TEXT, alias="AllowedResponseType"
    )

    @classmethod
    def for_environment(
        cls, instructions: str, response_type: ResponseType
    ) -> SystemPrompt:
        """Build a prompt describing the current user, time and directory."""
        try:
            username = getpass.getuser()
        except (KeyError, OSError):
            username = ""
        return cls(
            username=username,
            current_date_time=datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            current_working_directory=os.getcwd(),
            instructions=instructions,
            allowed_response_type=response_type,
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
