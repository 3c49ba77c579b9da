"""LinuxBuddy schema definitions.

Pydantic v2 models shared by the settings loader, provider and chat service.
"""

from linuxbuddy.schemas.chat import ResponseType, SystemPrompt
from linuxbuddy.schemas.settings import Settings

__all__ = [
    "ResponseType",
    "Settings",
    "SystemPrompt",
]
