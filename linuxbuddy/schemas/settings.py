"""Runtime settings schema."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Resolved configuration for one invocation.

    Built by ``linuxbuddy.settings.load_settings`` from the packaged
    defaults, the saved model file and environment overrides.
    """

    model: str = Field(min_length=1, description="Ollama model name (e.g. 'deepseek-r1:1.5b')")
    ollama_url: str = Field(min_length=1, description="Base URL of the Ollama server")
    timeout: int = Field(default=300, gt=0, description="Request timeout in seconds")
    style: str = Field(default="bold green", description="Rich style for response text")
    verbose: bool = Field(default=False, description="Show raw output and echo the prompt")
