"""Settings loading and model persistence for LinuxBuddy.

Settings are resolved with this priority (highest first):
  1. Environment variables (LINUXBUDDY_MODEL, LINUXBUDDY_OLLAMA_URL)
  2. ~/.linuxbuddy/model (saved by `linuxbuddy model NAME`)
  3. linuxbuddy/config/defaults.toml (packaged defaults)
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import ValidationError

from linuxbuddy.exceptions import SettingsError
from linuxbuddy.schemas.settings import Settings

logger = logging.getLogger(__name__)

# Directory for user-level LinuxBuddy state
LINUXBUDDY_HOME = Path.home() / ".linuxbuddy"
MODEL_FILE = LINUXBUDDY_HOME / "model"

MODEL_ENV = "LINUXBUDDY_MODEL"
OLLAMA_URL_ENV = "LINUXBUDDY_OLLAMA_URL"

# Default config directory relative to the linuxbuddy package
_CONFIG_DIR = Path(__file__).parent / "config"


def load_settings(config_path: Path | None = None, *, verbose: bool = False) -> Settings:
    """Load settings from the TOML defaults, the saved model and the environment.

    Args:
        config_path: Path to defaults.toml. Defaults to linuxbuddy/config/defaults.toml.
        verbose: Value for the ``verbose`` flag of the returned settings.

    Returns:
        The resolved Settings.

    Raises:
        SettingsError: If the config file is missing, malformed, or the
            resolved values fail validation.
    """
    path = config_path or _CONFIG_DIR / "defaults.toml"
    if not path.is_file():
        raise SettingsError(f"Settings file not found: {path}")

    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsError(f"Invalid settings file {path}: {e}") from e

    section = raw.get("linuxbuddy")
    if not isinstance(section, dict):
        raise SettingsError(f"No [linuxbuddy] section found in {path}")

    values = dict(section)

    saved = get_model()
    if saved:
        values["model"] = saved

    if os.environ.get(MODEL_ENV):
        values["model"] = os.environ[MODEL_ENV].strip()
        logger.debug("Model overridden by %s", MODEL_ENV)
    if os.environ.get(OLLAMA_URL_ENV):
        values["ollama_url"] = os.environ[OLLAMA_URL_ENV].strip()
        logger.debug("Ollama URL overridden by %s", OLLAMA_URL_ENV)

    values["verbose"] = verbose

    try:
        return Settings(**values)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings: {e}") from e


def get_model() -> str | None:
    """Return the saved model name, or None when nothing has been saved."""
    if not MODEL_FILE.is_file():
        return None
    try:
        name = MODEL_FILE.read_text(encoding="utf-8").strip()
    except OSError:
        logger.warning("Could not read saved model from %s", MODEL_FILE)
        return None
    return name or None


def save_model(name: str) -> Path:
    """Save a model name to ~/.linuxbuddy/model.

    Surrounding whitespace and double quotes are stripped first.

    Args:
        name: The model name as typed by the user.

    Returns:
        Path to the saved file.

    Raises:
        SettingsError: If the cleaned name is empty or the file cannot be written.
    """
    cleaned = name.strip().strip('"').strip()
    if not cleaned:
        raise SettingsError("Model name must not be empty")

    try:
        LINUXBUDDY_HOME.mkdir(parents=True, exist_ok=True)
        MODEL_FILE.write_text(cleaned, encoding="utf-8")
    except OSError as e:
        raise SettingsError(f"Could not save model to {MODEL_FILE}: {e}") from e

    logger.debug("Saved model %s to %s", cleaned, MODEL_FILE)
    return MODEL_FILE
