"""Styled, unbuffered terminal writer.

Every non-empty write is wrapped in the ANSI codes of one constant Rich
style and handed to the sink in a single call, followed by a flush.
"""

from __future__ import annotations

import sys
import threading
from typing import TextIO

from rich.color import ColorSystem
from rich.console import COLOR_SYSTEMS, Console
from rich.style import Style

DEFAULT_STYLE = "bold green"

# Sentinel meaning "detect the color system from the sink"
AUTO = "auto"


class StyledWriter:
    """Append-only writer that applies a fixed style to everything it writes.

    The color system is detected by a Rich Console bound to the sink, so
    ``NO_COLOR``, ``FORCE_COLOR`` and non-terminal sinks behave as they do
    for the rest of Rich. Pass ``color_system=None`` to disable styling or a
    Rich color system name ("standard", "256", "truecolor") to force it.
    """

    def __init__(
        self,
        file: TextIO | None = None,
        style: str | Style = DEFAULT_STYLE,
        *,
        color_system: str | None = AUTO,
    ) -> None:
        self._file = file if file is not None else sys.stdout
        self._style = Style.parse(style) if isinstance(style, str) else style
        if color_system == AUTO:
            console = Console(file=self._file)
            color_system = None if console.no_color else console.color_system
        self._color_system: ColorSystem | None = (
            COLOR_SYSTEMS[color_system] if color_system else None
        )
        self._lock = threading.Lock()

    @property
    def file(self) -> TextIO:
        """The underlying sink."""
        return self._file

    @property
    def styled(self) -> bool:
        """Whether writes carry ANSI style codes."""
        return self._color_system is not None

    def write(self, text: str) -> None:
        """Write styled text without a trailing newline."""
        if not text:
            return
        self._emit(self._render(text))

    def write_line(self, text: str = "") -> None:
        """Write styled text followed by a newline, or a bare newline."""
        if not text:
            self._emit("\n")
            return
        self._emit(self._render(text) + "\n")

    def flush(self) -> None:
        with self._lock:
            self._file.flush()

    def _render(self, text: str) -> str:
        if self._color_system is None:
            return text
        return self._style.render(text, color_system=self._color_system)

    def _emit(self, payload: str) -> None:
        with self._lock:
            self._file.write(payload)
            self._file.flush()
