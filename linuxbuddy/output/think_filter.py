"""Think-segment filter for streamed model output.

Reasoning models wrap their chain of thought in ``<think>...</think>``.
The filter hides that segment and shows the spinner while it streams.

Markers are matched only when a single fragment contains the whole
marker. A marker split across two fragments is not recognised.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from linuxbuddy.output.spinner import Spinner

logger = logging.getLogger(__name__)

THINK_OPEN = "<think>"
THINK_CLOSE = "</think>"


class RenderState(StrEnum):
    """Where the filter is within a response."""

    IDLE = "idle"
    STREAMING = "streaming"
    THINKING = "thinking"


class ThinkFilter:
    """Stateful fragment consumer that suppresses think-segments.

    ``feed()`` returns the text to display for a fragment, which is
    empty while a think-segment is open and for the fragments carrying
    the markers themselves.
    """

    def __init__(
        self,
        spinner: Spinner,
        *,
        open_tag: str = THINK_OPEN,
        close_tag: str = THINK_CLOSE,
    ) -> None:
        self._spinner = spinner
        self._open_tag = open_tag
        self._close_tag = close_tag
        self._state = RenderState.IDLE

    @property
    def state(self) -> RenderState:
        return self._state

    def feed(self, fragment: str) -> str:
        """Process one fragment and return its visible text."""
        if self._open_tag in fragment and self._state != RenderState.THINKING:
            self._state = RenderState.THINKING
            logger.debug("Think segment opened")
            self._spinner.start()
            return ""

        if self._close_tag in fragment and self._state == RenderState.THINKING:
            self._state = RenderState.STREAMING
            logger.debug("Think segment closed")
            self._spinner.stop()
            return ""

        if self._state == RenderState.THINKING:
            return ""

        self._state = RenderState.STREAMING
        return fragment
