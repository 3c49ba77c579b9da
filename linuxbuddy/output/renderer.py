"""Streaming response renderer.

Consumes the fragments of one model response and writes them to the
terminal, either raw (verbose) or through the ThinkFilter with the
spinner covering hidden think-segments.

The render loop and the spinner thread share the terminal without a
lock between them: the loop writes nothing while the spinner runs, and
``Spinner.stop()`` returns only after the spinner's last write.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable, AsyncIterator, Iterable

from linuxbuddy.exceptions import BackendError
from linuxbuddy.output.spinner import Spinner
from linuxbuddy.output.styled import StyledWriter
from linuxbuddy.output.think_filter import THINK_CLOSE, THINK_OPEN, ThinkFilter

logger = logging.getLogger(__name__)

RESPONSE_HEADER = "---------------------Response-------------------------"
RESPONSE_FOOTER = "------------------------------------------------------"

Fragments = Iterable[str] | AsyncIterable[str]


async def _iterate(fragments: Fragments) -> AsyncIterator[str]:
    """Iterate plain and async fragment sources alike."""
    if isinstance(fragments, AsyncIterable):
        async for fragment in fragments:
            yield fragment
    else:
        for fragment in fragments:
            yield fragment


async def _close_source(fragments: Fragments) -> None:
    """Close a generator-like source so its transport is released."""
    aclose = getattr(fragments, "aclose", None)
    if aclose is not None:
        await aclose()
        return
    close = getattr(fragments, "close", None)
    if close is not None:
        close()


class ResponseRenderer:
    """Writes one streamed response through a StyledWriter.

    Args:
        writer: Destination for framing lines and response text.
        spinner: Spinner shown while a think-segment streams.
        verbose: Write every fragment unfiltered and never touch the spinner.
        open_tag: Marker that opens a think-segment.
        close_tag: Marker that closes a think-segment.
    """

    def __init__(
        self,
        writer: StyledWriter,
        spinner: Spinner,
        *,
        verbose: bool = False,
        open_tag: str = THINK_OPEN,
        close_tag: str = THINK_CLOSE,
    ) -> None:
        self._writer = writer
        self._spinner = spinner
        self._verbose = verbose
        self._open_tag = open_tag
        self._close_tag = close_tag

    async def render(self, fragments: Fragments) -> None:
        """Render a response until the source is exhausted or fails.

        Raises:
            BackendError: If the fragment source fails. Text written
                before the failure stays on screen.
            OSError: If writing to the terminal fails.
        """
        self._writer.write_line(RESPONSE_HEADER)

        think_filter = None
        if not self._verbose:
            think_filter = ThinkFilter(
                self._spinner,
                open_tag=self._open_tag,
                close_tag=self._close_tag,
            )

        stream = _iterate(fragments)
        completed = False
        try:
            while True:
                try:
                    fragment = await anext(stream)
                except StopAsyncIteration:
                    break
                except BackendError:
                    raise
                except Exception as e:
                    logger.debug("Fragment source failed", exc_info=True)
                    raise BackendError(f"Response stream failed: {e}") from e

                if think_filter is None:
                    self._writer.write(fragment)
                else:
                    self._writer.write(think_filter.feed(fragment))
            completed = True
        finally:
            if think_filter is not None:
                # Stop is idempotent; covers streams that end mid-segment.
                self._spinner.stop()
            await stream.aclose()
            await _close_source(fragments)
            if completed:
                self._writer.flush()
            else:
                # The error already in flight must not be replaced.
                try:
                    self._writer.flush()
                except OSError:
                    logger.debug("Flush failed while aborting render", exc_info=True)

        self._writer.write_line()
        self._writer.write_line(RESPONSE_FOOTER)
        self._writer.write_line()


async def render_response(
    fragments: Fragments,
    writer: StyledWriter,
    spinner: Spinner,
    verbose: bool = False,
) -> None:
    """Render ``fragments`` with a fresh ResponseRenderer."""
    await ResponseRenderer(writer, spinner, verbose=verbose).render(fragments)
