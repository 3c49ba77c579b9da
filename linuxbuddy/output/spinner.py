"""Single-line "Thinking..." spinner.

Runs a daemon thread that redraws the current terminal line with a
carriage return, a label and a rotating symbol until stopped, then
erases the line.
"""

from __future__ import annotations

import logging
import threading

from linuxbuddy.output.styled import StyledWriter

logger = logging.getLogger(__name__)

SPINNER_LABEL = "Thinking... "
SPINNER_FRAMES = "|/-\\"
SPINNER_INTERVAL = 0.1  # seconds between frames


class Spinner:
    """Thread-based spinner that writes through a StyledWriter.

    * ``start()`` launches the animation thread; a no-op while running.
    * ``stop()`` signals the thread and blocks until it has erased its
      line and exited; a no-op while stopped.

    Nothing is written after ``stop()`` returns, which lets the caller
    resume writing to the same terminal line safely.
    """

    def __init__(
        self,
        writer: StyledWriter,
        *,
        label: str = SPINNER_LABEL,
        interval: float = SPINNER_INTERVAL,
    ) -> None:
        self._writer = writer
        self._label = label
        self._interval = interval
        self._erase = "\r" + " " * (len(label) + 1) + "\r"
        self._thread: threading.Thread | None = None
        self._stop_event = threading.Event()
        self._lock = threading.Lock()

    def start(self) -> None:
        """Start the animation thread unless it is already running."""
        with self._lock:
            # A thread that died on a failed write counts as stopped.
            if self._thread is not None and self._thread.is_alive():
                return
            self._stop_event.clear()
            self._thread = threading.Thread(
                target=self._run, daemon=True, name="spinner"
            )
            self._thread.start()
        logger.debug("Spinner started")

    def stop(self) -> None:
        """Stop the animation and wait for the line to be erased."""
        with self._lock:
            thread = self._thread
            if thread is None:
                return
            self._stop_event.set()
            thread.join()
            self._thread = None
        logger.debug("Spinner stopped")

    def _run(self) -> None:
        index = 0
        try:
            while not self._stop_event.is_set():
                symbol = SPINNER_FRAMES[index % len(SPINNER_FRAMES)]
                self._writer.write(f"\r{self._label}{symbol}")
                index += 1
                self._stop_event.wait(self._interval)
        except OSError:
            logger.warning("Spinner frame write failed", exc_info=True)
        finally:
            try:
                self._writer.write(self._erase)
            except OSError:
                logger.debug("Could not erase spinner line", exc_info=True)
