"""Shared fixtures for the LinuxBuddy test suite."""

from __future__ import annotations

import io

import pytest

from linuxbuddy.output.styled import StyledWriter


class FakeSpinner:
    """Spinner stand-in that records calls and mirrors start/stop idempotence."""

    def __init__(self) -> None:
        self.running = False
        self.starts = 0
        self.stops = 0
        self.calls: list[str] = []

    def start(self) -> None:
        self.calls.append("start")
        if not self.running:
            self.running = True
            self.starts += 1

    def stop(self) -> None:
        self.calls.append("stop")
        if self.running:
            self.running = False
            self.stops += 1


class RecordingSink:
    """Text sink that keeps each write as a separate entry."""

    def __init__(self) -> None:
        self.writes: list[str] = []
        self.flushes = 0

    def write(self, text: str) -> int:
        self.writes.append(text)
        return len(text)

    def flush(self) -> None:
        self.flushes += 1

    def getvalue(self) -> str:
        return "".join(self.writes)


@pytest.fixture
def fake_spinner() -> FakeSpinner:
    return FakeSpinner()


@pytest.fixture
def sink() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def writer(sink: io.StringIO) -> StyledWriter:
    """Unstyled writer over a StringIO sink."""
    return StyledWriter(sink, color_system=None)


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()
