"""Shared pytest fixtures."""
import pytest


class RecordingReporter:
    """EventReporter that keeps every event for later assertions."""

    def __init__(self):
        self.events: list[tuple[str, str]] = []

    def debug(self, message: str) -> None:
        self.events.append(("debug", message))

    def info(self, message: str) -> None:
        self.events.append(("info", message))

    def warning(self, message: str) -> None:
        self.events.append(("warning", message))

    def error(self, message: str) -> None:
        self.events.append(("error", message))

    def messages(self, level: str = "debug") -> list[str]:
        return [msg for lvl, msg in self.events if lvl == level]


@pytest.fixture
def reporter():
    """Create a recording reporter."""
    return RecordingReporter()
