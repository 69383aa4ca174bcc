"""Protocol definitions (interfaces) for dependency injection."""
from __future__ import annotations

from abc import abstractmethod
from typing import Protocol


class Hasher(Protocol):
    """Running hash state.

    hashlib objects satisfy this interface directly.
    """

    @abstractmethod
    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash state."""
        ...

    @abstractmethod
    def digest(self) -> bytes:
        """Return the final hash value."""
        ...


class ByteSource(Protocol):
    """Anything readable in chunks: files, BytesIO, response bodies."""

    def read(self, size: int = -1) -> bytes:
        ...


class EventReporter(Protocol):
    """Side channel for events emitted while hashing or moving files."""

    @abstractmethod
    def debug(self, message: str) -> None:
        """Log a debug message."""
        ...

    @abstractmethod
    def info(self, message: str) -> None:
        """Log an info message."""
        ...

    @abstractmethod
    def warning(self, message: str) -> None:
        """Log a warning message."""
        ...

    @abstractmethod
    def error(self, message: str) -> None:
        """Log an error message."""
        ...
