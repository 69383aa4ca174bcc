"""Domain models - immutable result values and run statistics."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class FileActionKind(Enum):
    """What happened to a file."""
    DELETED = "deleted"
    MOVED = "moved"
    NOTHING = "nothing"


@dataclass(frozen=True, slots=True)
class FileActionResult:
    """Outcome of executing a file action once.

    ``path`` is the original path for DELETED, the destination for MOVED
    and None for NOTHING.
    """
    kind: FileActionKind
    path: Optional[Path] = None

    def __post_init__(self) -> None:
        if (self.kind == FileActionKind.NOTHING) != (self.path is None):
            raise ValueError(f"Invalid path {self.path!r} for {self.kind.value} result")

    @classmethod
    def deleted(cls, path: Path) -> "FileActionResult":
        return cls(FileActionKind.DELETED, path)

    @classmethod
    def moved(cls, path: Path) -> "FileActionResult":
        return cls(FileActionKind.MOVED, path)

    @classmethod
    def nothing(cls) -> "FileActionResult":
        return cls(FileActionKind.NOTHING)

    @property
    def is_moved(self) -> bool:
        return self.kind == FileActionKind.MOVED

    @property
    def is_deleted(self) -> bool:
        return self.kind == FileActionKind.DELETED

    @property
    def changed_filesystem(self) -> bool:
        return self.kind != FileActionKind.NOTHING


@dataclass(slots=True)
class ActionStats:
    """Mutable counters for a batch of file actions."""
    moved: int = 0
    deleted: int = 0
    untouched: int = 0
    errors: int = 0

    @property
    def total(self) -> int:
        return self.moved + self.deleted + self.untouched + self.errors

    def record(self, result: FileActionResult) -> None:
        """Record a file action result."""
        match result.kind:
            case FileActionKind.MOVED:
                self.moved += 1
            case FileActionKind.DELETED:
                self.deleted += 1
            case FileActionKind.NOTHING:
                self.untouched += 1

    def record_error(self) -> None:
        self.errors += 1

    def summary(self) -> dict[str, int]:
        return {
            "total": self.total,
            "moved": self.moved,
            "deleted": self.deleted,
            "untouched": self.untouched,
            "errors": self.errors,
        }
