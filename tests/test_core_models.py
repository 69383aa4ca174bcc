"""Tests for core domain models."""
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from dlfiles.core.models import ActionStats, FileActionKind, FileActionResult


class TestFileActionResult:
    """Tests for FileActionResult."""

    def test_moved(self):
        result = FileActionResult.moved(Path("/out/a.txt"))
        assert result.kind == FileActionKind.MOVED
        assert result.path == Path("/out/a.txt")
        assert result.is_moved
        assert not result.is_deleted
        assert result.changed_filesystem

    def test_deleted(self):
        result = FileActionResult.deleted(Path("/in/a.txt"))
        assert result.is_deleted
        assert result.changed_filesystem

    def test_nothing(self):
        result = FileActionResult.nothing()
        assert result.kind == FileActionKind.NOTHING
        assert result.path is None
        assert not result.changed_filesystem

    def test_equality(self):
        """Results compare by value."""
        assert FileActionResult.moved(Path("/a")) == FileActionResult.moved(Path("/a"))
        assert FileActionResult.moved(Path("/a")) != FileActionResult.deleted(Path("/a"))

    def test_immutable(self):
        """Results are frozen."""
        result = FileActionResult.nothing()
        with pytest.raises(FrozenInstanceError):
            result.kind = FileActionKind.MOVED

    def test_nothing_with_path_rejected(self):
        with pytest.raises(ValueError):
            FileActionResult(FileActionKind.NOTHING, Path("/a"))

    def test_moved_without_path_rejected(self):
        with pytest.raises(ValueError):
            FileActionResult(FileActionKind.MOVED)


class TestActionStats:
    """Tests for ActionStats."""

    def test_empty(self):
        stats = ActionStats()
        assert stats.total == 0

    def test_record(self):
        """Each result kind has its own counter."""
        stats = ActionStats()
        stats.record(FileActionResult.moved(Path("/a")))
        stats.record(FileActionResult.moved(Path("/b")))
        stats.record(FileActionResult.deleted(Path("/c")))
        stats.record(FileActionResult.nothing())
        stats.record_error()

        assert stats.summary() == {
            "total": 5,
            "moved": 2,
            "deleted": 1,
            "untouched": 1,
            "errors": 1,
        }
