"""Post-download file actions: move into a target tree, delete, or nothing."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from ..core.config import FileAction
from ..core.errors import FileOperationError, MissingFileNameError, PathOutsideRootError
from ..core.models import FileActionResult
from ..core.protocols import EventReporter
from ..logging.rich_logger import QuietEventReporter


class FileActionExecutor:
    """Applies a FileAction to a single file.

    Every call is synchronous and single-shot. Filesystem failures surface as
    FileOperationError; nothing is retried or rolled back.
    """

    def __init__(self, reporter: Optional[EventReporter] = None):
        """Initialize the executor.

        Args:
            reporter: Receives move/delete events. Defaults to a quiet reporter.
        """
        self._reporter = reporter or QuietEventReporter()

    def execute(
        self,
        action: FileAction,
        file: Path,
        root: Optional[Path] = None,
    ) -> FileActionResult:
        """Execute ``action`` on ``file``.

        Moving takes precedence over deleting.

        Args:
            action: What to do with the file.
            file: An existing regular file.
            root: Ancestor of ``file``. When given, the file keeps its
                position relative to root under the move target.

        Returns:
            What happened to the file.

        Raises:
            PathOutsideRootError: ``file`` is not below ``root``.
            MissingFileNameError: ``file`` has no name component.
            FileOperationError: A filesystem call failed.
        """
        file = Path(file)
        if action.move_to is not None:
            return FileActionResult.moved(self._move_file(file, root, action.move_to))
        if action.delete:
            self._delete_file(file)
            return FileActionResult.deleted(file)
        return FileActionResult.nothing()

    def target_path(self, file: Path, root: Optional[Path], target: Path) -> Path:
        """Compute where a move puts ``file`` under ``target``."""
        file = Path(file)
        if root is not None:
            try:
                part = file.relative_to(root)
            except ValueError:
                raise PathOutsideRootError(file, Path(root)) from None
            if not part.name:
                raise MissingFileNameError(file)
            return Path(target) / part

        if not file.name:
            raise MissingFileNameError(file)
        return Path(target) / file.name

    def _move_file(self, file: Path, root: Optional[Path], target: Path) -> Path:
        target_file = self.target_path(file, root, target)
        self._reporter.debug(f"Move file '{file}' -> '{target_file}'")

        try:
            target_file.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FileOperationError("mkdir", exc) from exc

        try:
            file.rename(target_file)
        except OSError as exc:
            raise FileOperationError("rename", exc) from exc

        self._remove_if_empty(file.parent)
        return target_file

    def _remove_if_empty(self, directory: Path) -> None:
        # Single level only; never the working directory or a filesystem root.
        if directory == Path(".") or directory == Path(directory.anchor):
            return
        try:
            with os.scandir(directory) as entries:
                is_empty = next(entries, None) is None
        except OSError as exc:
            raise FileOperationError("scandir", exc) from exc
        if not is_empty:
            return

        self._reporter.debug(f"Removing empty directory {directory}")
        try:
            directory.rmdir()
        except OSError as exc:
            raise FileOperationError("rmdir", exc) from exc

    def _delete_file(self, file: Path) -> None:
        self._reporter.debug(f"Deleting file: {file}")
        try:
            file.unlink()
        except OSError as exc:
            raise FileOperationError("unlink", exc) from exc


def execute_action(
    action: FileAction,
    file: Path,
    root: Optional[Path] = None,
    reporter: Optional[EventReporter] = None,
) -> FileActionResult:
    """Execute ``action`` on ``file`` with a one-off executor."""
    return FileActionExecutor(reporter).execute(action, file, root)
