"""Exception hierarchy for file identity and file action operations."""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class DlFilesError(Exception):
    """Base error for the package."""


class DigestError(DlFilesError, OSError):
    """A digest could not be computed."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        if isinstance(cause, OSError):
            super().__init__(
                cause.errno,
                f"{message}: {cause.strerror or cause}",
                cause.filename,
                getattr(cause, "winerror", None),
                cause.filename2,
            )
        elif cause is not None:
            super().__init__(f"{message}: {cause}")
        else:
            super().__init__(message)


class DigestReadError(DigestError):
    """The byte source failed while being read."""


class DigestOpenError(DigestError):
    """The file to digest could not be opened."""


class FileOperationError(DlFilesError, OSError):
    """A filesystem call failed while executing a file action.

    Carries the name of the failed ``operation`` along with the errno,
    strerror and both filenames of the underlying OS error.
    """

    def __init__(self, operation: str, cause: OSError):
        super().__init__(
            cause.errno,
            cause.strerror or str(cause),
            cause.filename,
            getattr(cause, "winerror", None),
            cause.filename2,
        )
        self.operation = operation


class PathPreconditionError(DlFilesError, ValueError):
    """A path does not satisfy what the operation requires."""


class PathOutsideRootError(PathPreconditionError):
    """A rooted move was requested for a file that is not below the root."""

    def __init__(self, file: Path, root: Path):
        super().__init__(f"File '{file}' is not under root '{root}'")
        self.file = file
        self.root = root


class MissingFileNameError(PathPreconditionError):
    """The path has no final name component."""

    def __init__(self, file: Path):
        super().__init__(f"Path '{file}' has no file name")
        self.file = file
