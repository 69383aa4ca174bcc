"""Core domain models, configuration, protocols and errors."""
from .protocols import Hasher, ByteSource, EventReporter
from .models import FileActionKind, FileActionResult, ActionStats
from .config import DigestAlgorithm, DigestSettings, FileAction
from .errors import (
    DlFilesError,
    DigestError,
    DigestReadError,
    DigestOpenError,
    FileOperationError,
    PathPreconditionError,
    PathOutsideRootError,
    MissingFileNameError,
)

__all__ = [
    # Protocols
    "Hasher",
    "ByteSource",
    "EventReporter",
    # Models
    "FileActionKind",
    "FileActionResult",
    "ActionStats",
    # Config
    "DigestAlgorithm",
    "DigestSettings",
    "FileAction",
    # Errors
    "DlFilesError",
    "DigestError",
    "DigestReadError",
    "DigestOpenError",
    "FileOperationError",
    "PathPreconditionError",
    "PathOutsideRootError",
    "MissingFileNameError",
]
