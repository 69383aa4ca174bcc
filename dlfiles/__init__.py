"""File identity and file lifecycle primitives for a downloader/organizer.

Content digests, disambiguated filenames, Content-Disposition filenames and
post-download file actions (move, delete, nothing).
"""

__version__ = "1.0.0"

# Core exports
from .core.config import DigestAlgorithm, DigestSettings, FileAction
from .core.models import FileActionKind, FileActionResult, ActionStats
from .core.protocols import Hasher, ByteSource, EventReporter
from .core.errors import (
    DlFilesError,
    DigestError,
    DigestReadError,
    DigestOpenError,
    FileOperationError,
    PathPreconditionError,
    PathOutsideRootError,
    MissingFileNameError,
)

# Engine exports
from .engines.digest_engine import (
    DigestEngine,
    create_digest_engine,
    create_hasher,
    digest,
    digest_file,
    digest_file_sha256,
)

# Service exports
from .services.naming import splice_name, filename_from_header, unique_path
from .services.file_actions import FileActionExecutor, execute_action

# Logging exports
from .logging.rich_logger import RichEventReporter, QuietEventReporter

__all__ = [
    # Core
    "DigestAlgorithm",
    "DigestSettings",
    "FileAction",
    "FileActionKind",
    "FileActionResult",
    "ActionStats",
    "Hasher",
    "ByteSource",
    "EventReporter",
    "DlFilesError",
    "DigestError",
    "DigestReadError",
    "DigestOpenError",
    "FileOperationError",
    "PathPreconditionError",
    "PathOutsideRootError",
    "MissingFileNameError",
    # Engines
    "DigestEngine",
    "create_digest_engine",
    "create_hasher",
    "digest",
    "digest_file",
    "digest_file_sha256",
    # Services
    "splice_name",
    "filename_from_header",
    "unique_path",
    "FileActionExecutor",
    "execute_action",
    # Logging
    "RichEventReporter",
    "QuietEventReporter",
]
