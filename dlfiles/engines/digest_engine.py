"""Streaming content digests for deduplication and verification.

Sources are read in fixed-size chunks so memory use stays bounded no
matter how large the input is. The hash algorithm is pluggable through the
``Hasher`` protocol; hashlib objects are used by default.
"""
from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Callable, Optional

from ..core.config import DigestAlgorithm, DigestSettings
from ..core.errors import DigestOpenError, DigestReadError
from ..core.protocols import ByteSource, EventReporter, Hasher
from ..logging.rich_logger import QuietEventReporter


HasherFactory = Callable[[], Hasher]


def create_hasher(algorithm: DigestAlgorithm = DigestAlgorithm.SHA256) -> Hasher:
    """Create a fresh hash state for the given algorithm."""
    return hashlib.new(DigestAlgorithm(algorithm).value)


class DigestEngine:
    """Computes lowercase hex digests over byte sources."""

    def __init__(
        self,
        settings: Optional[DigestSettings] = None,
        reporter: Optional[EventReporter] = None,
        hasher_factory: Optional[HasherFactory] = None,
    ):
        """Initialize the digest engine.

        Args:
            settings: Algorithm and chunk size. Defaults to SHA-256, 1 KiB.
            reporter: Receives debug events. Defaults to a quiet reporter.
            hasher_factory: Overrides the hasher built from ``settings``.
        """
        self._settings = settings or DigestSettings()
        self._reporter = reporter or QuietEventReporter()
        self._hasher_factory = hasher_factory or (
            lambda: create_hasher(self._settings.algorithm)
        )

    @property
    def name(self) -> str:
        """Algorithm name, taken from the hasher when it reports one."""
        return getattr(self._hasher_factory(), "name", self._settings.algorithm.value)

    @property
    def chunk_size(self) -> int:
        return self._settings.chunk_size

    @property
    def digest_size(self) -> int:
        """Length of the hex digests this engine produces."""
        return len(self._hasher_factory().digest()) * 2

    def digest(self, reader: ByteSource) -> str:
        """Consume ``reader`` to its end and return the hex digest.

        Reading stops only on an empty read, so sources that return short
        reads before the end (pipes, sockets) are hashed in full.

        Raises:
            DigestReadError: The source raised while being read.
        """
        hasher = self._hasher_factory()
        chunk_size = self._settings.chunk_size
        while True:
            try:
                chunk = reader.read(chunk_size)
            except (OSError, ValueError) as exc:
                raise DigestReadError("Could not read source", exc) from exc
            if not chunk:
                break
            hasher.update(chunk)
        return hasher.digest().hex()

    def digest_file(self, path: Path) -> str:
        """Open ``path`` and return the hex digest of its contents.

        Raises:
            DigestOpenError: The file could not be opened.
            DigestReadError: The file could not be read.
        """
        path = Path(path)
        self._reporter.debug(f"Calculating {self.name} digest for file {path}")
        try:
            handle = path.open("rb")
        except OSError as exc:
            raise DigestOpenError(f"Could not open file {path}", exc) from exc
        with handle:
            return self.digest(handle)

    def verify_file(self, path: Path, expected: str) -> bool:
        """Check a file's digest against an expected hex string."""
        return self.digest_file(path) == expected.strip().lower()


def create_digest_engine(
    algorithm: DigestAlgorithm = DigestAlgorithm.SHA256,
    chunk_size: Optional[int] = None,
    reporter: Optional[EventReporter] = None,
) -> DigestEngine:
    """Factory function to create a digest engine.

    Args:
        algorithm: Which hash algorithm to use.
        chunk_size: Bytes per read. Uses the default when None.
        reporter: Optional event reporter.
    """
    options: dict = {"algorithm": algorithm}
    if chunk_size is not None:
        options["chunk_size"] = chunk_size
    return DigestEngine(settings=DigestSettings(**options), reporter=reporter)


def digest(reader: ByteSource, algorithm: DigestAlgorithm = DigestAlgorithm.SHA256) -> str:
    return create_digest_engine(algorithm).digest(reader)


def digest_file(path: Path, algorithm: DigestAlgorithm = DigestAlgorithm.SHA256) -> str:
    return create_digest_engine(algorithm).digest_file(path)


def digest_file_sha256(path: Path) -> str:
    return digest_file(path, DigestAlgorithm.SHA256)
