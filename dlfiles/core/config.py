"""Configuration models for digesting and post-download file actions."""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .models import FileActionKind


DEFAULT_CHUNK_SIZE = 1024


class DigestAlgorithm(str, Enum):
    """Hash algorithm used for content digests. Values are hashlib names."""
    SHA256 = "sha256"
    SHA512 = "sha512"
    SHA1 = "sha1"
    MD5 = "md5"
    BLAKE2B = "blake2b"
    BLAKE2S = "blake2s"


class DigestSettings(BaseModel):
    """How content digests are computed."""
    algorithm: DigestAlgorithm = Field(
        default=DigestAlgorithm.SHA256,
        description="Hash algorithm for content digests",
    )
    chunk_size: int = Field(
        default=DEFAULT_CHUNK_SIZE,
        description="Number of bytes requested per read",
    )

    @field_validator("chunk_size")
    @classmethod
    def check_chunk_size(cls, value: int) -> int:
        if value < 1:
            raise ValueError("chunk_size must be at least 1")
        return value


class FileAction(BaseModel):
    """What to do with a file once it has been processed.

    If ``move_to`` is set the file is moved there and ``delete`` is ignored.
    """
    delete: bool = Field(
        default=False,
        description="Delete the file when no move target is set",
    )
    move_to: Optional[Path] = Field(
        default=None,
        description="Destination root to move the file into",
    )

    @field_validator("move_to")
    @classmethod
    def expand_move_to(cls, value: Optional[Path]) -> Optional[Path]:
        if value is None:
            return None
        return value.expanduser()

    @property
    def effective_kind(self) -> FileActionKind:
        """The outcome kind executing this action produces."""
        if self.move_to is not None:
            return FileActionKind.MOVED
        if self.delete:
            return FileActionKind.DELETED
        return FileActionKind.NOTHING
