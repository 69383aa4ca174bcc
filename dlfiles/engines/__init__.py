"""Digest engines."""
from .digest_engine import (
    DigestEngine,
    create_digest_engine,
    create_hasher,
    digest,
    digest_file,
    digest_file_sha256,
)

__all__ = [
    "DigestEngine",
    "create_digest_engine",
    "create_hasher",
    "digest",
    "digest_file",
    "digest_file_sha256",
]
