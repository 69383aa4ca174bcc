"""Filename derivation for download targets."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional


FILENAME_PARAM = "filename="


def splice_name(filename: str, suffix: int) -> str:
    """Put ``_<suffix>`` into the filename right before the extension.

    Only the last extension counts: ``stuff.tar.gz`` becomes
    ``stuff.tar_2.gz``. Dotfiles like ``.bashrc`` have no extension.
    """
    base, ext = os.path.splitext(filename)
    return f"{base}_{suffix}{ext}"


def filename_from_header(header_value: str) -> Optional[str]:
    """Extract the filename from a Content-Disposition header value.

    Takes everything after the first ``filename=`` and strips surrounding
    double quotes. ``filename*=`` parameters and quoted-pair escapes are not
    decoded.
    """
    index = header_value.find(FILENAME_PARAM)
    if index < 0:
        return None
    return header_value[index + len(FILENAME_PARAM):].strip('"')


def unique_path(directory: Path, filename: str, max_attempts: int = 1000) -> Path:
    """Find a path in ``directory`` that does not exist yet.

    Tries ``filename`` first, then ``splice_name(filename, n)`` for n = 1, 2, ...

    Raises:
        FileExistsError: No free name within ``max_attempts`` tries.
    """
    candidate = Path(directory) / filename
    if not candidate.exists():
        return candidate

    for counter in range(1, max_attempts):
        candidate = Path(directory) / splice_name(filename, counter)
        if not candidate.exists():
            return candidate

    raise FileExistsError(f"No free name for {filename} in {directory}")
