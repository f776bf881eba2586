"""File utility functions for atomic writes and collision-free names."""

from __future__ import annotations

import os
from pathlib import Path


def write_atomically(path: Path, content: str | bytes) -> None:
    """Atomically write content to file using temp file + fsync + os.replace.

    Args:
        path: Target file path.
        content: Content to write (str or bytes).

    Pattern:
        - Write to temp file in same directory.
        - Flush + fsync for durability.
        - Atomic rename via os.replace.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")

    try:
        if isinstance(content, bytes):
            with open(tmp, "wb") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
        else:
            with open(tmp, "w", encoding="utf-8") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())

        os.replace(tmp, path)
    except BaseException:
        try:
            tmp.unlink(missing_ok=True)
        except OSError:
            pass
        raise


def next_free_path(path: Path) -> Path:
    """Return ``path`` or the first "name (n).ext" sibling that does not exist.

    Examples:
        acme-brand-kit.zip -> acme-brand-kit (1).zip when the first exists
    """
    if not path.exists():
        return path
    n = 1
    while True:
        candidate = path.with_name(f"{path.stem} ({n}){path.suffix}")
        if not candidate.exists():
            return candidate
        n += 1
