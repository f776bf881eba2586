"""Archive writer capability and the ZIP implementation."""

from __future__ import annotations

import asyncio
import io
import zipfile
from typing import Protocol, runtime_checkable

from brandkit.config.constants import ZIP_EPOCH
from brandkit.config.logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class ArchiveWriter(Protocol):
    """Minimal capability the export pipeline needs from an archive format.

    Paths use "/" separators; folders are implied by the paths.
    """

    def add_entry(self, path: str, content: bytes) -> None: ...

    async def finalize(self) -> bytes: ...


class ZipArchiveWriter:
    """Builds a ZIP archive in memory.

    Entries are written in the order they were added, under a fixed
    timestamp, so identical inputs produce byte-identical archives.
    """

    def __init__(self, compression_level: int = 6):
        self._compression_level = compression_level
        self._entries: dict[str, bytes] = {}
        self._finalized = False

    def add_entry(self, path: str, content: bytes) -> None:
        if self._finalized:
            raise RuntimeError("Archive already finalized")
        path = path.strip("/")
        if not path:
            raise ValueError(f"Invalid archive entry path: {path!r}")
        if path in self._entries:
            raise ValueError(f"Duplicate archive entry: {path}")
        self._entries[path] = content

    def _folders(self) -> list[str]:
        folders: list[str] = []
        for path in self._entries:
            parts = path.split("/")[:-1]
            for depth in range(1, len(parts) + 1):
                folder = "/".join(parts[:depth]) + "/"
                if folder not in folders:
                    folders.append(folder)
        return folders

    def _build(self) -> bytes:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            for folder in self._folders():
                info = zipfile.ZipInfo(folder, date_time=ZIP_EPOCH)
                info.external_attr = (0o40755 << 16) | 0x10
                zf.writestr(info, b"")
            for path, content in self._entries.items():
                info = zipfile.ZipInfo(path, date_time=ZIP_EPOCH)
                info.compress_type = zipfile.ZIP_DEFLATED
                info.external_attr = 0o644 << 16
                zf.writestr(info, content, compresslevel=self._compression_level)
        return buffer.getvalue()

    async def finalize(self) -> bytes:
        """Serialize all entries to a single ZIP blob."""
        self._finalized = True
        blob = await asyncio.to_thread(self._build)
        logger.debug("Built archive with %d entries (%d bytes)", len(self._entries), len(blob))
        return blob
