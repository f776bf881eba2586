"""Download capability: offer a finished archive to the user as a named file."""

from __future__ import annotations

import asyncio
import os
import tempfile
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import AsyncIterator, Protocol, runtime_checkable

from brandkit.config.logging import get_logger
from brandkit.utils.file_utils import next_free_path, write_atomically

logger = get_logger(__name__)


@dataclass
class DownloadHandle:
    """Temporary resource allocated for one download.

    Attributes:
        filename: Suggested name for the saved file.
        location: Where the staged blob lives until release.
        released: Set once the handle has been released.
    """

    filename: str
    location: Path
    released: bool = False


@runtime_checkable
class Downloader(Protocol):
    """Acquire a handle for a blob, trigger the download, release the handle."""

    async def acquire(self, blob: bytes, filename: str) -> DownloadHandle: ...

    async def trigger(self, handle: DownloadHandle) -> Path | None: ...

    def release(self, handle: DownloadHandle) -> None: ...


@asynccontextmanager
async def offer_download(
    downloader: Downloader, blob: bytes, filename: str
) -> AsyncIterator[DownloadHandle]:
    """Hold a download handle for the duration of the block.

    The handle is released on every exit path, success or failure.
    """
    handle = await downloader.acquire(blob, filename)
    try:
        yield handle
    finally:
        downloader.release(handle)


class FileDownloader:
    """Saves archives into a directory on the local filesystem.

    The blob is staged in a temporary file on acquire and copied to
    ``output_dir/filename`` on trigger. An existing file is kept and the new
    archive gets a numbered name, unless ``overwrite`` is set.
    """

    def __init__(self, output_dir: Path, overwrite: bool = False):
        self.output_dir = Path(output_dir).expanduser()
        self.overwrite = overwrite

    async def acquire(self, blob: bytes, filename: str) -> DownloadHandle:
        def stage() -> Path:
            fd, name = tempfile.mkstemp(prefix=".brandkit-", suffix=".part")
            with os.fdopen(fd, "wb") as f:
                f.write(blob)
            return Path(name)

        location = await asyncio.to_thread(stage)
        return DownloadHandle(filename=filename, location=location)

    async def trigger(self, handle: DownloadHandle) -> Path | None:
        if handle.released:
            raise RuntimeError("Download handle already released")
        target = self.output_dir / handle.filename
        if not self.overwrite:
            target = next_free_path(target)

        def save() -> None:
            write_atomically(target, handle.location.read_bytes())

        await asyncio.to_thread(save)
        logger.info("Saved %s", target)
        return target

    def release(self, handle: DownloadHandle) -> None:
        if handle.released:
            return
        try:
            handle.location.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Could not remove staged download %s: %s", handle.location, e)
        handle.released = True
