"""Export pipeline: validate, lay out, write the archive and offer it.

Validation and layout are synchronous and pure. Materialization is the one
step that suspends: it awaits the archive writer and the downloader, and its
failures surface as ``ArchiveWriteError``. Nothing is retried.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

from brandkit.assets.pending import PendingAsset
from brandkit.config.logging import get_logger
from brandkit.config.settings import Settings, get_settings
from brandkit.exceptions import ArchiveWriteError, ExportPreconditionError
from brandkit.export.archive import ArchiveWriter, ZipArchiveWriter
from brandkit.export.download import Downloader, FileDownloader, offer_download
from brandkit.export.layout import ArchiveLayout, build_archive_layout
from brandkit.models.brand_kit import BrandKit
from brandkit.models.validation import validate_brand_kit

logger = get_logger(__name__)


@dataclass
class ExportResult:
    """Outcome of a successful export.

    Attributes:
        layout: Entry names, rewritten document and archive name.
        archive: The serialized archive.
        saved_to: Where the downloader put the file, if it reports one.
    """

    layout: ArchiveLayout
    archive: bytes
    saved_to: Path | None = None


def plan_export(candidate: Any, assets: Iterable[PendingAsset]) -> ArchiveLayout:
    """Validate ``candidate`` and compute its archive layout.

    Raises:
        ExportPreconditionError: If the document is not a legal brand kit.
        AssetSlotError: If a pending asset has no matching slot.
        AssetCollisionError: If two different files share an archive path.
    """
    result = validate_brand_kit(candidate)
    if not result.ok:
        raise ExportPreconditionError(result.errors)
    return build_archive_layout(result.kit, assets)


async def materialize(layout: ArchiveLayout, writer: ArchiveWriter) -> bytes:
    """Write every layout entry and serialize the archive.

    Raises:
        ArchiveWriteError: If the writer fails.
    """
    try:
        for entry in layout.entries:
            writer.add_entry(entry.path, entry.content)
        return await writer.finalize()
    except Exception as e:
        raise ArchiveWriteError("Failed to build the archive", details=str(e)) from e


async def export_brand_kit(
    candidate: BrandKit | dict[str, Any],
    assets: Iterable[PendingAsset] = (),
    *,
    writer: ArchiveWriter | None = None,
    downloader: Downloader | None = None,
    settings: Settings | None = None,
) -> ExportResult:
    """Export a brand kit and its pending files as one archive.

    The caller's document and assets are never modified. If validation or
    layout fails, no archive entry is written.

    Args:
        candidate: Brand kit document (mapping) or an already-parsed BrandKit.
        assets: Files staged by the editor, keyed by slot position.
        writer: Archive writer; defaults to a ZipArchiveWriter.
        downloader: Download collaborator; defaults to a FileDownloader
            saving into ``settings.output_dir``.
        settings: Overrides the cached settings.

    Returns:
        ExportResult with the layout, archive bytes and saved location.

    Raises:
        ExportPreconditionError: If the document fails validation.
        AssetSlotError: If a pending asset has no matching slot.
        AssetCollisionError: If two different files share an archive path.
        ArchiveWriteError: If writing or downloading the archive fails.
    """
    layout = plan_export(candidate, tuple(assets))

    if writer is None or downloader is None:
        settings = settings or get_settings()
    if writer is None:
        writer = ZipArchiveWriter(compression_level=settings.compression_level)
    if downloader is None:
        downloader = FileDownloader(settings.output_dir, overwrite=settings.overwrite_existing)

    archive = await materialize(layout, writer)
    try:
        async with offer_download(downloader, archive, layout.archive_name) as handle:
            saved_to = await downloader.trigger(handle)
    except Exception as e:
        raise ArchiveWriteError(
            f"Failed to save {layout.archive_name}", details=str(e)
        ) from e

    logger.info(
        "Exported %s with %d asset(s)", layout.archive_name, len(layout.asset_entries)
    )
    return ExportResult(layout=layout, archive=archive, saved_to=saved_to)
