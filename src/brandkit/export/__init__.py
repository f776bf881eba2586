"""Brand kit export: archive layout, writers and the export pipeline."""

from brandkit.export.archive import ArchiveWriter, ZipArchiveWriter
from brandkit.export.download import DownloadHandle, Downloader, FileDownloader, offer_download
from brandkit.export.layout import (
    ArchiveEntry,
    ArchiveLayout,
    build_archive_layout,
    fold_by_slot,
    slugify,
)
from brandkit.export.pipeline import ExportResult, export_brand_kit, materialize, plan_export

__all__ = [
    "ArchiveEntry",
    "ArchiveLayout",
    "build_archive_layout",
    "fold_by_slot",
    "slugify",
    "ArchiveWriter",
    "ZipArchiveWriter",
    "Downloader",
    "DownloadHandle",
    "FileDownloader",
    "offer_download",
    "ExportResult",
    "export_brand_kit",
    "plan_export",
    "materialize",
]
