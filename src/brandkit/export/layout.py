"""Archive layout: where each pending asset goes and how the document changes.

Everything in this module is pure. Given the same kit and the same pending
assets the layout, including the ``data.json`` bytes, is identical on every
call. The layout is computed completely before anything is written, so an
export either places and references every asset or fails as a whole.

Naming rules:
    logos:   assets/logos/<slug(logo.name)>-<variant + 1>.<ext>
    gallery: assets/gallery/photo-<index + 1>.<ext>
    fonts:   assets/fonts/<slug(font.name)>-<original filename>

Logo variant and gallery ``src`` fields are rewritten to the archive path.
Font files are only added to the archive; the document has no field for them.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Any, Iterable

from brandkit.assets.pending import PendingAsset, SlotKey, SlotKind
from brandkit.config.constants import Limits
from brandkit.config.logging import get_logger
from brandkit.constants import (
    ARCHIVE_SUFFIX,
    DATA_FILENAME,
    FONTS_DIR,
    GALLERY_DIR,
    LOGOS_DIR,
)
from brandkit.exceptions import AssetCollisionError, AssetSlotError
from brandkit.models.brand_kit import BrandKit

logger = get_logger(__name__)

_WHITESPACE = re.compile(r"\s+")
_KIND_ORDER = {SlotKind.LOGO_VARIANT: 0, SlotKind.GALLERY: 1, SlotKind.FONT: 2}


def slugify(name: str) -> str:
    """Lower-case ``name`` and replace each run of whitespace with a hyphen.

    Nothing else is normalized: punctuation and non-ASCII letters pass through.

    Examples:
        "Acme" -> "acme"
        "Acme  Co. Blue" -> "acme-co.-blue"
    """
    return _WHITESPACE.sub("-", name.lower())


@dataclass(frozen=True)
class ArchiveEntry:
    """One named file inside the archive."""

    path: str
    content: bytes = field(repr=False)
    slot: SlotKey | None = None


@dataclass(frozen=True)
class ArchiveLayout:
    """Final archive contents plus the rewritten document."""

    document: dict[str, Any]
    entries: tuple[ArchiveEntry, ...]
    archive_name: str

    @property
    def entry_names(self) -> list[str]:
        return [e.path for e in self.entries]

    @property
    def document_bytes(self) -> bytes:
        return next(e.content for e in self.entries if e.path == DATA_FILENAME)

    @property
    def asset_entries(self) -> tuple[ArchiveEntry, ...]:
        return tuple(e for e in self.entries if e.slot is not None)


def _check_index(index: int | None, size: int, slot: SlotKey) -> int:
    if index is None or not 0 <= index < size:
        raise AssetSlotError(
            f"Pending file targets a missing slot: {slot.describe()}",
            details=f"document has {size} item(s) at that level",
        )
    return index


def _place(kit: BrandKit, document: dict[str, Any], asset: PendingAsset) -> str:
    """Return the archive path for ``asset`` and rewrite its document field."""
    slot = asset.slot
    if slot.kind is SlotKind.LOGO_VARIANT:
        i = _check_index(slot.index, len(kit.logos), slot)
        logo = kit.logos[i]
        j = _check_index(slot.subindex, len(logo.variants), slot)
        path = f"{LOGOS_DIR}/{slugify(logo.name)}-{j + 1}.{asset.extension}"
        document["logos"][i]["variants"][j]["src"] = path
        return path
    if slot.kind is SlotKind.GALLERY:
        i = _check_index(slot.index, len(kit.gallery), slot)
        path = f"{GALLERY_DIR}/photo-{i + 1}.{asset.extension}"
        document["gallery"][i]["src"] = path
        return path
    i = _check_index(slot.index, len(kit.typography.fonts), slot)
    if slot.subindex is not None and slot.subindex < 0:
        raise AssetSlotError(f"Pending file targets a missing slot: {slot.describe()}")
    font = kit.typography.fonts[i]
    return f"{FONTS_DIR}/{slugify(font.name)}-{PurePath(asset.original_filename).name}"


def _sort_key(slot: SlotKey) -> tuple[int, int, int]:
    sub = -1 if slot.subindex is None else slot.subindex
    return (_KIND_ORDER[slot.kind], slot.index, sub)


def fold_by_slot(assets: Iterable[PendingAsset]) -> dict[SlotKey, PendingAsset]:
    """Keep one asset per slot; a later asset for the same slot wins."""
    by_slot: dict[SlotKey, PendingAsset] = {}
    for asset in assets:
        if asset.slot in by_slot:
            logger.debug(
                "Replacing %s with %s for %s",
                by_slot[asset.slot].original_filename,
                asset.original_filename,
                asset.slot.describe(),
            )
        by_slot[asset.slot] = asset
    return by_slot


def build_archive_layout(kit: BrandKit, assets: Iterable[PendingAsset]) -> ArchiveLayout:
    """Map pending assets onto archive paths and rewrite the document.

    Args:
        kit: A validated brand kit. It is not modified.
        assets: Pending assets keyed by their current slot positions.

    Returns:
        ArchiveLayout with asset entries (logos, gallery, fonts) followed by
        ``data.json``.

    Raises:
        AssetSlotError: If an asset targets a slot the kit does not have.
        AssetCollisionError: If two different files resolve to one path.
    """
    document = kit.to_document()
    by_slot = fold_by_slot(assets)

    entries: list[ArchiveEntry] = []
    placed: dict[str, ArchiveEntry] = {}
    for slot in sorted(by_slot, key=_sort_key):
        asset = by_slot[slot]
        path = _place(kit, document, asset)
        existing = placed.get(path)
        if existing is not None:
            if existing.content != asset.content:
                raise AssetCollisionError(
                    f"Two different files would be saved as {path}",
                    details=f"{existing.slot.describe()} and {slot.describe()}",
                )
            logger.debug("Folding identical file for %s into %s", slot.describe(), path)
            continue
        entry = ArchiveEntry(path=path, content=asset.content, slot=slot)
        placed[path] = entry
        entries.append(entry)

    data = json.dumps(document, indent=Limits.JSON_INDENT, ensure_ascii=False)
    entries.append(ArchiveEntry(path=DATA_FILENAME, content=data.encode("utf-8")))

    layout = ArchiveLayout(
        document=document,
        entries=tuple(entries),
        archive_name=slugify(kit.brand.name) + ARCHIVE_SUFFIX,
    )
    logger.debug("Layout for %s: %d asset(s)", layout.archive_name, len(entries) - 1)
    return layout
