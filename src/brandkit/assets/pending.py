"""Pending assets: uploaded files staged for export.

A pending asset is not part of the brand kit document. It is created when the
editor accepts an upload, consumed once by the export pipeline and discarded
afterwards (or when its slot is removed).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple


class SlotKind(str, Enum):
    """Kind of document position a file can be attached to."""

    LOGO_VARIANT = "logoVariant"
    GALLERY = "gallery"
    FONT = "font"


class SlotKey(NamedTuple):
    """Positional identity of a slot at export time.

    ``index`` is the logo, gallery or font position. ``subindex`` is the
    variant position for logos and the file ordinal for fonts (a font can
    carry several files, one per weight or style); gallery slots have none.
    """

    kind: SlotKind
    index: int
    subindex: int | None = None

    @classmethod
    def logo_variant(cls, logo: int, variant: int) -> SlotKey:
        return cls(SlotKind.LOGO_VARIANT, logo, variant)

    @classmethod
    def gallery(cls, index: int) -> SlotKey:
        return cls(SlotKind.GALLERY, index)

    @classmethod
    def font(cls, font: int, ordinal: int = 0) -> SlotKey:
        return cls(SlotKind.FONT, font, ordinal)

    def describe(self) -> str:
        if self.kind is SlotKind.LOGO_VARIANT:
            return f"logos[{self.index}].variants[{self.subindex}]"
        if self.kind is SlotKind.GALLERY:
            return f"gallery[{self.index}]"
        return f"typography.fonts[{self.index}] file {self.subindex}"


def file_extension(filename: str) -> str:
    """Text after the last dot of ``filename``, case preserved.

    A name without a dot is its own extension ("raw" -> "raw"); a trailing
    dot gives an empty extension.
    """
    return filename.rpartition(".")[2]


@dataclass(frozen=True)
class PendingAsset:
    """An uploaded file waiting to be placed in an archive."""

    slot: SlotKey
    content: bytes = field(repr=False)
    original_filename: str

    @property
    def kind(self) -> SlotKind:
        return self.slot.kind

    @property
    def extension(self) -> str:
        return file_extension(self.original_filename)

    @property
    def size(self) -> int:
        return len(self.content)
