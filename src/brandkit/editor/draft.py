"""Working draft of a brand kit while it is being edited.

The draft owns two things: the working document (a plain JSON-like dict that
may be incomplete) and the files the user has attached. Files are keyed by a
stable slot id assigned when the logo variant, gallery item or font is
created, and only resolved to positions when the export runs. Removing slots
in any order therefore never moves a file onto the wrong item.

Interactive concerns (which panel is open, transient upload errors) live in
``DraftViewState`` and never touch the document.
"""

from __future__ import annotations

import copy
import time
from dataclasses import dataclass, field
from typing import Any, Iterable
from uuid import uuid4

from brandkit.assets.acceptance import accept_upload, variant_label_for
from brandkit.assets.pending import PendingAsset, SlotKey, SlotKind
from brandkit.colors.codec import ColorField, sync_color_values
from brandkit.config.constants import Limits
from brandkit.config.logging import get_logger
from brandkit.config.settings import Settings, get_settings
from brandkit.constants import GALLERY_DIR, LOGOS_DIR
from brandkit.exceptions import AssetRejectedError
from brandkit.export.pipeline import ExportResult, export_brand_kit
from brandkit.models.document import default_brand_kit
from brandkit.models.validation import ValidationResult, validate_brand_kit

logger = get_logger(__name__)

UploadFile = tuple[str, bytes]


def _new_id() -> str:
    return uuid4().hex


@dataclass
class _StagedFile:
    filename: str
    content: bytes = field(repr=False)


@dataclass
class DraftViewState:
    """Editor view state kept apart from the document.

    Attributes:
        expanded_color: Index of the color panel that is open, if any.
        upload_errors: Error key -> (message, expiry as monotonic seconds).
    """

    expanded_color: int | None = 0
    upload_errors: dict[str, tuple[str, float]] = field(default_factory=dict)

    def report_upload_error(
        self, key: str, message: str, ttl: float, now: float | None = None
    ) -> None:
        now = time.monotonic() if now is None else now
        self.upload_errors[key] = (message, now + ttl)

    def clear_upload_error(self, key: str) -> None:
        self.upload_errors.pop(key, None)

    def active_upload_errors(self, now: float | None = None) -> dict[str, str]:
        """Messages that have not expired yet; expired ones are dropped."""
        now = time.monotonic() if now is None else now
        self.upload_errors = {k: v for k, v in self.upload_errors.items() if v[1] > now}
        return {k: message for k, (message, _) in self.upload_errors.items()}


class BrandKitDraft:
    """Mutable brand kit document plus the files attached to it."""

    def __init__(
        self,
        document: dict[str, Any] | None = None,
        *,
        settings: Settings | None = None,
    ):
        self._settings = settings or get_settings()
        self._doc: dict[str, Any] = (
            copy.deepcopy(document) if document is not None else default_brand_kit()
        )
        self._doc.setdefault("logos", [])
        self._doc.setdefault("gallery", [])
        self._doc.setdefault("colors", [])
        self._doc.setdefault("typography", {}).setdefault("fonts", [])
        self._doc["typography"].setdefault("examples", [])

        self._variant_ids: list[list[str]] = [
            [_new_id() for _ in logo.get("variants", [])] for logo in self._doc["logos"]
        ]
        self._gallery_ids: list[str] = [_new_id() for _ in self._doc["gallery"]]
        self._font_ids: list[str] = [_new_id() for _ in self._doc["typography"]["fonts"]]

        self._logo_files: dict[str, _StagedFile] = {}
        self._gallery_files: dict[str, _StagedFile] = {}
        self._font_files: dict[str, list[_StagedFile]] = {}
        self.view = DraftViewState()

    # Document

    @property
    def document(self) -> dict[str, Any]:
        """The live working document. Prefer ``snapshot()`` for hand-off."""
        return self._doc

    def snapshot(self) -> dict[str, Any]:
        return copy.deepcopy(self._doc)

    def set_field(self, path: str, value: Any) -> None:
        """Set a value by dotted path, e.g. "brand.name" or "colors.0.name".

        Replacing a list that carries files ("logos", "logos.0.variants",
        "gallery", "typography.fonts" or a parent of one) gives its items new
        slots and drops the files staged for the old ones.
        """
        *parents, last = path.split(".")
        node: Any = self._doc
        for part in parents:
            node = node[int(part)] if isinstance(node, list) else node[part]
        if isinstance(node, list):
            node[int(last)] = value
        else:
            node[last] = value
        self._reslot([*parents, last])

    def validate(self) -> ValidationResult:
        return validate_brand_kit(self.snapshot())

    # Logos

    def add_logo(self) -> int:
        self._doc["logos"].append(
            {"name": "", "description": "", "variants": [{"label": "", "src": ""}]}
        )
        self._variant_ids.append([_new_id()])
        return len(self._doc["logos"]) - 1

    def remove_logo(self, index: int) -> None:
        self._doc["logos"].pop(index)
        for variant_id in self._variant_ids.pop(index):
            self._logo_files.pop(variant_id, None)

    def add_variant(self, logo: int) -> int:
        variants = self._doc["logos"][logo]["variants"]
        variants.append({"label": "", "src": ""})
        self._variant_ids[logo].append(_new_id())
        return len(variants) - 1

    def remove_variant(self, logo: int, variant: int) -> None:
        self._doc["logos"][logo]["variants"].pop(variant)
        self._logo_files.pop(self._variant_ids[logo].pop(variant), None)

    def attach_logo_file(self, logo: int, variant: int, filename: str, content: bytes) -> None:
        """Stage a logo file for a variant and fill in its label and path.

        Raises:
            AssetRejectedError: If the file is not an image.
        """
        key = f"logo-{logo}-{variant}"
        slot_id = self._variant_ids[logo][variant]
        self._accept(SlotKind.LOGO_VARIANT, key, filename, content)
        self._logo_files[slot_id] = _StagedFile(filename, content)
        entry = self._doc["logos"][logo]["variants"][variant]
        entry["label"] = variant_label_for(filename)
        entry["src"] = f"{LOGOS_DIR}/{filename}"

    # Gallery

    def add_gallery_files(self, files: Iterable[UploadFile]) -> list[int]:
        """Append one gallery item per image; non-images are skipped.

        Raises:
            AssetRejectedError: If files were given but none is an image.
        """
        files = list(files)
        accepted: list[UploadFile] = []
        last_error: AssetRejectedError | None = None
        for filename, content in files:
            try:
                accept_upload(SlotKind.GALLERY, filename, content, self._settings.max_asset_bytes)
            except AssetRejectedError as e:
                last_error = e
                continue
            accepted.append((filename, content))
        if files and not accepted and last_error is not None:
            self._report("gallery-upload", last_error)
            raise last_error

        self.view.clear_upload_error("gallery-upload")
        indexes = []
        for filename, content in accepted:
            slot_id = _new_id()
            self._doc["gallery"].append({"caption": "", "src": f"{GALLERY_DIR}/{filename}"})
            self._gallery_ids.append(slot_id)
            self._gallery_files[slot_id] = _StagedFile(filename, content)
            indexes.append(len(self._doc["gallery"]) - 1)
        return indexes

    def remove_gallery_item(self, index: int) -> None:
        self._doc["gallery"].pop(index)
        self._gallery_files.pop(self._gallery_ids.pop(index), None)

    # Fonts

    def add_font(self) -> int:
        self._doc["typography"]["fonts"].append(
            {
                "name": "",
                "source": {"type": "google", "family": "", "weights": [Limits.DEFAULT_FONT_WEIGHT]},
            }
        )
        self._font_ids.append(_new_id())
        return len(self._doc["typography"]["fonts"]) - 1

    def remove_font(self, index: int) -> None:
        self._doc["typography"]["fonts"].pop(index)
        self._font_files.pop(self._font_ids.pop(index), None)

    def attach_font_files(self, font: int, files: Iterable[UploadFile]) -> int:
        """Stage font files for a font; returns how many were accepted.

        Raises:
            AssetRejectedError: If files were given but none is a font.
        """
        files = list(files)
        key = f"font-{font}"
        slot_id = self._font_ids[font]
        accepted = []
        last_error: AssetRejectedError | None = None
        for filename, content in files:
            try:
                accept_upload(SlotKind.FONT, filename, content, self._settings.max_asset_bytes)
            except AssetRejectedError as e:
                last_error = e
                continue
            accepted.append(_StagedFile(filename, content))
        if files and not accepted and last_error is not None:
            self._report(key, last_error)
            raise last_error
        self.view.clear_upload_error(key)
        self._font_files.setdefault(slot_id, []).extend(accepted)
        return len(accepted)

    def remove_font_file(self, font: int, filename: str) -> None:
        staged = self._font_files.get(self._font_ids[font], [])
        self._font_files[self._font_ids[font]] = [f for f in staged if f.filename != filename]

    # Colors

    def add_color(self) -> int:
        self._doc["colors"].append(
            {"name": "", "role": ["Primary"], "values": {"hex": "", "rgb": "", "cmyk": ""}}
        )
        index = len(self._doc["colors"]) - 1
        self.view.expanded_color = index
        return index

    def remove_color(self, index: int) -> None:
        self._doc["colors"].pop(index)
        expanded = self.view.expanded_color
        if expanded == index:
            self.view.expanded_color = index - 1 if index > 0 else None
        elif expanded is not None and expanded > index:
            self.view.expanded_color = expanded - 1

    def sync_color(self, index: int, source: ColorField) -> dict[str, str]:
        """Recompute a color's other values from ``source`` and store them."""
        color = self._doc["colors"][index]
        color["values"] = sync_color_values(color.get("values", {}), source)
        return color["values"]

    # Assets

    def pending_assets(self) -> list[PendingAsset]:
        """Staged files resolved to their current slot positions."""
        assets: list[PendingAsset] = []
        for i, variant_ids in enumerate(self._variant_ids):
            for j, slot_id in enumerate(variant_ids):
                staged = self._logo_files.get(slot_id)
                if staged is not None:
                    assets.append(
                        PendingAsset(SlotKey.logo_variant(i, j), staged.content, staged.filename)
                    )
        for i, slot_id in enumerate(self._gallery_ids):
            staged = self._gallery_files.get(slot_id)
            if staged is not None:
                assets.append(PendingAsset(SlotKey.gallery(i), staged.content, staged.filename))
        for i, slot_id in enumerate(self._font_ids):
            for n, staged in enumerate(self._font_files.get(slot_id, [])):
                assets.append(PendingAsset(SlotKey.font(i, n), staged.content, staged.filename))
        return assets

    def discard_pending(self) -> None:
        self._logo_files.clear()
        self._gallery_files.clear()
        self._font_files.clear()

    async def export(self, **kwargs: Any) -> ExportResult:
        """Export the current draft; on success adopt the rewritten document.

        Staged files are consumed by the export and discarded afterwards.
        Keyword arguments are passed to ``export_brand_kit``.
        """
        result = await export_brand_kit(self.snapshot(), self.pending_assets(), **kwargs)
        self._doc = copy.deepcopy(result.layout.document)
        self.discard_pending()
        return result

    # Helpers

    def _reslot(self, parts: list[str]) -> None:
        if parts == ["logos"]:
            self._logo_files.clear()
            self._variant_ids = [
                [_new_id() for _ in logo.get("variants", [])] for logo in self._doc["logos"]
            ]
        elif parts[0] == "logos" and parts[2:] in ([], ["variants"]):
            i = int(parts[1])
            for variant_id in self._variant_ids[i]:
                self._logo_files.pop(variant_id, None)
            self._variant_ids[i] = [_new_id() for _ in self._doc["logos"][i].get("variants", [])]
        elif parts == ["gallery"]:
            self._gallery_files.clear()
            self._gallery_ids = [_new_id() for _ in self._doc["gallery"]]
        elif parts in (["typography"], ["typography", "fonts"]):
            self._font_files.clear()
            self._font_ids = [_new_id() for _ in self._doc["typography"].get("fonts", [])]
        else:
            return
        logger.debug("Replaced %s; staged files for its old slots were dropped", ".".join(parts))

    def _accept(self, kind: SlotKind, key: str, filename: str, content: bytes) -> None:
        try:
            accept_upload(kind, filename, content, self._settings.max_asset_bytes)
        except AssetRejectedError as e:
            self._report(key, e)
            raise
        self.view.clear_upload_error(key)

    def _report(self, key: str, error: AssetRejectedError) -> None:
        logger.debug("Upload rejected for %s: %s", key, error.message)
        self.view.report_upload_error(key, error.message, self._settings.upload_error_ttl_seconds)
