"""Upload acceptance rules for each slot kind."""

from __future__ import annotations

import io
from pathlib import PurePath

from PIL import Image, UnidentifiedImageError

from brandkit.assets.pending import SlotKind, file_extension
from brandkit.config.logging import get_logger
from brandkit.constants import ALLOWED_FONT_EXTS, ALLOWED_IMAGE_EXTS, MIME_TYPES
from brandkit.exceptions import AssetRejectedError

logger = get_logger(__name__)

REJECT_LOGO = "Please upload an image file (SVG, PNG, JPG, or GIF)"
REJECT_GALLERY = "Please upload image files (PNG, JPG, GIF, or WebP)"
REJECT_FONT = "Please upload a font file (WOFF, WOFF2, TTF, or OTF)"

_MESSAGES = {
    SlotKind.LOGO_VARIANT: REJECT_LOGO,
    SlotKind.GALLERY: REJECT_GALLERY,
    SlotKind.FONT: REJECT_FONT,
}


def guess_media_type(filename: str) -> str | None:
    """MIME type for an image filename, or None when it is not an image."""
    return MIME_TYPES.get(PurePath(filename).suffix.lower())


def _is_raster_image(content: bytes) -> bool:
    try:
        with Image.open(io.BytesIO(content)) as img:
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError):
        return False
    return True


def is_image(filename: str, content: bytes) -> bool:
    """True when the name looks like an image and raster bytes decode.

    SVG is text, so it is judged by its name only.
    """
    suffix = PurePath(filename).suffix.lower()
    if suffix not in ALLOWED_IMAGE_EXTS:
        return False
    if suffix == ".svg":
        return True
    return _is_raster_image(content)


def is_font(filename: str) -> bool:
    return PurePath(filename).suffix.lower() in ALLOWED_FONT_EXTS


def accept_upload(
    kind: SlotKind, filename: str, content: bytes, max_bytes: int | None = None
) -> None:
    """Check that a file may be attached to a slot of ``kind``.

    Raises:
        AssetRejectedError: If the file is the wrong media kind for the slot
            or larger than ``max_bytes``.
    """
    if max_bytes is not None and len(content) > max_bytes:
        raise AssetRejectedError(
            kind.value, f"File is too large (limit {max_bytes // (1024 * 1024)} MB)", filename
        )
    accepted = is_font(filename) if kind is SlotKind.FONT else is_image(filename, content)
    if not accepted:
        logger.debug("Rejected %s for %s slot", filename, kind.value)
        raise AssetRejectedError(kind.value, _MESSAGES[kind], filename)


def variant_label_for(filename: str) -> str:
    """Label a logo variant after its file format, e.g. "SVG" or "PNG"."""
    ext = file_extension(filename).upper()
    return ext or "PNG"
