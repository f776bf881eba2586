"""brandkit: author brand kit documents and export them as portable archives."""

from brandkit.assets import PendingAsset, SlotKey, SlotKind
from brandkit.colors import (
    cmyk_to_hex,
    cmyk_to_rgb,
    hex_to_cmyk,
    hex_to_rgb,
    rgb_to_cmyk,
    rgb_to_hex,
)
from brandkit.editor import BrandKitDraft
from brandkit.export import ArchiveLayout, build_archive_layout, export_brand_kit
from brandkit.models import BrandKit, FieldError, ValidationResult, validate_brand_kit

__version__ = "0.1.0"

__all__ = [
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_cmyk",
    "cmyk_to_rgb",
    "hex_to_cmyk",
    "cmyk_to_hex",
    "BrandKit",
    "FieldError",
    "ValidationResult",
    "validate_brand_kit",
    "PendingAsset",
    "SlotKey",
    "SlotKind",
    "ArchiveLayout",
    "build_archive_layout",
    "export_brand_kit",
    "BrandKitDraft",
]
