"""Brand kit document models and validation."""

from brandkit.models.brand_kit import (
    BrandInfo,
    BrandKit,
    Color,
    ColorRole,
    ColorValues,
    Font,
    FontSource,
    FontSourceType,
    GalleryItem,
    Logo,
    LogoVariant,
    Typography,
    TypographyExample,
)
from brandkit.models.document import default_brand_kit, read_document
from brandkit.models.validation import FieldError, ValidationResult, validate_brand_kit

__all__ = [
    "BrandKit",
    "BrandInfo",
    "Logo",
    "LogoVariant",
    "Color",
    "ColorRole",
    "ColorValues",
    "Typography",
    "Font",
    "FontSource",
    "FontSourceType",
    "TypographyExample",
    "GalleryItem",
    "FieldError",
    "ValidationResult",
    "validate_brand_kit",
    "read_document",
    "default_brand_kit",
]
