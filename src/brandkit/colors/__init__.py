"""Color conversion utilities."""

from brandkit.colors.codec import (
    CONVERSION_UNAVAILABLE,
    ColorField,
    cmyk_to_hex,
    cmyk_to_rgb,
    hex_to_cmyk,
    hex_to_rgb,
    rgb_to_cmyk,
    rgb_to_hex,
    sync_color_values,
)

__all__ = [
    "CONVERSION_UNAVAILABLE",
    "ColorField",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_cmyk",
    "cmyk_to_rgb",
    "hex_to_cmyk",
    "cmyk_to_hex",
    "sync_color_values",
]
