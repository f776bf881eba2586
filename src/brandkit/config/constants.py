"""Centralized limits for brandkit."""

# Fixed ZIP entry timestamp so identical layouts produce identical archives
ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)


# Size and timing limits
class Limits:
    MAX_ASSET_BYTES = 50 * 1024 * 1024
    UPLOAD_ERROR_TTL_SECONDS = 3.0
    JSON_INDENT = 2
    DEFAULT_FONT_WEIGHT = 400
    DEFAULT_FONT_SIZE_PX = 16
