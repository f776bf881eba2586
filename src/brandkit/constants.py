"""Centralized constants for brandkit."""

# Archive layout
DATA_FILENAME = "data.json"
ASSETS_DIR = "assets"
LOGOS_DIR = f"{ASSETS_DIR}/logos"
GALLERY_DIR = f"{ASSETS_DIR}/gallery"
FONTS_DIR = f"{ASSETS_DIR}/fonts"
ARCHIVE_SUFFIX = "-brand-kit.zip"

# Allowed file extensions
ALLOWED_IMAGE_EXTS = {".png", ".jpg", ".jpeg", ".gif", ".webp", ".svg"}
ALLOWED_FONT_EXTS = {".woff", ".woff2", ".ttf", ".otf"}

# MIME type mappings for images
MIME_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".svg": "image/svg+xml",
}
