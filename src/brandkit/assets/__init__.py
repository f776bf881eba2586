"""Pending asset types and upload acceptance."""

from brandkit.assets.acceptance import (
    accept_upload,
    guess_media_type,
    is_font,
    is_image,
    variant_label_for,
)
from brandkit.assets.pending import PendingAsset, SlotKey, SlotKind, file_extension

__all__ = [
    "PendingAsset",
    "SlotKey",
    "SlotKind",
    "file_extension",
    "accept_upload",
    "guess_media_type",
    "is_image",
    "is_font",
    "variant_label_for",
]
