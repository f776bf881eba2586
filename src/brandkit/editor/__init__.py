"""Editing-side state: the working draft and its staged files."""

from brandkit.editor.draft import BrandKitDraft, DraftViewState

__all__ = ["BrandKitDraft", "DraftViewState"]
