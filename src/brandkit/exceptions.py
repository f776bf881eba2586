"""Centralized exception classes for brandkit.

This module provides a hierarchy of exceptions for better error handling
and user-friendly error messages throughout the package. Color conversion
and schema validation report failures as data; these exceptions are raised
where a caller asked for an operation that cannot proceed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from brandkit.models.validation import FieldError


class BrandKitError(Exception):
    """Base exception for all brandkit errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, details: str | None = None):
        """Initialize the exception.

        Args:
            message: User-friendly error message.
            details: Additional technical details for debugging.
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\n  Details: {self.details}"
        return self.message


def _format_field_errors(errors: Sequence[FieldError]) -> str:
    return "; ".join(f"{e.path or '<root>'}: {e.message}" for e in errors)


class ConfigurationError(BrandKitError):
    """Raised when configuration is missing or invalid."""

    pass


class DocumentReadError(BrandKitError):
    """Raised when a brand kit document cannot be read or parsed."""

    pass


class BrandKitValidationError(BrandKitError, ValueError):
    """Raised when a candidate document is not a legal brand kit."""

    def __init__(self, errors: Sequence[FieldError], message: str = "Brand kit is invalid"):
        super().__init__(message, details=_format_field_errors(errors))
        self.errors = list(errors)


class AssetRejectedError(BrandKitError, ValueError):
    """Raised when an uploaded file does not fit the slot it was dropped on."""

    def __init__(self, kind: str, message: str, filename: str | None = None):
        super().__init__(message, details=filename)
        self.kind = kind
        self.filename = filename


class ExportError(BrandKitError):
    """Base class for export pipeline failures."""

    pass


class ExportPreconditionError(ExportError):
    """Raised when export is invoked with a document that fails validation."""

    def __init__(self, errors: Sequence[FieldError]):
        super().__init__(
            "Cannot export: brand kit failed validation",
            details=_format_field_errors(errors),
        )
        self.errors = list(errors)


class AssetSlotError(ExportError):
    """Raised when a pending asset targets a slot the document does not have."""

    pass


class AssetCollisionError(ExportError):
    """Raised when two different files resolve to the same archive path."""

    pass


class ArchiveWriteError(ExportError):
    """Raised when the archive writer or downloader fails."""

    pass
