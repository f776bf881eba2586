"""Validation entry point returning field-path errors as data."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from brandkit.config.logging import get_logger
from brandkit.exceptions import BrandKitValidationError
from brandkit.models.brand_kit import BrandKit

logger = get_logger(__name__)


@dataclass(frozen=True)
class FieldError:
    """One failed constraint.

    Attributes:
        path: Dot-joined wire path, e.g. "typography.fonts" or
            "colors.0.values.hex". Empty for the document root.
        message: User-facing description of the failure.
    """

    path: str
    message: str


@dataclass
class ValidationResult:
    """Outcome of validating a candidate document.

    Exactly one of ``kit`` and ``errors`` is meaningful: a valid document has
    a kit and no errors.
    """

    kit: BrandKit | None = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.kit is not None and not self.errors

    def errors_for(self, path: str) -> list[FieldError]:
        """Errors at ``path`` or nested below it."""
        return [e for e in self.errors if e.path == path or e.path.startswith(path + ".")]

    def raise_for_errors(self) -> BrandKit:
        """Return the kit, or raise BrandKitValidationError."""
        if not self.ok:
            raise BrandKitValidationError(self.errors)
        return self.kit  # type: ignore[return-value]


def _to_field_errors(exc: PydanticValidationError) -> list[FieldError]:
    return [
        FieldError(path=".".join(str(part) for part in err["loc"]), message=err["msg"])
        for err in exc.errors(include_url=False)
    ]


def validate_brand_kit(candidate: Any) -> ValidationResult:
    """Check whether ``candidate`` is a legal brand kit.

    Every failure is collected rather than stopping at the first one, so the
    caller can show all field errors at once. Never raises for bad input.

    Args:
        candidate: A JSON-like mapping, or an existing BrandKit.

    Returns:
        ValidationResult holding the parsed kit or the list of field errors.
    """
    if isinstance(candidate, BrandKit):
        candidate = candidate.to_document()
    if not isinstance(candidate, Mapping):
        received = type(candidate).__name__
        error = FieldError(path="", message=f"Expected object, received {received}")
        return ValidationResult(errors=[error])
    try:
        kit = BrandKit.model_validate(candidate)
    except PydanticValidationError as e:
        errors = _to_field_errors(e)
        logger.debug("Brand kit failed validation with %d error(s)", len(errors))
        return ValidationResult(errors=errors)
    return ValidationResult(kit=kit)
