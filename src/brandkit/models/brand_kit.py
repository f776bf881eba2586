"""Data models for a brand kit document.

The document is the portable description of a brand's visual identity:
- BrandInfo: name, description, website and last-updated date
- Logo / LogoVariant: named logos with one or more file variants
- Color / ColorValues: palette entries with hex, RGB and CMYK strings
- Typography / Font / TypographyExample: font sources and usage samples
- GalleryItem: captioned reference images

Wire names are camelCase (``updatedAt``, ``sizePx``); Python attributes are
snake_case. Checks are structural and lightly semantic only. There are no
cross-field checks: an example may name a font that does not exist and a
color's hex, RGB and CMYK values may disagree.
"""

from __future__ import annotations

import re
from typing import Annotated, Any, Literal, Union

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    PlainValidator,
    Strict,
    TypeAdapter,
)
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

HEX_PATTERN = r"^#[0-9A-Fa-f]{6}$"
RGB_PATTERN = r"^[0-9]{1,3},\s*[0-9]{1,3},\s*[0-9]{1,3}$"
CMYK_PATTERN = r"^[0-9]{1,3},\s*[0-9]{1,3},\s*[0-9]{1,3},\s*[0-9]{1,3}$"
DATE_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"

ColorRole = Literal["Primary", "Secondary", "Data"]
FontSourceType = Literal["google", "local", "url"]

_url_adapter = TypeAdapter(AnyUrl)


def _required(message: str) -> AfterValidator:
    def check(value: str) -> str:
        if not value:
            raise PydanticCustomError("string_too_short", message)
        return value

    return AfterValidator(check)


def _non_empty(message: str) -> AfterValidator:
    def check(value: list) -> list:
        if not value:
            raise PydanticCustomError("too_short", message)
        return value

    return AfterValidator(check)


def _matches(pattern: str, message: str) -> AfterValidator:
    compiled = re.compile(pattern)

    def check(value: str) -> str:
        if not compiled.fullmatch(value):
            raise PydanticCustomError("string_pattern_mismatch", message)
        return value

    return AfterValidator(check)


def _absolute_url(value: str) -> str:
    try:
        _url_adapter.validate_python(value)
    except PydanticValidationError:
        raise PydanticCustomError("url_parsing", "Must be a valid URL") from None
    return value


def _number(
    minimum: float | None = None,
    maximum: float | None = None,
    message: str | None = None,
) -> PlainValidator:
    """Accept an int or float (never a bool or numeric string) within bounds."""

    def check(value: Any) -> int | float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise PydanticCustomError(
                "number_type", "Expected number, received {kind}", {"kind": type(value).__name__}
            )
        if minimum is not None and value < minimum:
            raise PydanticCustomError(
                "too_small", message or "Number must be greater than or equal to {limit}",
                {"limit": minimum},
            )
        if maximum is not None and value > maximum:
            raise PydanticCustomError(
                "too_big", message or "Number must be less than or equal to {limit}",
                {"limit": maximum},
            )
        return value

    return PlainValidator(check)


Text = Annotated[str, Strict()]
Number = Annotated[Union[int, float], _number()]


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LogoVariant(_Record):
    """One file of a logo, e.g. the SVG or the PNG."""

    label: Annotated[Text, _required("Label is required")]
    src: Annotated[Text, _required("Source path is required")]


class Logo(_Record):
    """A named logo with its file variants."""

    name: Annotated[Text, _required("Logo name is required")]
    description: Annotated[Text, _required("Description is required")]
    variants: Annotated[
        list[LogoVariant], _non_empty("At least one variant is required")
    ]


class ColorValues(_Record):
    """Independent hex, RGB and CMYK strings for one color."""

    hex: Annotated[Text, _matches(HEX_PATTERN, "Must be a valid hex color (e.g., #035259)")]
    rgb: Annotated[Text, _matches(RGB_PATTERN, "Must be in format: R, G, B (e.g., 3, 82, 89)")]
    cmyk: Annotated[
        Text, _matches(CMYK_PATTERN, "Must be in format: C, M, Y, K (e.g., 34, 3, 0, 65)")
    ]


class Color(_Record):
    """A palette entry."""

    name: Annotated[Text, _required("Color name is required")]
    role: Annotated[list[ColorRole], _non_empty("At least one role is required")]
    values: ColorValues

    @property
    def roles(self) -> frozenset[str]:
        """Roles as a set; repeated entries carry no meaning."""
        return frozenset(self.role)


class FontSource(_Record):
    type: FontSourceType
    family: Annotated[Text, _required("Font family is required")]
    weights: Annotated[
        list[Annotated[int, Strict()]], _non_empty("At least one font weight is required")
    ]


class Font(_Record):
    name: Annotated[Text, _required("Font name is required")]
    source: FontSource


class TypographyExample(_Record):
    """A labelled text sample rendered in one of the kit's fonts.

    ``font`` refers to a ``Font.name`` by convention only.
    """

    label: Annotated[Text, _required("Label is required")]
    font: Annotated[Text, _required("Font is required")]
    size_px: Annotated[Union[int, float], _number(minimum=1, message="Size must be at least 1px")]
    weight: Annotated[Union[int, float], _number(minimum=100, maximum=900)]
    text: Annotated[Text, _required("Example text is required")]
    line_height: Number | None = None
    letter_spacing: Text | None = None


class Typography(_Record):
    fonts: Annotated[list[Font], _non_empty("At least one font is required")]
    examples: Annotated[
        list[TypographyExample], _non_empty("At least one example is required")
    ]


class GalleryItem(_Record):
    caption: Text | None = None
    src: Annotated[Text, _required("Source path is required")]


class BrandInfo(_Record):
    name: Annotated[Text, _required("Brand name is required")]
    description: Annotated[Text, _required("Description is required")]
    website: Annotated[Text, AfterValidator(_absolute_url)]
    updated_at: Annotated[Text, _matches(DATE_PATTERN, "Must be in format: YYYY-MM-DD")]


class BrandKit(_Record):
    """The complete brand kit document."""

    brand: BrandInfo
    logos: Annotated[list[Logo], _non_empty("At least one logo is required")]
    colors: Annotated[list[Color], _non_empty("At least one color is required")]
    typography: Typography
    gallery: list[GalleryItem] = Field(default_factory=list)

    def to_document(self) -> dict[str, Any]:
        """Serialize to the JSON-ready wire form.

        Optional fields that were never set are omitted rather than written
        as null.
        """
        return self.model_dump(by_alias=True, exclude_none=True)
