"""Conversions between hex, RGB and CMYK color strings.

Inputs are live, possibly incomplete user text, so nothing here raises on
malformed input. A conversion that cannot be performed returns
``CONVERSION_UNAVAILABLE`` (the empty string) and callers must check for it
before applying the result.

String formats:
    hex:  "#RRGGBB" (output is lowercase)
    rgb:  "R, G, B" with integer channels 0-255
    cmyk: "C, M, Y, K" with integer percentages 0-100

CMYK percentages are whole numbers and both C and K are rounded before the
trip back, so hex -> cmyk -> hex may drift by up to two units per channel
(e.g. #004bf6 -> "100, 70, 0, 4" -> #0049f5). Grays drift by at most one.
That drift is accepted.

Digits are ASCII only.
"""

from __future__ import annotations

import math
import re
from typing import Literal, Mapping

CONVERSION_UNAVAILABLE = ""

ColorField = Literal["hex", "rgb", "cmyk"]

_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]{6}")
_LEADING_INT = re.compile(r"[+-]?[0-9]+")


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _parse_ints(text: str, count: int) -> list[int] | None:
    """Parse exactly ``count`` comma-separated integers.

    Each part is trimmed and its leading integer taken, so "12px" reads as 12
    while "px" fails.
    """
    parts = text.split(",")
    if len(parts) != count:
        return None
    values = []
    for part in parts:
        match = _LEADING_INT.match(part.strip())
        if not match:
            return None
        values.append(int(match.group()))
    return values


def _format(values: list[int]) -> str:
    return ", ".join(str(v) for v in values)


def hex_to_rgb(hex_value: str) -> str:
    """Convert "#RRGGBB" to "R, G, B"."""
    cleaned = hex_value.removeprefix("#")
    if not _HEX_DIGITS.fullmatch(cleaned):
        return CONVERSION_UNAVAILABLE
    return _format([int(cleaned[i : i + 2], 16) for i in (0, 2, 4)])


def rgb_to_hex(rgb: str) -> str:
    """Convert "R, G, B" to lowercase "#rrggbb".

    Channels outside 0-255 cannot be written as two hex digits and make the
    conversion unavailable.
    """
    parts = _parse_ints(rgb, 3)
    if parts is None or any(not 0 <= v <= 255 for v in parts):
        return CONVERSION_UNAVAILABLE
    return "#" + "".join(f"{v:02x}" for v in parts)


def rgb_to_cmyk(rgb: str) -> str:
    """Convert "R, G, B" to "C, M, Y, K" percentages."""
    parts = _parse_ints(rgb, 3)
    if parts is None:
        return CONVERSION_UNAVAILABLE
    r, g, b = (v / 255 for v in parts)
    k = 1 - max(r, g, b)
    if k == 1:
        return "0, 0, 0, 100"
    c = _round_half_away(((1 - r - k) / (1 - k)) * 100)
    m = _round_half_away(((1 - g - k) / (1 - k)) * 100)
    y = _round_half_away(((1 - b - k) / (1 - k)) * 100)
    return _format([c, m, y, _round_half_away(k * 100)])


def cmyk_to_rgb(cmyk: str) -> str:
    """Convert "C, M, Y, K" percentages to "R, G, B"."""
    parts = _parse_ints(cmyk, 4)
    if parts is None:
        return CONVERSION_UNAVAILABLE
    c, m, y, k = (v / 100 for v in parts)
    return _format([_round_half_away(255 * (1 - x) * (1 - k)) for x in (c, m, y)])


def hex_to_cmyk(hex_value: str) -> str:
    """Convert "#RRGGBB" to "C, M, Y, K" through RGB."""
    rgb = hex_to_rgb(hex_value)
    if not rgb:
        return CONVERSION_UNAVAILABLE
    return rgb_to_cmyk(rgb)


def cmyk_to_hex(cmyk: str) -> str:
    """Convert "C, M, Y, K" to "#rrggbb" through RGB."""
    rgb = cmyk_to_rgb(cmyk)
    if not rgb:
        return CONVERSION_UNAVAILABLE
    return rgb_to_hex(rgb)


_DERIVED = {
    "hex": (("rgb", hex_to_rgb), ("cmyk", hex_to_cmyk)),
    "rgb": (("hex", rgb_to_hex), ("cmyk", rgb_to_cmyk)),
    "cmyk": (("hex", cmyk_to_hex), ("rgb", cmyk_to_rgb)),
}


def sync_color_values(values: Mapping[str, str], source: ColorField) -> dict[str, str]:
    """Recompute the other two representations from ``values[source]``.

    Returns a new mapping; the input is never modified. A derived field whose
    conversion is unavailable keeps its previous value, so a half-typed hex
    code does not wipe out the RGB and CMYK the user already has.
    """
    if source not in _DERIVED:
        raise ValueError(f"Unknown color field: {source}")
    result = dict(values)
    text = values.get(source, "")
    for target, convert in _DERIVED[source]:
        converted = convert(text)
        if converted:
            result[target] = converted
    return result
