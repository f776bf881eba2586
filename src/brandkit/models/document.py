"""Reading brand kit documents from disk and building the blank draft."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Any

import yaml

from brandkit.config.constants import Limits
from brandkit.exceptions import DocumentReadError


def read_document(path: Path) -> dict[str, Any]:
    """Load a candidate document from a .json, .yaml or .yml file.

    The result is unvalidated; pass it to ``validate_brand_kit``.

    Raises:
        DocumentReadError: If the file is missing, unreadable, not parseable
            or does not hold a mapping at the top level.
    """
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentReadError(f"Cannot read {path}", details=str(e)) from e
    try:
        if suffix in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        elif suffix == ".json":
            data = json.loads(text)
        else:
            raise DocumentReadError(
                f"Unsupported document type: {path.name}",
                details="Expected .json, .yaml or .yml",
            )
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DocumentReadError(f"Cannot parse {path.name}", details=str(e)) from e
    if not isinstance(data, dict):
        raise DocumentReadError(f"{path.name} does not contain a brand kit object")
    return data


def default_brand_kit(today: date | None = None) -> dict[str, Any]:
    """Return the blank starting document for a new brand kit.

    The blank draft is intentionally incomplete and does not validate until
    the user fills in names, colors and sources.
    """
    today = today or date.today()
    return {
        "brand": {
            "name": "",
            "description": "",
            "website": "",
            "updatedAt": today.isoformat(),
        },
        "logos": [
            {
                "name": "",
                "description": "",
                "variants": [{"label": "", "src": ""}],
            }
        ],
        "colors": [
            {
                "name": "",
                "role": ["Primary"],
                "values": {"hex": "", "rgb": "", "cmyk": ""},
            }
        ],
        "typography": {
            "fonts": [
                {
                    "name": "",
                    "source": {
                        "type": "google",
                        "family": "",
                        "weights": [Limits.DEFAULT_FONT_WEIGHT],
                    },
                }
            ],
            "examples": [
                {
                    "label": "",
                    "font": "",
                    "sizePx": Limits.DEFAULT_FONT_SIZE_PX,
                    "weight": Limits.DEFAULT_FONT_WEIGHT,
                    "text": "",
                }
            ],
        },
        "gallery": [],
    }
