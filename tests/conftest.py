"""Shared fixtures for brandkit tests."""

from __future__ import annotations

import copy
import io
from pathlib import Path

import pytest
from PIL import Image

from brandkit.config.settings import Settings, clear_settings_cache
from brandkit.models import BrandKit

VALID_DOCUMENT = {
    "brand": {
        "name": "Acme",
        "description": "Rockets, anvils and portable holes",
        "website": "https://acme.example.com",
        "updatedAt": "2024-05-01",
    },
    "logos": [
        {
            "name": "Acme",
            "description": "Primary mark",
            "variants": [{"label": "PNG", "src": "assets/logos/raw.png"}],
        }
    ],
    "colors": [
        {
            "name": "Deep Teal",
            "role": ["Primary"],
            "values": {"hex": "#035259", "rgb": "3, 82, 89", "cmyk": "97, 8, 0, 65"},
        }
    ],
    "typography": {
        "fonts": [
            {
                "name": "Inter Display",
                "source": {"type": "google", "family": "Inter", "weights": [400, 700]},
            }
        ],
        "examples": [
            {
                "label": "Heading",
                "font": "Inter Display",
                "sizePx": 32,
                "weight": 700,
                "text": "Launch faster",
                "lineHeight": 1.2,
            }
        ],
    },
    "gallery": [{"caption": "Launch day", "src": "https://cdn.example.com/launch.jpg"}],
}


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch):
    """Point default output at a temp dir and reset the settings cache."""
    monkeypatch.setenv("BRANDKIT_OUTPUT_DIR", str(tmp_path / "downloads"))
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def document() -> dict:
    """A fresh copy of a valid brand kit document."""
    return copy.deepcopy(VALID_DOCUMENT)


@pytest.fixture
def kit(document) -> BrandKit:
    return BrandKit.model_validate(document)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(output_dir=tmp_path / "out")


def make_png(color: str = "red", size: tuple[int, int] = (4, 4)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    return make_png()


@pytest.fixture
def png_factory():
    """Build small PNG payloads with distinct colors."""
    return make_png
