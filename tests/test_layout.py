"""Tests for archive layout computation."""

import json

import pytest

from brandkit.assets import PendingAsset, SlotKey
from brandkit.exceptions import AssetCollisionError, AssetSlotError
from brandkit.export import build_archive_layout
from brandkit.export.layout import fold_by_slot, slugify
from brandkit.models import BrandKit


def _logo(content: bytes, name: str = "raw.png", logo: int = 0, variant: int = 0) -> PendingAsset:
    return PendingAsset(SlotKey.logo_variant(logo, variant), content, name)


class TestSlugify:
    """Tests for slugify."""

    @pytest.mark.parametrize(
        "name,slug",
        [
            ("Acme", "acme"),
            ("Acme Corp", "acme-corp"),
            ("Acme   Co.\tBlue", "acme-co.-blue"),
            ("Café Noir", "café-noir"),
            (" Padded ", "-padded-"),
        ],
    )
    def test_slugify(self, name, slug):
        assert slugify(name) == slug


class TestLogoPlacement:
    """Tests for logo variant placement."""

    def test_acme_scenario(self, kit, png_bytes):
        layout = build_archive_layout(kit, [_logo(png_bytes)])

        assert "assets/logos/acme-1.png" in layout.entry_names
        assert layout.document["logos"][0]["variants"][0]["src"] == "assets/logos/acme-1.png"

    def test_second_variant_numbering(self, document, png_bytes):
        document["logos"][0]["variants"].append({"label": "SVG", "src": "manual.svg"})
        kit = BrandKit.model_validate(document)

        layout = build_archive_layout(kit, [_logo(b"<svg/>", "mark.svg", variant=1)])

        variants = layout.document["logos"][0]["variants"]
        assert variants[1]["src"] == "assets/logos/acme-2.svg"
        assert variants[0]["src"] == "assets/logos/raw.png"

    def test_multi_word_logo_name(self, document, png_bytes):
        document["logos"][0]["name"] = "Acme  Rocket Mark"
        kit = BrandKit.model_validate(document)
        layout = build_archive_layout(kit, [_logo(png_bytes)])
        assert "assets/logos/acme-rocket-mark-1.png" in layout.entry_names

    def test_extension_case_is_kept(self, kit, png_bytes):
        layout = build_archive_layout(kit, [_logo(png_bytes, "RAW.PNG")])
        assert "assets/logos/acme-1.PNG" in layout.entry_names

    def test_filename_without_dot_is_its_own_extension(self, kit, document, png_bytes):
        document["gallery"][0]["src"] = "assets/gallery/raw"
        kit = BrandKit.model_validate(document)
        assets = [_logo(png_bytes, "raw"), PendingAsset(SlotKey.gallery(0), png_bytes, "raw")]

        layout = build_archive_layout(kit, assets)

        assert "assets/logos/acme-1.raw" in layout.entry_names
        assert layout.document["gallery"][0]["src"] == "assets/gallery/photo-1.raw"


class TestGalleryPlacement:
    """Tests for gallery placement."""

    def test_gallery_uses_index(self, document, png_bytes):
        document["gallery"].append({"caption": "Office", "src": "office.jpg"})
        kit = BrandKit.model_validate(document)

        layout = build_archive_layout(
            kit, [PendingAsset(SlotKey.gallery(1), png_bytes, "office.jpg")]
        )

        assert layout.document["gallery"][1]["src"] == "assets/gallery/photo-2.jpg"
        assert layout.document["gallery"][0]["src"] == "https://cdn.example.com/launch.jpg"


class TestFontPlacement:
    """Tests for font file placement."""

    def test_fonts_are_added_but_not_referenced(self, kit, document):
        assets = [
            PendingAsset(SlotKey.font(0, 0), b"regular", "Inter-Regular.woff2"),
            PendingAsset(SlotKey.font(0, 1), b"bold", "Inter-Bold.woff2"),
        ]

        layout = build_archive_layout(kit, assets)

        assert "assets/fonts/inter-display-Inter-Regular.woff2" in layout.entry_names
        assert "assets/fonts/inter-display-Inter-Bold.woff2" in layout.entry_names
        assert layout.document["typography"] == document["typography"]

    def test_font_path_uses_basename(self, kit):
        asset = PendingAsset(SlotKey.font(0), b"x", "/tmp/uploads/Inter.ttf")
        layout = build_archive_layout(kit, [asset])
        assert "assets/fonts/inter-display-Inter.ttf" in layout.entry_names


class TestLayoutGuarantees:
    """Tests for completeness, determinism and failure behavior."""

    def _assets(self, png_factory):
        return [
            PendingAsset(SlotKey.font(0), b"font-bytes", "Inter.woff2"),
            PendingAsset(SlotKey.gallery(0), png_factory("blue"), "launch.png"),
            _logo(png_factory("red")),
        ]

    def test_one_entry_per_asset_plus_document(self, kit, png_factory):
        layout = build_archive_layout(kit, self._assets(png_factory))
        assert len(layout.asset_entries) == 3
        assert len(layout.entries) == 4

    def test_entry_order(self, kit, png_factory):
        layout = build_archive_layout(kit, self._assets(png_factory))
        assert layout.entry_names == [
            "assets/logos/acme-1.png",
            "assets/gallery/photo-1.png",
            "assets/fonts/inter-display-Inter.woff2",
            "data.json",
        ]

    def test_deterministic(self, kit, png_factory):
        first = build_archive_layout(kit, self._assets(png_factory))
        second = build_archive_layout(kit, list(reversed(self._assets(png_factory))))
        assert first.document_bytes == second.document_bytes
        assert first.entry_names == second.entry_names

    def test_data_json_is_pretty_printed_document(self, kit, png_bytes):
        layout = build_archive_layout(kit, [_logo(png_bytes)])
        text = layout.document_bytes.decode("utf-8")
        assert text.startswith('{\n  "brand"')
        assert json.loads(text) == layout.document

    def test_untouched_fields_are_identical(self, kit, document):
        layout = build_archive_layout(kit, [])
        assert layout.document == document
        assert layout.entry_names == ["data.json"]

    def test_does_not_modify_kit(self, kit, png_bytes):
        before = kit.model_dump()
        build_archive_layout(kit, [_logo(png_bytes)])
        assert kit.model_dump() == before

    def test_archive_name(self, document):
        document["brand"]["name"] = "Acme Rockets"
        kit = BrandKit.model_validate(document)
        assert build_archive_layout(kit, []).archive_name == "acme-rockets-brand-kit.zip"

    def test_non_ascii_survives_in_document(self, document):
        document["brand"]["description"] = "Fusées et enclumes"
        layout = build_archive_layout(BrandKit.model_validate(document), [])
        assert "Fusées".encode("utf-8") in layout.document_bytes


class TestSlotResolution:
    """Tests for duplicate, colliding and missing slots."""

    def test_later_asset_for_same_slot_wins(self, kit, png_factory):
        first, second = png_factory("red"), png_factory("green")
        layout = build_archive_layout(kit, [_logo(first), _logo(second)])
        (entry,) = layout.asset_entries
        assert entry.content == second

    def test_fold_by_slot(self, png_bytes):
        folded = fold_by_slot([_logo(b"a"), _logo(b"b", logo=1), _logo(b"c")])
        assert len(folded) == 2
        assert folded[SlotKey.logo_variant(0, 0)].content == b"c"

    def test_collision_with_same_bytes_is_folded(self, document):
        document["logos"].append(
            {
                "name": "ACME",
                "description": "Caps",
                "variants": [{"label": "PNG", "src": "caps.png"}],
            }
        )
        kit = BrandKit.model_validate(document)

        layout = build_archive_layout(kit, [_logo(b"same"), _logo(b"same", logo=1)])

        assert layout.entry_names.count("assets/logos/acme-1.png") == 1
        assert layout.document["logos"][1]["variants"][0]["src"] == "assets/logos/acme-1.png"

    def test_collision_with_different_bytes_fails(self, document):
        document["logos"].append(
            {
                "name": "ACME",
                "description": "Caps",
                "variants": [{"label": "PNG", "src": "caps.png"}],
            }
        )
        kit = BrandKit.model_validate(document)

        with pytest.raises(AssetCollisionError, match="acme-1.png"):
            build_archive_layout(kit, [_logo(b"one"), _logo(b"two", logo=1)])

    @pytest.mark.parametrize(
        "slot",
        [
            SlotKey.logo_variant(1, 0),
            SlotKey.logo_variant(0, 5),
            SlotKey.gallery(3),
            SlotKey.font(2),
            SlotKey.font(0, -1),
        ],
    )
    def test_missing_slot_fails(self, kit, slot):
        with pytest.raises(AssetSlotError):
            build_archive_layout(kit, [PendingAsset(slot, b"x", "x.png")])
