"""Tests for the brandkit command line."""

import io
import json
import zipfile
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from brandkit.cli import app

runner = CliRunner()


@pytest.fixture
def doc_path(tmp_path: Path, document) -> Path:
    path = tmp_path / "acme.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


class TestValidateCommand:
    """Tests for `brandkit validate`."""

    def test_valid_document(self, doc_path):
        result = runner.invoke(app, ["validate", str(doc_path)])
        assert result.exit_code == 0
        assert "valid brand kit" in result.output

    def test_valid_yaml_document(self, tmp_path, document):
        path = tmp_path / "acme.yaml"
        path.write_text(yaml.safe_dump(document), encoding="utf-8")
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 0

    def test_invalid_document_lists_fields(self, tmp_path, document):
        document["typography"]["fonts"] = []
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(document), encoding="utf-8")

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "typography.fonts" in result.output

    def test_unreadable_document(self, tmp_path):
        result = runner.invoke(app, ["validate", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestConvertCommand:
    """Tests for `brandkit convert`."""

    def test_from_hex(self):
        result = runner.invoke(app, ["convert", "#035259"])
        assert result.exit_code == 0
        assert "3, 82, 89" in result.output
        assert "97, 8, 0, 65" in result.output

    def test_from_cmyk(self):
        result = runner.invoke(app, ["convert", "0, 0, 0, 100", "--from", "cmyk"])
        assert result.exit_code == 0
        assert "#000000" in result.output

    def test_unconvertible_value(self):
        result = runner.invoke(app, ["convert", "#12"])
        assert result.exit_code == 1
        assert "not convertible" in result.output

    def test_unknown_format(self):
        result = runner.invoke(app, ["convert", "1, 2, 3", "-f", "hsl"])
        assert result.exit_code == 2


class TestExportCommand:
    """Tests for `brandkit export`."""

    def test_exports_archive(self, tmp_path, doc_path, png_bytes):
        logo = tmp_path / "raw.png"
        logo.write_bytes(png_bytes)
        out = tmp_path / "out"

        result = runner.invoke(
            app, ["export", str(doc_path), "--logo", f"1:1={logo}", "-o", str(out)]
        )

        assert result.exit_code == 0, result.output
        archive = out / "acme-brand-kit.zip"
        with zipfile.ZipFile(io.BytesIO(archive.read_bytes())) as zf:
            data = json.loads(zf.read("data.json"))
            assert zf.read("assets/logos/acme-1.png") == png_bytes
        assert data["logos"][0]["variants"][0]["src"] == "assets/logos/acme-1.png"

    def test_defaults_to_configured_output_dir(self, tmp_path, doc_path):
        result = runner.invoke(app, ["export", str(doc_path)])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "downloads" / "acme-brand-kit.zip").exists()

    def test_font_files_get_ordinals(self, tmp_path, doc_path):
        regular, bold = tmp_path / "Inter-Regular.woff2", tmp_path / "Inter-Bold.woff2"
        regular.write_bytes(b"r")
        bold.write_bytes(b"b")
        out = tmp_path / "out"

        args = ["export", str(doc_path), "--font", f"1={regular}", "--font", f"1={bold}"]
        result = runner.invoke(app, [*args, "-o", str(out)])

        assert result.exit_code == 0, result.output
        with zipfile.ZipFile(out / "acme-brand-kit.zip") as zf:
            names = zf.namelist()
        assert "assets/fonts/inter-display-Inter-Regular.woff2" in names
        assert "assets/fonts/inter-display-Inter-Bold.woff2" in names

    def test_rejects_wrong_media_kind(self, tmp_path, doc_path):
        notes = tmp_path / "notes.txt"
        notes.write_text("hello")
        result = runner.invoke(app, ["export", str(doc_path), "--logo", f"1:1={notes}"])
        assert result.exit_code == 1
        assert "Rejected" in result.output

    def test_bad_slot_spec(self, tmp_path, doc_path, png_bytes):
        logo = tmp_path / "raw.png"
        logo.write_bytes(png_bytes)
        result = runner.invoke(app, ["export", str(doc_path), "--logo", f"1={logo}"])
        assert result.exit_code == 2

    def test_missing_slot(self, tmp_path, doc_path, png_bytes):
        image = tmp_path / "team.png"
        image.write_bytes(png_bytes)
        result = runner.invoke(app, ["export", str(doc_path), "--gallery", f"5={image}"])
        assert result.exit_code == 1
        assert "Export failed" in result.output

    def test_invalid_document_is_not_exported(self, tmp_path, document):
        document["logos"] = []
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(document), encoding="utf-8")

        result = runner.invoke(app, ["export", str(path), "-o", str(tmp_path / "out")])

        assert result.exit_code == 1
        assert not (tmp_path / "out").exists()


class TestInitCommand:
    """Tests for `brandkit init`."""

    def test_writes_blank_document(self, tmp_path):
        path = tmp_path / "data.json"
        result = runner.invoke(app, ["init", str(path)])
        assert result.exit_code == 0
        blank = json.loads(path.read_text(encoding="utf-8"))
        assert blank["gallery"] == []

    def test_refuses_to_overwrite(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text("{}")
        assert runner.invoke(app, ["init", str(path)]).exit_code == 1
        assert runner.invoke(app, ["init", str(path), "--force"]).exit_code == 0
        assert path.read_text() != "{}"


class TestStatusCommand:
    """Tests for `brandkit status`."""

    def test_shows_settings(self):
        result = runner.invoke(app, ["status"])
        assert result.exit_code == 0
        assert "Output Directory" in result.output

    def test_invalid_configuration(self, monkeypatch):
        monkeypatch.setenv("BRANDKIT_COMPRESSION_LEVEL", "42")
        result = runner.invoke(app, ["status"])
        assert result.exit_code == 1
        assert "Configuration error" in result.output
