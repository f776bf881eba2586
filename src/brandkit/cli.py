"""CLI interface for brandkit."""

import asyncio
import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .assets import PendingAsset, SlotKey, SlotKind, accept_upload
from .colors import cmyk_to_hex, cmyk_to_rgb, hex_to_cmyk, hex_to_rgb, rgb_to_cmyk, rgb_to_hex
from .config.logging import get_logger, setup_logging
from .config.settings import get_settings
from .exceptions import BrandKitError, ExportPreconditionError
from .export import FileDownloader, export_brand_kit
from .models import FieldError, default_brand_kit, read_document, validate_brand_kit

app = typer.Typer(
    name="brandkit",
    help="Validate brand kit documents, convert colors and export kits as archives.",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

console = Console()
logger = get_logger(__name__)


def _print_field_errors(errors: List[FieldError]) -> None:
    table = Table(title="Validation errors", show_lines=False)
    table.add_column("Field", style="cyan")
    table.add_column("Problem", style="red")
    for err in errors:
        table.add_row(err.path or "<document>", err.message)
    console.print(table)


def _load_or_exit(document: Path) -> dict:
    try:
        return read_document(document)
    except BrandKitError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def _parse_slot(spec: str, kind: SlotKind, font_counts: dict) -> tuple:
    """Parse "L:V=FILE", "I=FILE" or "F=FILE" into (SlotKey, Path).

    Positions on the command line are 1-based, matching the archive names.
    """
    position, sep, filename = spec.partition("=")
    if not sep or not filename:
        raise typer.BadParameter(f"Expected POSITION=FILE, got {spec!r}")
    try:
        numbers = [int(p) - 1 for p in position.split(":")]
    except ValueError:
        raise typer.BadParameter(f"Invalid position in {spec!r}")
    if any(n < 0 for n in numbers):
        raise typer.BadParameter(f"Positions start at 1 in {spec!r}")

    if kind is SlotKind.LOGO_VARIANT:
        if len(numbers) != 2:
            raise typer.BadParameter(f"Logo files need LOGO:VARIANT=FILE, got {spec!r}")
        slot = SlotKey.logo_variant(*numbers)
    elif len(numbers) != 1:
        raise typer.BadParameter(f"Expected a single position in {spec!r}")
    elif kind is SlotKind.GALLERY:
        slot = SlotKey.gallery(numbers[0])
    else:
        ordinal = font_counts.get(numbers[0], 0)
        font_counts[numbers[0]] = ordinal + 1
        slot = SlotKey.font(numbers[0], ordinal)
    return slot, Path(filename).expanduser()


def _collect_assets(
    logos: List[str], gallery: List[str], fonts: List[str], max_bytes: int
) -> List[PendingAsset]:
    font_counts: dict = {}
    assets = []
    for kind, specs in (
        (SlotKind.LOGO_VARIANT, logos),
        (SlotKind.GALLERY, gallery),
        (SlotKind.FONT, fonts),
    ):
        for spec in specs:
            slot, path = _parse_slot(spec, kind, font_counts)
            if not path.is_file():
                raise typer.BadParameter(f"File not found: {path}")
            content = path.read_bytes()
            accept_upload(kind, path.name, content, max_bytes)
            assets.append(PendingAsset(slot=slot, content=content, original_filename=path.name))
    return assets


@app.command()
def validate(
    document: Path = typer.Argument(..., help="Brand kit document (.json, .yaml or .yml)"),
) -> None:
    """Check a brand kit document and list every field error."""
    data = _load_or_exit(document)
    result = validate_brand_kit(data)
    if result.ok:
        kit = result.kit
        console.print(
            f"[green]✓ {document.name} is a valid brand kit[/green] "
            f"({len(kit.logos)} logo(s), {len(kit.colors)} color(s), "
            f"{len(kit.typography.fonts)} font(s), {len(kit.gallery)} gallery item(s))"
        )
        return
    _print_field_errors(result.errors)
    raise typer.Exit(1)


@app.command()
def convert(
    value: str = typer.Argument(..., help='Color value, e.g. "#035259" or "3, 82, 89"'),
    source: str = typer.Option("hex", "--from", "-f", help="Input format: hex, rgb or cmyk"),
) -> None:
    """Show a color in hex, RGB and CMYK."""
    source = source.lower()
    if source == "hex":
        values = {"hex": value, "rgb": hex_to_rgb(value), "cmyk": hex_to_cmyk(value)}
    elif source == "rgb":
        values = {"hex": rgb_to_hex(value), "rgb": value, "cmyk": rgb_to_cmyk(value)}
    elif source == "cmyk":
        values = {"hex": cmyk_to_hex(value), "rgb": cmyk_to_rgb(value), "cmyk": value}
    else:
        console.print(f"[red]Unknown format:[/red] {source} (use hex, rgb or cmyk)")
        raise typer.Exit(2)

    table = Table(show_header=False, box=None)
    table.add_column("Format", style="cyan")
    table.add_column("Value")
    unavailable = False
    for name in ("hex", "rgb", "cmyk"):
        shown = values[name] or "[dim]not convertible[/dim]"
        unavailable = unavailable or not values[name]
        table.add_row(name.upper(), shown)
    console.print(table)
    if unavailable:
        raise typer.Exit(1)


@app.command()
def export(
    document: Path = typer.Argument(..., help="Brand kit document (.json, .yaml or .yml)"),
    logo: Optional[List[str]] = typer.Option(
        None, "--logo", "-l", help="Logo file as LOGO:VARIANT=FILE (1-based), repeatable"
    ),
    gallery: Optional[List[str]] = typer.Option(
        None, "--gallery", "-g", help="Gallery image as ITEM=FILE (1-based), repeatable"
    ),
    font: Optional[List[str]] = typer.Option(
        None, "--font", help="Font file as FONT=FILE (1-based), repeatable"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Directory to save the archive (default from config)"
    ),
    overwrite: bool = typer.Option(
        False, "--overwrite", help="Replace an existing archive with the same name"
    ),
) -> None:
    """Export a brand kit and its files as a ZIP archive.

    Examples:
        brandkit export acme.json --logo 1:1=raw.png --gallery 1=team.jpg
        brandkit export acme.yaml --font 1=Inter-Regular.woff2 -o dist/
    """
    settings = get_settings()
    data = _load_or_exit(document)

    try:
        assets = _collect_assets(logo or [], gallery or [], font or [], settings.max_asset_bytes)
    except BrandKitError as e:
        console.print(f"[red]Rejected:[/red] {e}")
        raise typer.Exit(1)
    logger.debug("Collected %d pending file(s)", len(assets))

    downloader = FileDownloader(
        output or settings.output_dir, overwrite=overwrite or settings.overwrite_existing
    )
    try:
        result = asyncio.run(
            export_brand_kit(data, assets, downloader=downloader, settings=settings)
        )
    except ExportPreconditionError as e:
        console.print(f"[red]{e.message}[/red]")
        _print_field_errors(e.errors)
        raise typer.Exit(1)
    except BrandKitError as e:
        console.print(f"[red]Export failed:[/red] {e}")
        raise typer.Exit(1)

    table = Table(title=result.layout.archive_name)
    table.add_column("Entry", style="cyan")
    table.add_column("Size", justify="right")
    for entry in result.layout.entries:
        table.add_row(entry.path, f"{len(entry.content):,} B")
    console.print(table)
    console.print(f"[green]✓ Saved to[/green] {result.saved_to}")


@app.command()
def init(
    path: Path = typer.Argument(Path("data.json"), help="Where to write the blank document"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write a blank brand kit document to fill in."""
    if path.exists() and not force:
        console.print(f"[red]{path} already exists[/red] (use --force to overwrite)")
        raise typer.Exit(1)
    path.write_text(json.dumps(default_brand_kit(), indent=2) + "\n", encoding="utf-8")
    console.print(f"[green]✓ Wrote[/green] {path}")


@app.command()
def status() -> None:
    """Show the effective configuration."""
    try:
        settings = get_settings()
    except BrandKitError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(1)

    table = Table(show_header=False, box=None)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("Output Directory", str(settings.output_dir))
    table.add_row("Compression Level", str(settings.compression_level))
    table.add_row("Overwrite Existing", str(settings.overwrite_existing))
    table.add_row("Max Asset Size", f"{settings.max_asset_bytes:,} B")
    table.add_row("Upload Error Display", f"{settings.upload_error_ttl_seconds}s")
    table.add_row("Log Level", settings.log_level)
    console.print(Panel(table, title="[bold]brandkit settings[/bold]", border_style="cyan"))


def main() -> None:
    """Entry point for the CLI."""
    # Initialize logging with settings
    try:
        log_level = get_settings().log_level
    except BrandKitError:
        log_level = "INFO"

    setup_logging(level=log_level)
    app()


if __name__ == "__main__":
    main()
