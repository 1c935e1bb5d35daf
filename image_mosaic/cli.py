"""Rich command-line interface powered by Typer."""

from __future__ import annotations

import logging
import time
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from image_mosaic.config import MosaicConfig
from image_mosaic.errors import MosaicError
from image_mosaic.geometry import Dimension
from image_mosaic.image_io import load_images, read_size, save_image
from image_mosaic.renderer import build_mosaic
from image_mosaic.selector import choose_layout, rank_layouts

app = typer.Typer(
    name="image-mosaic",
    help="Combine 2-4 images into one gutter-separated mosaic.",
    add_completion=False,
    rich_markup_mode="rich",
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=True)],
    )


def _check_inputs(images: list[Path], extensions: frozenset[str]) -> None:
    for path in images:
        if not path.is_file():
            console.print(f"[red]No such file:[/red] {path}")
            raise typer.Exit(1)
        if path.suffix.lower() not in extensions:
            console.print(f"[yellow]Unrecognised extension, trying anyway:[/yellow] {path}")


# Defaults come from MosaicConfig - single source of truth
_DEFAULTS = MosaicConfig()


# -- build command -----------------------------------------------------

@app.command()
def build(
    images: list[Path] = typer.Argument(..., help="2 to 4 source images, in layout order"),
    output: Path = typer.Option(
        Path("mosaic.png"), "--output", "-o", help="Where to write the mosaic",
    ),
    output_format: str | None = typer.Option(
        None, "--format", "-f",
        help=f"'png', 'jpeg' or 'webp' (default: from --output, else {_DEFAULTS.output_format})",
    ),
    max_dimension: int = typer.Option(
        _DEFAULTS.max_dimension, "--max-dimension", "-m",
        help="Longest side of the finished mosaic",
    ),
    tolerance: float = typer.Option(
        _DEFAULTS.ratio_tolerance, "--tolerance",
        help="Scale-ratio band within which squarer layouts win",
    ),
    column_variants: bool = typer.Option(
        _DEFAULTS.include_column_variants, "--column-variants/--no-column-variants",
        help="Also try column-oriented four-image layouts",
    ),
    quality: int = typer.Option(
        _DEFAULTS.jpeg_quality, "--quality", "-q", help="JPEG / WebP quality",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Build a mosaic from IMAGES and write it to OUTPUT."""
    _setup_logging(verbose)
    logger = logging.getLogger("image_mosaic")

    cfg = MosaicConfig(
        max_dimension=max_dimension,
        ratio_tolerance=tolerance,
        include_column_variants=column_variants,
        jpeg_quality=quality,
    )
    _check_inputs(images, cfg.SUPPORTED_EXTENSIONS)
    try:
        fmt = cfg.output_format_for(output, output_format)
    except ValueError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1) from exc

    t_total = time.perf_counter()
    try:
        t0 = time.perf_counter()
        sources = load_images(images)
        t_load = time.perf_counter() - t0

        t0 = time.perf_counter()
        mosaic = build_mosaic(sources, cfg)
        t_mosaic = time.perf_counter() - t0

        t0 = time.perf_counter()
        output.parent.mkdir(parents=True, exist_ok=True)
        save_image(mosaic, output, fmt, cfg.jpeg_quality)
        t_encode = time.perf_counter() - t0
    except MosaicError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1) from exc

    logger.debug(
        "load %.0f ms, mosaic %.0f ms, encode %.0f ms",
        t_load * 1000, t_mosaic * 1000, t_encode * 1000,
    )
    console.print(
        f"[green]✓[/green] Saved to {output}  "
        f"[dim]{mosaic.width}x{mosaic.height}  images={len(images)}"
        f"  time={time.perf_counter() - t_total:.2f}s[/dim]"
    )


# -- plan command ------------------------------------------------------

@app.command()
def plan(
    images: list[Path] = typer.Argument(..., help="2 to 4 source images, in layout order"),
    max_dimension: int = typer.Option(_DEFAULTS.max_dimension, "--max-dimension", "-m"),
    tolerance: float = typer.Option(_DEFAULTS.ratio_tolerance, "--tolerance"),
    column_variants: bool = typer.Option(
        _DEFAULTS.include_column_variants, "--column-variants/--no-column-variants",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Score every candidate layout for IMAGES without rendering."""
    _setup_logging(verbose)

    cfg = MosaicConfig(
        max_dimension=max_dimension,
        ratio_tolerance=tolerance,
        include_column_variants=column_variants,
    )
    _check_inputs(images, cfg.SUPPORTED_EXTENSIONS)
    sizes = [Dimension(*read_size(p)) for p in images]

    try:
        scores = rank_layouts(sizes, cfg)
        winner = choose_layout(sizes, cfg)
    except MosaicError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1) from exc

    table = Table(title="Candidate layouts", border_style="cyan")
    table.add_column("Layout")
    table.add_column("Scale ratio", justify="right")
    table.add_column("Unsquareness", justify="right")
    table.add_column("Size", justify="right")
    for s in scores:
        style = "bold green" if s.name == winner.name else None
        table.add_row(
            s.name,
            f"{s.scale_factor_ratio:.3f}",
            f"{s.unsquaredness:.3f}",
            str(s.total_size),
            style=style,
        )
    console.print(table)
    console.print(Panel.fit(
        f"[bold]{winner.name}[/bold]  {winner.total_size}\n"
        + "\n".join(
            f"{path.name}: {p.size} at ({p.offset.width}, {p.offset.height})"
            for path, p in zip(images, winner, strict=True)
        ),
        title="Chosen",
        border_style="green",
    ))


if __name__ == "__main__":
    app()
