"""Centralised configuration via a frozen dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from image_mosaic.geometry import MAX_DIMENSION

RATIO_TOLERANCE = 0.5

RESAMPLE_FILTERS: dict[str, Image.Resampling] = {
    "nearest": Image.Resampling.NEAREST,
    "bilinear": Image.Resampling.BILINEAR,
    "bicubic": Image.Resampling.BICUBIC,
    "lanczos": Image.Resampling.LANCZOS,
}


@dataclass(frozen=True)
class MosaicConfig:
    """All tuneable parameters for a mosaic build.

    Attributes:
        max_dimension:   Longest side the finished mosaic may have.
        ratio_tolerance: Candidates whose scale-factor ratio is within this
                         band of the best one compete on squareness.
        include_column_variants: Also try the four column-oriented
                         four-image layouts.
        resample:        Resize filter name (see RESAMPLE_FILTERS).
        background:      RGB colour of the canvas and the gutters.
        max_workers:     Upper bound on concurrent resizes.
        output_format:   Encoding used when saving the result.
        jpeg_quality:    Quality for lossy output formats.
    """

    # Layout
    max_dimension: int = MAX_DIMENSION
    ratio_tolerance: float = RATIO_TOLERANCE
    include_column_variants: bool = False

    # Rendering
    resample: str = "bilinear"
    background: tuple[int, int, int] = (0, 0, 0)
    max_workers: int = 4

    # Output
    output_format: str = "png"
    jpeg_quality: int = 90

    SUPPORTED_EXTENSIONS: frozenset[str] = frozenset(
        {".jpg", ".jpeg", ".png", ".bmp", ".tiff", ".tif", ".webp", ".jfif"}
    )
    OUTPUT_FORMATS: frozenset[str] = frozenset({"png", "jpeg", "webp"})

    @property
    def resample_filter(self) -> Image.Resampling:
        try:
            return RESAMPLE_FILTERS[self.resample]
        except KeyError:
            msg = (
                f"Unknown resample filter '{self.resample}'. "
                f"Choose from: {', '.join(RESAMPLE_FILTERS)}"
            )
            raise ValueError(msg) from None

    def output_format_for(self, path: Path, requested: str | None = None) -> str:
        """Pick the encoding for *path*.

        An explicit *requested* format wins, then the file suffix, then
        ``output_format``. ``jpg`` is accepted as an alias for ``jpeg``.
        """
        fmt = (requested or path.suffix or self.output_format).lower().lstrip(".")
        fmt = "jpeg" if fmt == "jpg" else fmt
        if fmt not in self.OUTPUT_FORMATS:
            msg = (
                f"Unsupported output format '{fmt}'. "
                f"Choose from: {', '.join(sorted(self.OUTPUT_FORMATS))}"
            )
            raise ValueError(msg)
        return fmt
