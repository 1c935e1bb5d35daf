"""Image loading, encoding and saving."""

from __future__ import annotations

import io
from collections.abc import Iterable
from pathlib import Path

import numpy as np
from PIL import Image

# output format -> Pillow format name
_PIL_FORMATS = {"png": "PNG", "jpeg": "JPEG", "jpg": "JPEG", "webp": "WEBP"}


def load_image(path: str | Path) -> Image.Image:
    """Load an image fully into memory as RGB."""
    with Image.open(path) as img:
        return img.convert("RGB")


def load_images(paths: Iterable[str | Path]) -> list[Image.Image]:
    return [load_image(p) for p in paths]


def read_size(path: str | Path) -> tuple[int, int]:
    """(width, height) from the file header, without decoding pixels."""
    with Image.open(path) as img:
        return img.size


def from_array(array: np.ndarray) -> Image.Image:
    """(H, W, 3) uint8 array -> RGB image."""
    return Image.fromarray(array.astype(np.uint8))


def to_array(image: Image.Image) -> np.ndarray:
    """Image -> (H, W, 3) uint8 array."""
    return np.array(image.convert("RGB"), dtype=np.uint8)


def _pil_format(fmt: str) -> str:
    try:
        return _PIL_FORMATS[fmt.lower().lstrip(".")]
    except KeyError:
        msg = f"Unsupported output format '{fmt}'. Choose from: png, jpeg, webp"
        raise ValueError(msg) from None


def encode_image(image: Image.Image, fmt: str = "png", quality: int = 90) -> bytes:
    """Encode *image* as PNG, JPEG or WebP bytes."""
    pil_format = _pil_format(fmt)
    buf = io.BytesIO()
    if pil_format == "PNG":
        image.save(buf, format=pil_format)
    else:
        image.save(buf, format=pil_format, quality=quality)
    return buf.getvalue()


def save_image(
    image: Image.Image,
    path: str | Path,
    fmt: str | None = None,
    quality: int = 90,
) -> Path:
    """Save *image*; the format defaults to the file suffix."""
    path = Path(path)
    data = encode_image(image, fmt or path.suffix or "png", quality)
    path.write_bytes(data)
    return path
