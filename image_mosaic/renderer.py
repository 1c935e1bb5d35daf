"""Resize source images to their placements and composite the mosaic."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from PIL import Image

from image_mosaic.config import MosaicConfig
from image_mosaic.errors import RenderError
from image_mosaic.geometry import Dimension, LayoutCandidate
from image_mosaic.selector import choose_layout

logger = logging.getLogger(__name__)


def image_size(image: Image.Image) -> Dimension:
    return Dimension(image.width, image.height)


def resize_image(
    image: Image.Image,
    size: Dimension,
    resample: Image.Resampling = Image.Resampling.BILINEAR,
) -> Image.Image:
    """Resize *image* to *size*; an image already at that size is returned as is."""
    if image.size == (size.width, size.height):
        logger.debug("Image already %s, skipping resize", size)
        return image

    t0 = time.perf_counter()
    resized = image.resize((size.width, size.height), resample)
    logger.debug(
        "Resized %dx%d -> %s  (%.1f ms)",
        image.width, image.height, size, (time.perf_counter() - t0) * 1000,
    )
    return resized


def resize_images(
    images: Sequence[Image.Image],
    sizes: Sequence[Dimension],
    resample: Image.Resampling = Image.Resampling.BILINEAR,
    max_workers: int = 4,
) -> list[Image.Image]:
    """Resize every image concurrently and wait for all of them.

    A failure for any image fails the whole batch with :class:`RenderError`.
    """
    logger.debug("Resizing %d images", len(images))
    workers = max(1, min(len(images), max_workers))
    with ThreadPoolExecutor(max_workers=workers) as ex:
        futures = [
            ex.submit(resize_image, image, size, resample)
            for image, size in zip(images, sizes, strict=True)
        ]
        resized = []
        for index, future in enumerate(futures):
            try:
                resized.append(future.result())
            except Exception as exc:
                raise RenderError(index, exc) from exc
    return resized


def composite(
    candidate: LayoutCandidate,
    images: Sequence[Image.Image],
    background: tuple[int, int, int] = (0, 0, 0),
) -> Image.Image:
    """Paste *images* at their placement offsets on a fresh canvas."""
    total = candidate.total_size
    canvas = Image.new("RGB", (total.width, total.height), background)
    for image, placement in zip(images, candidate, strict=True):
        canvas.paste(image, (placement.offset.width, placement.offset.height))
    return canvas


def render(
    candidate: LayoutCandidate,
    images: Sequence[Image.Image],
    config: MosaicConfig | None = None,
) -> Image.Image:
    config = config or MosaicConfig()
    rgb = [im if im.mode == "RGB" else im.convert("RGB") for im in images]
    resized = resize_images(
        rgb,
        [p.size for p in candidate],
        resample=config.resample_filter,
        max_workers=config.max_workers,
    )
    return composite(candidate, resized, config.background)


def build_mosaic(
    images: Sequence[Image.Image],
    config: MosaicConfig | None = None,
) -> Image.Image:
    """Lay out 2-4 images and render them into one mosaic.

    Args:
        images: Decoded source images, in the order they should be laid out.
        config: Layout and rendering parameters (defaults to MosaicConfig()).

    Returns:
        RGB image with black gutters, at most ``config.max_dimension`` on
        its longer side.

    Raises:
        InvalidImageCount: fewer than 2 or more than 4 images.
        DegenerateImage:   an image has a zero width or height.
        RenderError:       resizing any image failed.
    """
    config = config or MosaicConfig()
    sizes = [image_size(im) for im in images]

    t0 = time.perf_counter()
    candidate = choose_layout(sizes, config)
    t_layout = time.perf_counter() - t0

    t0 = time.perf_counter()
    mosaic = render(candidate, images, config)
    logger.info(
        "Built %s mosaic %dx%d  (layout %.1f ms, render %.1f ms)",
        candidate.name, mosaic.width, mosaic.height,
        t_layout * 1000, (time.perf_counter() - t0) * 1000,
    )
    return mosaic
