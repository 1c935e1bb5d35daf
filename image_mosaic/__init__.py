"""
Image Mosaic
============

Combine two to four images into one rectangular mosaic separated by thin
black gutters. The layout is chosen from a fixed set of named templates:

- keep every image as close to its native resolution as possible
- among layouts that do that about equally well, prefer the squarest
"""

__version__ = "1.0.0"

from image_mosaic.config import MosaicConfig
from image_mosaic.errors import (
    DegenerateImage,
    InvalidImageCount,
    MosaicError,
    RenderError,
)
from image_mosaic.geometry import (
    GUTTER,
    MAX_DIMENSION,
    Dimension,
    LayoutCandidate,
    Placement,
)
from image_mosaic.image_io import encode_image, load_image, save_image
from image_mosaic.renderer import build_mosaic, composite, resize_images
from image_mosaic.selector import best_layout, choose_layout, rank_layouts

__all__ = [
    "GUTTER",
    "MAX_DIMENSION",
    "DegenerateImage",
    "Dimension",
    "InvalidImageCount",
    "LayoutCandidate",
    "MosaicConfig",
    "MosaicError",
    "Placement",
    "RenderError",
    "best_layout",
    "build_mosaic",
    "choose_layout",
    "composite",
    "encode_image",
    "load_image",
    "rank_layouts",
    "resize_images",
    "save_image",
]
