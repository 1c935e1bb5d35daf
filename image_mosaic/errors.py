"""Exceptions raised by the mosaic builder."""

from __future__ import annotations


class MosaicError(ValueError):
    """Base class for every error the mosaic builder reports."""


class InvalidImageCount(MosaicError):
    """Raised when the number of input images is not 2, 3 or 4."""

    def __init__(self, count: int) -> None:
        self.count = count
        msg = f"A mosaic needs 2, 3 or 4 images, got {count}"
        super().__init__(msg)


class DegenerateImage(MosaicError):
    """Raised when an input image has a zero width or height."""

    def __init__(self, width: int, height: int, index: int | None = None) -> None:
        self.index = index
        self.width = width
        self.height = height
        subject = "Image" if index is None else f"Image {index}"
        msg = f"{subject} has a degenerate size {width}x{height}"
        super().__init__(msg)


class RenderError(MosaicError):
    """Raised when resizing or compositing fails for any image of a build."""

    def __init__(self, index: int, cause: BaseException) -> None:
        self.index = index
        self.cause = cause
        msg = f"Failed to render image {index}: {cause}"
        super().__init__(msg)
