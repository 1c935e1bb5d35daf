"""Dimension / placement value types and aspect-preserving scaling.

Everything here is pure integer geometry: templates build candidates out of
these values and the selector rescales them, but nothing touches pixels.
"""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterator
from dataclasses import dataclass

from image_mosaic.errors import DegenerateImage

GUTTER = 10  # px between neighbouring tiles
MAX_DIMENSION = 4000  # longest side of a finished mosaic


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _round(value: float) -> int:
    """Round half away from zero, never below 1 px."""
    return max(1, _round_half_up(value))


@dataclass(frozen=True)
class Dimension:
    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


ORIGIN = Dimension(0, 0)


def scale_to_height(size: Dimension, target_height: int) -> Dimension:
    """Resize *size* to *target_height*, keeping its aspect ratio."""
    if size.height == 0:
        raise DegenerateImage(size.width, size.height)
    return Dimension(_round(size.width * target_height / size.height), target_height)


def scale_to_width(size: Dimension, target_width: int) -> Dimension:
    """Resize *size* to *target_width*, keeping its aspect ratio."""
    if size.width == 0:
        raise DegenerateImage(size.width, size.height)
    return Dimension(target_width, _round(size.height * target_width / size.width))


def scale_uniform(size: Dimension, factor: float) -> Dimension:
    """Divide both sides by *factor*.

    Width and height are rounded independently, so repeated scaling can drift
    the aspect ratio by a pixel.
    """
    if factor <= 0:
        msg = f"Scale factor must be positive, got {factor}"
        raise ValueError(msg)
    return Dimension(_round(size.width / factor), _round(size.height / factor))


@dataclass(frozen=True)
class Placement:
    """Where one image lands inside a candidate canvas, and at what size."""

    offset: Dimension
    size: Dimension
    original_size: Dimension

    @classmethod
    def at(cls, x: int, y: int, size: Dimension, original_size: Dimension) -> Placement:
        return cls(Dimension(x, y), size, original_size)

    @classmethod
    def native(cls, size: Dimension) -> Placement:
        """An image at the origin, rendered at its own resolution."""
        return cls(ORIGIN, size, size)

    @property
    def right(self) -> int:
        return self.offset.width + self.size.width

    @property
    def bottom(self) -> int:
        return self.offset.height + self.size.height

    @property
    def scale_factor(self) -> float:
        return self.size.width / self.original_size.width

    def box(self) -> tuple[int, int, int, int]:
        """(left, top, right, bottom) with exclusive right/bottom."""
        return (self.offset.width, self.offset.height, self.right, self.bottom)

    def scale(self, factor: float) -> Placement:
        """Shrink (factor > 1) or grow (factor < 1) the placement about the origin."""
        offset = Dimension(
            _round_half_up(self.offset.width / factor),
            _round_half_up(self.offset.height / factor),
        )
        return Placement(offset, scale_uniform(self.size, factor), self.original_size)


def translate(placement: Placement, dx: int = 0, dy: int = 0) -> Placement:
    """Move *placement* by (dx, dy); its sizes are untouched."""
    return Placement(
        Dimension(placement.offset.width + dx, placement.offset.height + dy),
        placement.size,
        placement.original_size,
    )


def overlaps(a: Placement, b: Placement) -> bool:
    return (
        a.offset.width < b.right
        and b.offset.width < a.right
        and a.offset.height < b.bottom
        and b.offset.height < a.bottom
    )


def _separate(
    before: tuple[Placement, ...], after: list[Placement],
) -> tuple[Placement, ...]:
    """Push scaled tiles right or down until no two of them overlap.

    Under a heavy downscale a tile is held at 1 px while its neighbour's
    offset rounds down onto it. A tile only moves along an axis on which it
    lay past the other tile before scaling, so the push relation is acyclic
    and the loop settles.
    """
    placed = list(after)
    changed = True
    while changed:
        changed = False
        for i, j in itertools.permutations(range(len(placed)), 2):
            moving, fixed = placed[i], placed[j]
            if not overlaps(moving, fixed):
                continue
            if before[i].offset.width >= before[j].right:
                placed[i] = translate(moving, dx=fixed.right - moving.offset.width)
            elif before[i].offset.height >= before[j].bottom:
                placed[i] = translate(moving, dy=fixed.bottom - moving.offset.height)
            else:
                continue
            changed = True
    return tuple(placed)


@dataclass(frozen=True)
class LayoutCandidate:
    """A named arrangement of one placement per input image, in input order."""

    name: str
    placements: tuple[Placement, ...]

    def __len__(self) -> int:
        return len(self.placements)

    def __iter__(self) -> Iterator[Placement]:
        return iter(self.placements)

    def __getitem__(self, index: int) -> Placement:
        return self.placements[index]

    @property
    def total_size(self) -> Dimension:
        return Dimension(
            max(p.right for p in self.placements),
            max(p.bottom for p in self.placements),
        )

    def scale(self, factor: float) -> LayoutCandidate:
        scaled = [p.scale(factor) for p in self.placements]
        return LayoutCandidate(self.name, _separate(self.placements, scaled))

    def translate(self, dx: int = 0, dy: int = 0) -> LayoutCandidate:
        return LayoutCandidate(
            self.name, tuple(translate(p, dx, dy) for p in self.placements),
        )

    def renamed(self, name: str) -> LayoutCandidate:
        return LayoutCandidate(name, self.placements)

    def has_overlap(self) -> bool:
        ps = self.placements
        return any(
            overlaps(ps[i], ps[j])
            for i in range(len(ps))
            for j in range(i + 1, len(ps))
        )


def layout(name: str, *placements: Placement) -> LayoutCandidate:
    return LayoutCandidate(name, tuple(placements))
