"""Scoring and selection of the best layout candidate.

Every candidate is first normalised so its least-enlarged image renders at
native resolution, then capped to ``max_dimension`` on its longer side. Among
the candidates whose scale-factor ratio lies within ``tolerance`` of the best
one, the squarest wins; ties go to the earliest candidate.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from image_mosaic.config import RATIO_TOLERANCE, MosaicConfig
from image_mosaic.errors import DegenerateImage, InvalidImageCount, MosaicError
from image_mosaic.fours import candidates_4
from image_mosaic.geometry import MAX_DIMENSION, Dimension, LayoutCandidate, Placement
from image_mosaic.threes import candidates_3
from image_mosaic.twos import candidates_2

logger = logging.getLogger(__name__)

_FIT_ATTEMPTS = 32


@dataclass(frozen=True)
class LayoutScore:
    name: str
    scale_factor_ratio: float
    unsquaredness: float
    total_size: Dimension


def scale_factors(candidate: LayoutCandidate) -> list[float]:
    return [p.scale_factor for p in candidate]


def scale_factor_ratio(candidate: LayoutCandidate) -> float:
    """Most-enlarged over least-enlarged image; 1.0 means all at one scale."""
    factors = scale_factors(candidate)
    return max(factors) / min(factors)


def unsquaredness(candidate: LayoutCandidate) -> float:
    """Longer side over shorter side of the bounding box; 1.0 is square."""
    total = candidate.total_size
    return max(total.width, total.height) / min(total.width, total.height)


def score(candidate: LayoutCandidate) -> LayoutScore:
    return LayoutScore(
        candidate.name,
        scale_factor_ratio(candidate),
        unsquaredness(candidate),
        candidate.total_size,
    )


def _stretch_edge(candidate: LayoutCandidate, axis: int, limit: int) -> LayoutCandidate:
    """Stretch the tiles on the far edge of *axis* so it ends at *limit*.

    Independent rounding of offsets and sizes can leave the capped side a
    pixel or two short of the limit; only the tiles touching that edge grow.
    """
    total = candidate.total_size
    edge = total.width if axis == 0 else total.height
    delta = limit - edge
    if delta <= 0:
        return candidate

    placements = []
    for p in candidate:
        far = p.right if axis == 0 else p.bottom
        if far == edge:
            if axis == 0:
                size = Dimension(p.size.width + delta, p.size.height)
            else:
                size = Dimension(p.size.width, p.size.height + delta)
            p = Placement(p.offset, size, p.original_size)
        placements.append(p)
    return LayoutCandidate(candidate.name, tuple(placements))


def scale_to_fit(
    candidate: LayoutCandidate,
    max_dimension: int = MAX_DIMENSION,
) -> LayoutCandidate:
    """Normalise to native scale for the least-enlarged image, then cap.

    The cap never trims a tile. When rounding or 1 px tiles leave the longer
    side past ``max_dimension``, the factor grows by the overshoot and the
    normalised candidate is scaled again.
    """
    normalised = candidate.scale(min(scale_factors(candidate)))

    total = normalised.total_size
    biggest = max(total.width, total.height)
    if biggest <= max_dimension:
        return normalised

    factor = biggest / max_dimension
    for _ in range(_FIT_ATTEMPTS):
        fitted = normalised.scale(factor)
        total = fitted.total_size
        edge = max(total.width, total.height)
        if edge <= max_dimension:
            longer = 0 if total.width >= total.height else 1
            return _stretch_edge(fitted, longer, max_dimension)
        factor *= edge / max_dimension
    msg = f"Layout {candidate.name} cannot fit within {max_dimension} px"
    raise MosaicError(msg)


def best_layout(
    candidates: Sequence[LayoutCandidate],
    max_dimension: int = MAX_DIMENSION,
    tolerance: float = RATIO_TOLERANCE,
) -> LayoutCandidate:
    """Pick the squarest candidate whose scaling is close to the best."""
    if not candidates:
        msg = "No layout candidates to choose from"
        raise ValueError(msg)

    fitted = [scale_to_fit(c, max_dimension) for c in candidates]
    scores = [score(c) for c in fitted]
    for s in scores:
        logger.debug(
            "%-22s ratio=%.3f  unsquare=%.3f  size=%s",
            s.name, s.scale_factor_ratio, s.unsquaredness, s.total_size,
        )

    cap = min(s.scale_factor_ratio for s in scores) + tolerance
    # min() returns the first of equal keys, so enumeration order breaks ties.
    _, winner = min(
        (
            (s.unsquaredness, c)
            for s, c in zip(scores, fitted, strict=True)
            if s.scale_factor_ratio <= cap
        ),
        key=lambda pair: pair[0],
    )
    logger.info("Chose layout %s (%s)", winner.name, winner.total_size)
    return winner


def generate_candidates(
    sizes: Sequence[Dimension],
    include_column_variants: bool = False,
) -> list[LayoutCandidate]:
    if len(sizes) == 2:
        return candidates_2(*sizes)
    if len(sizes) == 3:
        return candidates_3(*sizes)
    if len(sizes) == 4:
        return candidates_4(*sizes, include_column_variants=include_column_variants)
    raise InvalidImageCount(len(sizes))


def validate_sizes(sizes: Sequence[Dimension]) -> None:
    if len(sizes) not in (2, 3, 4):
        raise InvalidImageCount(len(sizes))
    for i, size in enumerate(sizes):
        if size.width <= 0 or size.height <= 0:
            raise DegenerateImage(size.width, size.height, index=i)


def choose_layout(
    sizes: Sequence[Dimension],
    config: MosaicConfig | None = None,
) -> LayoutCandidate:
    """Validate *sizes* and return the winning, fitted candidate for them."""
    config = config or MosaicConfig()
    validate_sizes(sizes)
    candidates = generate_candidates(sizes, config.include_column_variants)
    return best_layout(candidates, config.max_dimension, config.ratio_tolerance)


def rank_layouts(
    sizes: Sequence[Dimension],
    config: MosaicConfig | None = None,
) -> list[LayoutScore]:
    """Scores of every fitted candidate for *sizes*, in enumeration order."""
    config = config or MosaicConfig()
    validate_sizes(sizes)
    candidates = generate_candidates(sizes, config.include_column_variants)
    return [score(scale_to_fit(c, config.max_dimension)) for c in candidates]
