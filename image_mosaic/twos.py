"""Two-image layouts."""

from __future__ import annotations

from image_mosaic.geometry import (
    GUTTER,
    Dimension,
    LayoutCandidate,
    Placement,
    layout,
    scale_to_height,
    scale_to_width,
)


def side_by_side(a: Dimension, b: Dimension) -> LayoutCandidate:
    """*a* at native size, *b* to its right scaled to the same height."""
    return layout(
        "side_by_side",
        Placement.native(a),
        Placement.at(a.width + GUTTER, 0, scale_to_height(b, a.height), b),
    )


def stacked(a: Dimension, b: Dimension) -> LayoutCandidate:
    """*a* at native size, *b* below it scaled to the same width."""
    return layout(
        "stacked",
        Placement.native(a),
        Placement.at(0, a.height + GUTTER, scale_to_width(b, a.width), b),
    )


def candidates_2(a: Dimension, b: Dimension) -> list[LayoutCandidate]:
    return [stacked(a, b), side_by_side(a, b)]
