"""Three-image layouts.

Each template sizes a sub-arrangement first and then fits the remaining image
to one of its sides. Placements always come back in input order.
"""

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
from image_mosaic.twos import side_by_side, stacked


def three_columns(a: Dimension, b: Dimension, c: Dimension) -> LayoutCandidate:
    """Three tiles in a row, all at *a*'s height."""
    first, second = side_by_side(a, b)
    third = Placement.at(second.right + GUTTER, 0, scale_to_height(c, a.height), c)
    return layout("three_columns", first, second, third)


def top_top_bottom(a: Dimension, b: Dimension, c: Dimension) -> LayoutCandidate:
    """*a* and *b* side by side, *c* spanning the full width below."""
    row = side_by_side(a, b)
    width = row.total_size.width
    third = Placement.at(0, a.height + GUTTER, scale_to_width(c, width), c)
    return layout("top_top_bottom", *row, third)


def left_left_right(a: Dimension, b: Dimension, c: Dimension) -> LayoutCandidate:
    """*a* over *b* on the left, *c* spanning the full height on the right."""
    column = stacked(a, b)
    height = column.total_size.height
    third = Placement.at(a.width + GUTTER, 0, scale_to_height(c, height), c)
    return layout("left_left_right", *column, third)


def left_right_right(a: Dimension, b: Dimension, c: Dimension) -> LayoutCandidate:
    """*a* spanning the full height on the left, *b* over *c* on the right."""
    c_size = scale_to_width(c, b.width)
    a_size = scale_to_height(a, b.height + GUTTER + c_size.height)
    x = a_size.width + GUTTER
    return layout(
        "left_right_right",
        Placement.at(0, 0, a_size, a),
        Placement.at(x, 0, b, b),
        Placement.at(x, b.height + GUTTER, c_size, c),
    )


def top_bottom_bottom(a: Dimension, b: Dimension, c: Dimension) -> LayoutCandidate:
    """*a* spanning the full width on top, *b* and *c* side by side below."""
    c_size = scale_to_height(c, b.height)
    a_size = scale_to_width(a, b.width + GUTTER + c_size.width)
    y = a_size.height + GUTTER
    return layout(
        "top_bottom_bottom",
        Placement.at(0, 0, a_size, a),
        Placement.at(0, y, b, b),
        Placement.at(b.width + GUTTER, y, c_size, c),
    )


def three_rows(a: Dimension, b: Dimension, c: Dimension) -> LayoutCandidate:
    """Three tiles in a column, all at *a*'s width."""
    first, second = stacked(a, b)
    third = Placement.at(0, second.bottom + GUTTER, scale_to_width(c, a.width), c)
    return layout("three_rows", first, second, third)


def candidates_3(a: Dimension, b: Dimension, c: Dimension) -> list[LayoutCandidate]:
    return [
        three_columns(a, b, c),
        top_top_bottom(a, b, c),
        left_left_right(a, b, c),
        left_right_right(a, b, c),
        top_bottom_bottom(a, b, c),
        three_rows(a, b, c),
    ]
