"""Four-image layouts.

Two families: direct chains of four tiles (``four_columns``, ``four_rows``)
and composites that build a two- or three-tile sub-layout, rescale it as a
unit to match its neighbour and translate it into place.

The column-oriented composites at the bottom of this module are kept out of
the default candidate set; they read poorly next to their row-oriented twins.
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
from image_mosaic.threes import three_columns, three_rows
from image_mosaic.twos import side_by_side, stacked


# -- Direct chains -----------------------------------------------------

def four_columns(a: Dimension, b: Dimension, c: Dimension, d: Dimension) -> LayoutCandidate:
    first, second, third = three_columns(a, b, c)
    fourth = Placement.at(third.right + GUTTER, 0, scale_to_height(d, a.height), d)
    return layout("four_columns", first, second, third, fourth)


def four_rows(a: Dimension, b: Dimension, c: Dimension, d: Dimension) -> LayoutCandidate:
    first, second, third = three_rows(a, b, c)
    fourth = Placement.at(0, third.bottom + GUTTER, scale_to_width(d, a.width), d)
    return layout("four_rows", first, second, third, fourth)


# -- Row composites ----------------------------------------------------

def two_rows_of_two(a: Dimension, b: Dimension, c: Dimension, d: Dimension) -> LayoutCandidate:
    """Two side-by-side pairs, the lower pair rescaled to the upper's width."""
    top = side_by_side(a, b)
    bottom = side_by_side(c, d)
    factor = bottom.total_size.width / top.total_size.width
    bottom = bottom.scale(factor).translate(dy=top.total_size.height + GUTTER)
    return layout("two_rows_of_two", *top, *bottom)


def two_rows_one_three(a: Dimension, b: Dimension, c: Dimension, d: Dimension) -> LayoutCandidate:
    """*a* across the top, *b*, *c*, *d* in a row below."""
    row = three_columns(b, c, d)
    a_size = scale_to_width(a, row.total_size.width)
    row = row.translate(dy=a_size.height + GUTTER)
    return layout("two_rows_one_three", Placement.at(0, 0, a_size, a), *row)


def two_rows_three_one(a: Dimension, b: Dimension, c: Dimension, d: Dimension) -> LayoutCandidate:
    """*a*, *b*, *c* in a row, *d* across the bottom."""
    row = three_columns(a, b, c)
    total = row.total_size
    fourth = Placement.at(0, total.height + GUTTER, scale_to_width(d, total.width), d)
    return layout("two_rows_three_one", *row, fourth)


def three_rows_211(a: Dimension, b: Dimension, c: Dimension, d: Dimension) -> LayoutCandidate:
    """A pair on top, then *c* and *d* as full-width rows."""
    pair = side_by_side(a, b)
    total = pair.total_size
    third = Placement.at(0, total.height + GUTTER, scale_to_width(c, total.width), c)
    fourth = Placement.at(0, third.bottom + GUTTER, scale_to_width(d, total.width), d)
    return layout("three_rows_211", *pair, third, fourth)


def three_rows_121(a: Dimension, b: Dimension, c: Dimension, d: Dimension) -> LayoutCandidate:
    """*a* on top, the *b*/*c* pair in the middle, *d* at the bottom."""
    pair = side_by_side(b, c)
    width = pair.total_size.width
    a_size = scale_to_width(a, width)
    pair = pair.translate(dy=a_size.height + GUTTER)
    fourth = Placement.at(0, pair.total_size.height + GUTTER, scale_to_width(d, width), d)
    return layout("three_rows_121", Placement.at(0, 0, a_size, a), *pair, fourth)


def three_rows_112(a: Dimension, b: Dimension, c: Dimension, d: Dimension) -> LayoutCandidate:
    """*a* and *b* as full-width rows above the *c*/*d* pair."""
    pair = side_by_side(c, d)
    width = pair.total_size.width
    first = Placement.at(0, 0, scale_to_width(a, width), a)
    second = Placement.at(0, first.bottom + GUTTER, scale_to_width(b, width), b)
    pair = pair.translate(dy=second.bottom + GUTTER)
    return layout("three_rows_112", first, second, *pair)


# -- Column composites -------------------------------------------------

def two_columns_one_three(a: Dimension, b: Dimension, c: Dimension, d: Dimension) -> LayoutCandidate:
    """*a* down the left, *b*, *c*, *d* stacked on the right."""
    column = three_rows(b, c, d)
    a_size = scale_to_height(a, column.total_size.height)
    column = column.translate(dx=a_size.width + GUTTER)
    return layout("two_columns_one_three", Placement.at(0, 0, a_size, a), *column)


def two_columns_three_one(a: Dimension, b: Dimension, c: Dimension, d: Dimension) -> LayoutCandidate:
    """*a*, *b*, *c* stacked on the left, *d* down the right."""
    column = three_rows(a, b, c)
    total = column.total_size
    fourth = Placement.at(total.width + GUTTER, 0, scale_to_height(d, total.height), d)
    return layout("two_columns_three_one", *column, fourth)


def two_columns_of_two(a: Dimension, b: Dimension, c: Dimension, d: Dimension) -> LayoutCandidate:
    """Two stacked pairs, the right pair rescaled to the left's height."""
    left = stacked(a, b)
    right = stacked(c, d)
    factor = right.total_size.height / left.total_size.height
    right = right.scale(factor).translate(dx=left.total_size.width + GUTTER)
    return layout("two_columns_of_two", *left, *right)


def three_columns_211(a: Dimension, b: Dimension, c: Dimension, d: Dimension) -> LayoutCandidate:
    pair = stacked(a, b)
    total = pair.total_size
    third = Placement.at(total.width + GUTTER, 0, scale_to_height(c, total.height), c)
    fourth = Placement.at(third.right + GUTTER, 0, scale_to_height(d, total.height), d)
    return layout("three_columns_211", *pair, third, fourth)


def three_columns_121(a: Dimension, b: Dimension, c: Dimension, d: Dimension) -> LayoutCandidate:
    pair = stacked(b, c)
    height = pair.total_size.height
    a_size = scale_to_height(a, height)
    pair = pair.translate(dx=a_size.width + GUTTER)
    fourth = Placement.at(pair.total_size.width + GUTTER, 0, scale_to_height(d, height), d)
    return layout("three_columns_121", Placement.at(0, 0, a_size, a), *pair, fourth)


def three_columns_112(a: Dimension, b: Dimension, c: Dimension, d: Dimension) -> LayoutCandidate:
    pair = stacked(c, d)
    height = pair.total_size.height
    first = Placement.at(0, 0, scale_to_height(a, height), a)
    second = Placement.at(first.right + GUTTER, 0, scale_to_height(b, height), b)
    pair = pair.translate(dx=second.right + GUTTER)
    return layout("three_columns_112", first, second, *pair)


def candidates_4(
    a: Dimension,
    b: Dimension,
    c: Dimension,
    d: Dimension,
    include_column_variants: bool = False,
) -> list[LayoutCandidate]:
    """All four-image candidates in enumeration order (earlier wins ties)."""
    candidates = [
        four_columns(a, b, c, d),
        four_rows(a, b, c, d),
        two_rows_of_two(a, b, c, d),
        two_rows_one_three(a, b, c, d),
        two_rows_three_one(a, b, c, d),
        two_columns_one_three(a, b, c, d),
        two_columns_three_one(a, b, c, d),
        three_rows_211(a, b, c, d),
        three_rows_121(a, b, c, d),
        three_rows_112(a, b, c, d),
    ]
    if include_column_variants:
        candidates += [
            two_columns_of_two(a, b, c, d),
            three_columns_211(a, b, c, d),
            three_columns_121(a, b, c, d),
            three_columns_112(a, b, c, d),
        ]
    return candidates
