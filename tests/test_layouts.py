"""Tests for the layout templates and geometry primitives."""

from __future__ import annotations

import itertools

import pytest

from image_mosaic import fours, threes, twos
from image_mosaic.errors import DegenerateImage
from image_mosaic.geometry import (
    GUTTER,
    Dimension,
    LayoutCandidate,
    Placement,
    layout,
    overlaps,
    scale_to_height,
    scale_to_width,
    scale_uniform,
    translate,
)

D = Dimension

# Moderate aspect ratios; every template must stay overlap-free for these.
SIZES = [D(100, 400), D(300, 200), D(640, 480), D(400, 400)]

TWO = [twos.side_by_side, twos.stacked]
THREE = [
    threes.three_columns,
    threes.top_top_bottom,
    threes.left_left_right,
    threes.left_right_right,
    threes.top_bottom_bottom,
    threes.three_rows,
]
FOUR = [
    fours.four_columns,
    fours.four_rows,
    fours.two_rows_of_two,
    fours.two_rows_one_three,
    fours.two_rows_three_one,
    fours.two_columns_one_three,
    fours.two_columns_three_one,
    fours.three_rows_211,
    fours.three_rows_121,
    fours.three_rows_112,
    fours.two_columns_of_two,
    fours.three_columns_211,
    fours.three_columns_121,
    fours.three_columns_112,
]


def _placed(candidate: LayoutCandidate) -> list[tuple[tuple[int, int], tuple[int, int]]]:
    return [
        ((p.offset.width, p.offset.height), (p.size.width, p.size.height))
        for p in candidate
    ]


def _check_invariants(candidate: LayoutCandidate, inputs: tuple[Dimension, ...]) -> None:
    assert len(candidate) == len(inputs)
    assert [p.original_size for p in candidate] == list(inputs)
    assert not candidate.has_overlap()
    total = candidate.total_size
    assert total.width == max(p.right for p in candidate)
    assert total.height == max(p.bottom for p in candidate)
    for p in candidate:
        assert p.offset.width >= 0 and p.offset.height >= 0
        expected = p.original_size.width / p.original_size.height
        assert p.size.width / p.size.height == pytest.approx(expected, rel=0.03)


# -- Geometry ----------------------------------------------------------

class TestGeometry:
    def test_scale_to_height(self) -> None:
        assert scale_to_height(D(200, 400), 200) == D(100, 200)

    def test_scale_to_width(self) -> None:
        assert scale_to_width(D(300, 100), 150) == D(150, 50)

    def test_rounds_half_away_from_zero(self) -> None:
        # 5 * 1 / 2 = 2.5 -> 3 (banker's rounding would give 2)
        assert scale_to_height(D(5, 2), 1) == D(3, 1)
        assert scale_uniform(D(5, 5), 2) == D(3, 3)

    def test_never_below_one_pixel(self) -> None:
        assert scale_to_height(D(1, 1000), 10) == D(1, 10)

    def test_scale_uniform_rounds_independently(self) -> None:
        assert scale_uniform(D(3000, 3300), 1.5025) == D(1997, 2196)

    def test_scale_uniform_rejects_non_positive(self) -> None:
        with pytest.raises(ValueError):
            scale_uniform(D(10, 10), 0)

    def test_zero_side_rejected(self) -> None:
        with pytest.raises(DegenerateImage):
            scale_to_height(D(10, 0), 5)
        with pytest.raises(DegenerateImage):
            scale_to_width(D(0, 10), 5)

    def test_translate_moves_offset_only(self) -> None:
        p = Placement.at(5, 6, D(10, 20), D(30, 60))
        moved = translate(p, 100, 200)
        assert moved.offset == D(105, 206)
        assert moved.size == p.size
        assert moved.original_size == p.original_size

    def test_placement_scale_keeps_origin(self) -> None:
        p = Placement.native(D(100, 50)).scale(0.5)
        assert p.offset == D(0, 0)
        assert p.size == D(200, 100)
        assert p.original_size == D(100, 50)

    def test_scaled_slivers_are_pushed_apart(self) -> None:
        c = twos.side_by_side(D(100, 6000), D(9000, 10))
        scaled = c.scale(1350)
        # 0.07 px is held at 1 px while the neighbour's offset rounds to 0.
        assert _placed(scaled) == [((0, 0), (1, 4)), ((1, 0), (4000, 4))]
        assert not scaled.has_overlap()

    def test_scaled_slivers_are_pushed_down(self) -> None:
        c = twos.stacked(D(6000, 100), D(10, 9000))
        scaled = c.scale(1350)
        assert _placed(scaled) == [((0, 0), (4, 1)), ((0, 1), (4, 4000))]

    def test_total_size_uses_max_not_last(self) -> None:
        c = layout(
            "odd",
            Placement.at(0, 0, D(100, 300), D(100, 300)),
            Placement.at(110, 0, D(50, 50), D(50, 50)),
        )
        assert c.total_size == D(160, 300)

    def test_overlaps(self) -> None:
        a = Placement.at(0, 0, D(10, 10), D(10, 10))
        touching = Placement.at(10, 0, D(10, 10), D(10, 10))
        inside = Placement.at(5, 5, D(10, 10), D(10, 10))
        assert not overlaps(a, touching)
        assert overlaps(a, inside)

    def test_values_are_immutable(self) -> None:
        with pytest.raises(AttributeError):
            D(1, 2).width = 5  # type: ignore[misc]


# -- Two images --------------------------------------------------------

class TestTwos:
    def test_side_by_side(self) -> None:
        c = twos.side_by_side(D(100, 400), D(100, 200))
        assert c.name == "side_by_side"
        assert _placed(c) == [((0, 0), (100, 400)), ((110, 0), (200, 400))]
        assert c.total_size == D(310, 400)

    def test_stacked(self) -> None:
        c = twos.stacked(D(100, 400), D(200, 400))
        assert _placed(c) == [((0, 0), (100, 400)), ((0, 410), (100, 200))]

    def test_gutter(self) -> None:
        first, second = twos.side_by_side(D(120, 80), D(60, 90))
        assert second.offset.width - first.right == GUTTER

    def test_enumeration_order(self) -> None:
        names = [c.name for c in twos.candidates_2(D(1, 1), D(1, 1))]
        assert names == ["stacked", "side_by_side"]

    @pytest.mark.parametrize("make", TWO)
    def test_invariants(self, make) -> None:
        for dims in itertools.product(SIZES, repeat=2):
            _check_invariants(make(*dims), dims)


# -- Three images ------------------------------------------------------

class TestThrees:
    def test_three_columns(self) -> None:
        c = threes.three_columns(D(100, 200), D(50, 100), D(300, 300))
        assert _placed(c) == [
            ((0, 0), (100, 200)),
            ((110, 0), (100, 200)),
            ((220, 0), (200, 200)),
        ]

    def test_top_top_bottom(self) -> None:
        c = threes.top_top_bottom(D(100, 100), D(200, 100), D(100, 50))
        assert _placed(c)[2] == ((0, 110), (310, 155))
        assert c.total_size == D(310, 265)

    def test_left_left_right(self) -> None:
        c = threes.left_left_right(D(100, 100), D(200, 100), D(50, 100))
        assert _placed(c) == [
            ((0, 0), (100, 100)),
            ((0, 110), (100, 50)),
            ((110, 0), (80, 160)),
        ]

    def test_left_right_right(self) -> None:
        c = threes.left_right_right(D(100, 300), D(200, 100), D(400, 200))
        assert _placed(c) == [
            ((0, 0), (70, 210)),
            ((80, 0), (200, 100)),
            ((80, 110), (200, 100)),
        ]
        assert c.total_size == D(280, 210)

    def test_top_bottom_bottom(self) -> None:
        c = threes.top_bottom_bottom(D(300, 100), D(100, 200), D(200, 100))
        assert _placed(c) == [
            ((0, 0), (510, 170)),
            ((0, 180), (100, 200)),
            ((110, 180), (400, 200)),
        ]

    def test_three_rows(self) -> None:
        c = threes.three_rows(D(100, 50), D(50, 50), D(200, 100))
        assert _placed(c) == [
            ((0, 0), (100, 50)),
            ((0, 60), (100, 100)),
            ((0, 170), (100, 50)),
        ]

    def test_enumeration_order(self) -> None:
        names = [c.name for c in threes.candidates_3(D(1, 1), D(1, 1), D(1, 1))]
        assert names == [
            "three_columns",
            "top_top_bottom",
            "left_left_right",
            "left_right_right",
            "top_bottom_bottom",
            "three_rows",
        ]

    @pytest.mark.parametrize("make", THREE)
    def test_invariants(self, make) -> None:
        for dims in itertools.product(SIZES, repeat=3):
            _check_invariants(make(*dims), dims)


# -- Four images -------------------------------------------------------

class TestFours:
    def test_four_columns(self) -> None:
        c = fours.four_columns(*[D(100, 400)] * 4)
        assert [p.offset.width for p in c] == [0, 110, 220, 330]
        assert c.total_size == D(430, 400)

    def test_two_rows_of_two_rescales_bottom_row(self) -> None:
        c = fours.two_rows_of_two(D(100, 100), D(100, 100), D(200, 200), D(200, 200))
        assert _placed(c) == [
            ((0, 0), (100, 100)),
            ((110, 0), (100, 100)),
            ((0, 110), (102, 102)),
            ((108, 110), (102, 102)),
        ]
        assert c.total_size == D(210, 212)

    def test_two_rows_one_three(self) -> None:
        c = fours.two_rows_one_three(D(300, 100), D(100, 100), D(100, 100), D(100, 100))
        assert _placed(c)[0] == ((0, 0), (320, 107))
        assert [p.offset.height for p in c][1:] == [117, 117, 117]
        assert c.total_size == D(320, 217)

    def test_three_rows_112(self) -> None:
        c = fours.three_rows_112(D(200, 100), D(420, 210), D(100, 100), D(100, 100))
        assert _placed(c) == [
            ((0, 0), (210, 105)),
            ((0, 115), (210, 105)),
            ((0, 230), (100, 100)),
            ((110, 230), (100, 100)),
        ]

    def test_three_columns_211(self) -> None:
        c = fours.three_columns_211(D(200, 300), D(200, 300), D(200, 600), D(200, 600))
        assert c.total_size == D(626, 610)

    def test_default_candidates_exclude_column_variants(self) -> None:
        dims = [D(100, 100)] * 4
        names = [c.name for c in fours.candidates_4(*dims)]
        assert names == [
            "four_columns",
            "four_rows",
            "two_rows_of_two",
            "two_rows_one_three",
            "two_rows_three_one",
            "two_columns_one_three",
            "two_columns_three_one",
            "three_rows_211",
            "three_rows_121",
            "three_rows_112",
        ]
        extended = fours.candidates_4(*dims, include_column_variants=True)
        assert [c.name for c in extended][10:] == [
            "two_columns_of_two",
            "three_columns_211",
            "three_columns_121",
            "three_columns_112",
        ]

    @pytest.mark.parametrize("make", FOUR)
    def test_invariants(self, make) -> None:
        for dims in itertools.product(SIZES, repeat=4):
            _check_invariants(make(*dims), dims)
