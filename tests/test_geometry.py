import itertools

import pytest

from nepsolve.geometry import (
    Point,
    count_perpendicular,
    cover_holes_diameter,
    delivery_point,
    sweep_min_diameter,
)


@pytest.mark.parametrize(
    "points",
    [[], [(0, 0)], [(0, 0), (10, 0)], [(3, 1), (-4, 7), (2, 2)]],
)
def test_sweep_never_grows_beyond_the_shaft(points):
    assert sweep_min_diameter(points) == 5.0


def test_sweep_accepts_point_objects():
    assert sweep_min_diameter([Point(1, 1), Point(5, 5)]) == 5.0


def test_cover_single_hole_is_the_shaft():
    assert cover_holes_diameter([(7, -3)]) == 5


def test_cover_two_holes():
    assert cover_holes_diameter([(0, 0), (3, 4)]) == 15


def test_cover_is_invariant_under_translation_and_order():
    holes = [(0, 0), (5, 1), (2, 8), (-3, 4)]
    base = cover_holes_diameter(holes)
    shifted = [(x + 11, y - 6) for x, y in holes]
    assert cover_holes_diameter(shifted) == base
    for perm in itertools.permutations(holes):
        assert cover_holes_diameter(perm) == base


def test_cover_is_at_least_the_shaft():
    assert cover_holes_diameter([(0, 0), (1, 0), (0, 1)]) >= 5


def test_cover_requires_a_hole():
    with pytest.raises(ValueError):
        cover_holes_diameter([])


def test_perpendicular_diagonals():
    segments = [(0, 0, 1, 1), (0, 0, 1, -1)]
    assert count_perpendicular(segments) == len(segments)


def test_parallel_segments_have_no_partner():
    assert count_perpendicular([(0, 0, 1, 1), (0, 1, 1, 2)]) == 0


def test_axis_segments_follow_signed_slopes():
    segments = [(0, 0, 2, 0), (0, 2, 0, 0)]
    assert count_perpendicular(segments) == len(segments)


def test_count_never_exceeds_segments():
    segments = [(0, 0, 1, 2), (0, 0, 2, -1), (1, 1, 3, 5), (0, 0, 4, 1)]
    assert 0 <= count_perpendicular(segments) <= len(segments)


def test_degenerate_segment_is_rejected():
    with pytest.raises(ValueError):
        count_perpendicular([(1, 1, 1, 1)])


def test_delivery_point_on_sorted_input():
    assert delivery_point([(1, 10), (2, 20), (3, 30)]) == (3, 30)


def test_delivery_point_ignores_order():
    points = [(4, 1), (2, 9), (7, 3), (1, 5)]
    expected = delivery_point(points)
    for perm in itertools.permutations(points):
        assert delivery_point(perm) == expected


def test_delivery_coordinates_come_from_input():
    points = [(4, 1), (2, 9), (7, 3), (1, 5), (6, 6)]
    result = delivery_point(points)
    assert result.x in {x for x, _ in points}
    assert result.y in {y for _, y in points}


@pytest.mark.parametrize("points", [[], [(1, 1)], [(1, 1), (2, 2)]])
def test_delivery_needs_enough_points(points):
    with pytest.raises(ValueError):
        delivery_point(points)