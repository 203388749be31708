import random

import pytest

from nepsolve.structures import (
    AssignSumTree,
    can_split_candy,
    count_long_waits,
    first_bluff,
    park_cars,
    run_coin_boxes,
)


def test_tree_total_matches_initial_values():
    values = [4, 8, 15, 16, 23, 42]
    tree = AssignSumTree(values)
    assert tree.total(0, len(values) - 1) == sum(values)
    assert tree.total(2, 4) == sum(values[2:5])
    assert len(tree) == len(values)


def test_tree_assign_covers_range():
    tree = AssignSumTree([1] * 10)
    tree.assign(3, 6, 7)
    assert tree.total(3, 6) == 7 * 4
    assert tree.total(0, 9) == 7 * 4 + 6


def test_tree_agrees_with_plain_list():
    rng = random.Random(1234)
    values = [rng.randint(0, 50) for _ in range(37)]
    tree = AssignSumTree(values)
    for _ in range(300):
        left = rng.randrange(len(values))
        right = rng.randrange(left, len(values))
        if rng.random() < 0.5:
            value = rng.randint(1, 100)
            tree.assign(left, right, value)
            values[left : right + 1] = [value] * (right - left + 1)
        else:
            assert tree.total(left, right) == sum(values[left : right + 1])


@pytest.mark.parametrize("left,right", [(-1, 2), (2, 1), (0, 5)])
def test_tree_rejects_bad_ranges(left, right):
    tree = AssignSumTree([1, 2, 3, 4, 5])
    with pytest.raises(IndexError):
        tree.total(left, right)


def test_coin_boxes_queries():
    answers = run_coin_boxes([1, 2, 3], [(2, 1, 3), (1, 1, 2, 5), (2, 1, 3), (2, 3, 3)])
    assert answers == [1 + 2 + 3, 5 + 5 + 3, 3]


def test_park_distinct_spots_all_park():
    requests = [1, 2, 3]
    assert park_cars(3, requests) == len(requests)


def test_park_stops_when_no_spot_is_left():
    assert park_cars(3, [1, 1, 2]) == 1


def test_park_spot_zero_parks_nothing():
    assert park_cars(4, [0, 1]) == 0


def test_park_count_is_bounded():
    requests = [2, 2, 1, 3, 3]
    assert 0 <= park_cars(3, requests) <= len(requests)


def test_park_rejects_unknown_spot():
    with pytest.raises(ValueError):
        park_cars(3, [5])


def test_single_piece_cannot_be_split():
    assert can_split_candy([5]) is False


@pytest.mark.parametrize(
    "exponents,expected",
    [([3, 3], True), ([1, 1, 1, 1], True), ([0, 1, 2], False), ([0, 4], True)],
)
def test_split_candy(exponents, expected):
    assert can_split_candy(exponents) is expected


def test_no_bluff_when_doubles_are_known():
    assert first_bluff([1, 2], [1, 2, 4]) is None


def test_first_unknown_number_is_reported():
    assert first_bluff([1, 2], [1, 3, 9]) == 3


def test_doubles_of_earlier_numbers_are_allowed():
    assert first_bluff([5], [5, 10, 20, 7]) == 7


def test_long_waits_require_clients():
    with pytest.raises(ValueError):
        count_long_waits(1, [])


def test_enough_tellers_mean_no_wait():
    clients = [(0, 30), (1, 30), (2, 30)]
    assert count_long_waits(len(clients), clients) == 0


def test_long_waits_are_bounded():
    clients = [(0, 40), (5, 40), (6, 40), (50, 10), (60, 5)]
    result = count_long_waits(2, clients)
    assert 0 <= result <= len(clients) - 2