"""Problems over integer sequences: running sums, windows and counters."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate

LIST_EMPTY = "Lista Vazia"
LIST_FULL = "Lista Cheia"


def _non_negative_segments(values: Iterable[int]) -> list[int]:
    """Sum the runs of non-negative values separated by negative ones."""
    segments: list[int] = []
    current = 0
    for value in values:
        if value < 0:
            segments.append(current)
            current = 0
        else:
            current += value
    if current > 0:
        segments.append(current)
    return segments


def max_consecutive_segments_sum(values: Iterable[int], m: int) -> int:
    """Best total of at most ``m`` consecutive segments split by negatives.

    Negative values act as separators and are never added.
    """
    if m < 0:
        raise ValueError("m must not be negative")
    segments = _non_negative_segments(values)
    if len(segments) <= m:
        return sum(segments)
    window = sum(segments[:m])
    best = window
    for entering, leaving in zip(segments[m:], segments):
        window += entering - leaving
        best = max(best, window)
    return best


def altitude_profile(n: int, steps: str) -> list[int]:
    """Heights of ``n`` points whose lowest point is at height zero.

    Each of the first ``n - 1`` characters of ``steps`` moves one up
    when it is ``'A'`` and one down otherwise.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    if len(steps) < n - 1:
        raise ValueError("steps must hold at least n - 1 characters")
    moves = (1 if step == "A" else -1 for step in steps[: n - 1])
    heights = list(accumulate(moves, initial=0))
    lowest = min(heights)
    return [height - lowest for height in heights]


def train_cargo(loads: Iterable[int], wagons_per_trip: int, distance: int) -> int:
    """Cargo delivered by a train that carries ``wagons_per_trip`` wagons a trip.

    Reaching the wagon at position ``i`` and back costs ``2 * i`` of the
    remaining ``distance``; a trip is only paid for once it is full, except
    when the budget runs out, in which case the partial load still counts.
    """
    delivered = 0
    wagons = 0
    carried = 0
    for position, load in enumerate(loads, start=1):
        if distance >= 2 * position:
            wagons += 1
            carried += load
            if wagons == wagons_per_trip:
                distance -= 2 * position
                delivered += carried
                wagons = 0
                carried = 0
        else:
            delivered += carried
            break
    return delivered


def longest_distinct_run(values: Iterable[int]) -> int:
    """Length of the longest contiguous run with no repeated value."""
    last_seen: dict[int, int] = {}
    start = 0
    best = 0
    for index, value in enumerate(values):
        previous = last_seen.get(value)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[value] = index
        best = max(best, index - start + 1)
    return best


def count_odd_xor_subarrays(values: Iterable[int]) -> int:
    """Number of contiguous subarrays whose XOR is odd."""
    parity_counts = [1, 0]
    prefix = 0
    count = 0
    for value in values:
        prefix ^= value
        parity = prefix & 1
        count += parity_counts[parity ^ 1]
        parity_counts[parity] += 1
    return count


def max_absolute_subarray_sum(values: Sequence[int]) -> int:
    """Largest absolute sum of a non-empty contiguous subarray.

    The answer starts from the first value as given, so a single negative
    value is returned unchanged.
    """
    if not values:
        raise ValueError("values must not be empty")
    best_high = best_low = best = values[0]
    for value in values[1:]:
        best_high = max(value, best_high + value)
        best_low = min(value, best_low + value)
        best = max(best, best_high, abs(best_low))
    return best


def list_capacity_messages(capacity: int, operations: Iterable[str]) -> list[str]:
    """Messages produced while inserting into and removing from a bounded list.

    ``'R'`` removes an element; any other operation inserts one.
    """
    messages: list[str] = []
    size = 0
    for operation in operations:
        if operation == "R":
            if size == 0:
                messages.append(LIST_EMPTY)
            else:
                size -= 1
        elif size == capacity:
            messages.append(LIST_FULL)
        else:
            size += 1
    return messages


def _triangle_mod9(value: int) -> int:
    residue = value % 9
    return (residue * (residue + 1) // 2) % 9


def card_digit_sum_mod9(low: int, high: int) -> int:
    """Remainder modulo 9 of the digit sums of the cards from ``low`` to ``high``."""
    if low < 0 or high < 0:
        raise ValueError("card numbers must not be negative")
    sum_low = _triangle_mod9(low)
    sum_high = _triangle_mod9(high)
    if low + 8 < high or low % 9 > high % 9:
        return ((36 - sum_low + low % 9) % 9 + sum_high) % 9
    return abs(sum_high - sum_low) % 9