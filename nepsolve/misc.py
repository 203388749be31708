"""Assorted problems: airport traffic, pool balls, quilts and primality."""

from __future__ import annotations

import random
from collections import Counter
from collections.abc import Iterable, Sequence

BLACK = "preta"
WHITE = "branca"
PRIME_ROUNDS = 1_000_000


def busiest_airports(n: int, flights: Iterable[tuple[int, int]]) -> list[int]:
    """Airports numbered 1 to ``n`` that take part in the most flights.

    Every flight counts once for each of its two airports. Without flights
    no airport is returned.
    """
    traffic: Counter[int] = Counter()
    for origin, destination in flights:
        traffic[origin] += 1
        traffic[destination] += 1
    if not traffic:
        return []
    busiest = max(traffic.values())
    return [airport for airport in range(1, n + 1) if traffic[airport] == busiest]


def pool_ball_colour(balls: Sequence[int]) -> str:
    """Colour of the ball at the tip of the triangle built from the top row.

    Balls are ``1`` or ``-1``; each ball below two others is ``1`` when they
    match and ``-1`` when they differ. A tip of ``1`` is black.
    """
    row = list(balls)
    if not row:
        raise ValueError("at least one ball is required")
    if any(ball not in (1, -1) for ball in row):
        raise ValueError("balls must be 1 or -1")
    while len(row) > 1:
        row = [right * left for left, right in zip(row, row[1:])]
    return BLACK if row[0] == 1 else WHITE


def patch_quilt(
    rows: int,
    cols: int,
    patches: Sequence[Sequence[str]],
    placements: Iterable[tuple[int, int, int]],
) -> list[str]:
    """Lay patches over a ``rows`` by ``cols`` quilt and return its rows.

    Each placement is ``(row, col, patch)`` with a zero-based corner and a
    one-based patch number. Later patches cover earlier ones, parts falling
    outside the quilt are cut off and uncovered cells show ``'.'``.
    """
    grid = [["."] * cols for _ in range(rows)]
    for top, left, number in placements:
        if not 1 <= number <= len(patches):
            raise ValueError(f"there is no patch number {number}")
        if top < 0 or left < 0:
            raise ValueError("a patch corner must not be negative")
        for row, line in zip(grid[top:], patches[number - 1]):
            for offset, char in enumerate(line[: max(cols - left, 0)]):
                row[left + offset] = char
    return ["".join(row) for row in grid]


def _passes_round(odd_part: int, n: int) -> bool:
    witness = 2 + random.randrange(n - 4)
    x = pow(witness, odd_part, n)
    if x in (1, n - 1):
        return True
    exponent = odd_part
    while exponent != n - 1:
        x = x * x % n
        exponent *= 2
        if x == 1:
            return False
        if x == n - 1:
            return True
    return False


def is_probable_prime(n: int, rounds: int) -> bool:
    """Miller-Rabin test with ``rounds`` random witnesses."""
    if n <= 1 or n == 4:
        return False
    if n <= 3:
        return True
    odd_part = n - 1
    while odd_part % 2 == 0:
        odd_part //= 2
    return all(_passes_round(odd_part, n) for _ in range(rounds))