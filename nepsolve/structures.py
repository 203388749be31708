"""Problems solved with data structures: segment trees, union-find, sets."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

LONG_WAIT = 20


class AssignSumTree:
    """Segment tree over integers with range assignment and range sums.

    Positions are zero-based and ranges include both ends.
    """

    def __init__(self, values: Sequence[int]) -> None:
        self._size = len(values)
        capacity = 4 * max(self._size, 1)
        self._tree = [0] * capacity
        self._pending: list[int | None] = [None] * capacity
        if self._size:
            self._build(1, 0, self._size - 1, values)

    def __len__(self) -> int:
        return self._size

    def _build(self, node: int, low: int, high: int, values: Sequence[int]) -> None:
        if low == high:
            self._tree[node] = values[low]
            return
        middle = (low + high) // 2
        self._build(2 * node, low, middle, values)
        self._build(2 * node + 1, middle + 1, high, values)
        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def _apply(self, node: int, low: int, high: int, value: int) -> None:
        self._tree[node] = value * (high - low + 1)
        if low != high:
            self._pending[node] = value

    def _push(self, node: int, low: int, high: int) -> None:
        value = self._pending[node]
        if value is None:
            return
        middle = (low + high) // 2
        self._apply(2 * node, low, middle, value)
        self._apply(2 * node + 1, middle + 1, high, value)
        self._pending[node] = None

    def _check(self, left: int, right: int) -> None:
        if not 0 <= left <= right < self._size:
            raise IndexError(f"range [{left}, {right}] is outside the tree")

    def assign(self, left: int, right: int, value: int) -> None:
        """Set every position from ``left`` to ``right`` to ``value``."""
        self._check(left, right)
        self._assign(1, 0, self._size - 1, left, right, value)

    def _assign(
        self, node: int, low: int, high: int, left: int, right: int, value: int
    ) -> None:
        if high < left or low > right:
            return
        if left <= low and high <= right:
            self._apply(node, low, high, value)
            return
        self._push(node, low, high)
        middle = (low + high) // 2
        self._assign(2 * node, low, middle, left, right, value)
        self._assign(2 * node + 1, middle + 1, high, left, right, value)
        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def total(self, left: int, right: int) -> int:
        """Sum of the positions from ``left`` to ``right``."""
        self._check(left, right)
        return self._total(1, 0, self._size - 1, left, right)

    def _total(self, node: int, low: int, high: int, left: int, right: int) -> int:
        if high < left or low > right:
            return 0
        if left <= low and high <= right:
            return self._tree[node]
        self._push(node, low, high)
        middle = (low + high) // 2
        return self._total(2 * node, low, middle, left, right) + self._total(
            2 * node + 1, middle + 1, high, left, right
        )


def run_coin_boxes(
    values: Sequence[int], queries: Iterable[Sequence[int]]
) -> list[int]:
    """Answer coin-box queries with one-based positions.

    ``(1, a, b, k)`` sets boxes ``a`` to ``b`` to ``k`` coins; any other
    query ``(op, a, b)`` asks for the coins in boxes ``a`` to ``b``.
    """
    tree = AssignSumTree(values)
    answers: list[int] = []
    for operation, *arguments in queries:
        if operation == 1:
            left, right, coins = arguments
            tree.assign(left - 1, right - 1, coins)
        else:
            left, right = arguments
            answers.append(tree.total(left - 1, right - 1))
    return answers


def park_cars(n: int, requests: Iterable[int]) -> int:
    """Number of cars parked before one finds no free spot at or below its wish.

    Spots are numbered 1 to ``n``; a parked car links its requested spot to
    the best free spot below it.
    """
    parent = list(range(n + 1))

    def find(spot: int) -> int:
        root = spot
        while parent[root] != root:
            root = parent[root]
        while parent[spot] != root:
            parent[spot], spot = root, parent[spot]
        return root

    parked = 0
    for spot in requests:
        if not 0 <= spot <= n:
            raise ValueError(f"spot {spot} is outside 0..{n}")
        if find(spot) == 0:
            break
        parked += 1
        parent[spot] = find(spot - 1)
    return parked


def can_split_candy(exponents: Sequence[int]) -> bool:
    """Whether pieces of sizes ``2**e`` add up to at most two powers of two.

    A single piece can never be split.
    """
    if len(exponents) == 1:
        return False
    total = sum(1 << exponent for exponent in exponents)
    return bin(total).count("1") <= 2


def first_bluff(initial: Iterable[int], sequence: Iterable[int]) -> int | None:
    """First number of ``sequence`` that could not have been produced.

    A number is producible when it is in ``initial`` or doubles an earlier
    number of the sequence. Returns ``None`` when there is no bluff.
    """
    known = set(initial)
    for value in sequence:
        if value not in known:
            return value
        known.add(2 * value)
    return None


def count_long_waits(tellers: int, clients: Iterable[tuple[int, int]]) -> int:
    """Clients who wait at least twenty minutes for a teller.

    Each client is ``(arrival, duration)``. The first clients by arrival take
    the tellers; every later one is measured against the earliest client
    still in the queue.
    """
    ordered = sorted(clients)
    if not ordered:
        raise ValueError("at least one client is required")
    waiting = ordered[1:]
    seated = 1
    count = 0
    for arrival, _duration in waiting:
        if seated < tellers:
            seated += 1
            continue
        reference_arrival, reference_duration = waiting[0]
        wait = reference_duration - (arrival - (reference_arrival - reference_duration))
        if wait >= LONG_WAIT:
            count += 1
    return count