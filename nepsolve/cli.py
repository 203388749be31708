"""Command line front end: solve one problem from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator

from nepsolve.geometry import (
    count_perpendicular,
    cover_holes_diameter,
    delivery_point,
    sweep_min_diameter,
)
from nepsolve.misc import (
    PRIME_ROUNDS,
    busiest_airports,
    is_probable_prime,
    patch_quilt,
    pool_ball_colour,
)
from nepsolve.sequences import (
    altitude_profile,
    card_digit_sum_mod9,
    count_odd_xor_subarrays,
    list_capacity_messages,
    longest_distinct_run,
    max_absolute_subarray_sum,
    max_consecutive_segments_sum,
    train_cargo,
)
from nepsolve.strings import abbreviate, classify_portions, decode_p_language, format_portions
from nepsolve.structures import (
    can_split_candy,
    count_long_waits,
    first_bluff,
    park_cars,
    run_coin_boxes,
)

MAYBE_PRIME = "talvez"
NOT_PRIME = "definitivamente nao primo"
NO_BLUFF = "sim"


class _Reader:
    """Whitespace-separated tokens, also readable one character at a time."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())
        self._partial = ""

    def _next(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def word(self) -> str:
        if self._partial:
            word, self._partial = self._partial, ""
            return word
        return self._next()

    def char(self) -> str:
        if not self._partial:
            self._partial = self._next()
        char, self._partial = self._partial[0], self._partial[1:]
        return char

    def integer(self) -> int:
        return int(self.word())

    def number(self) -> float:
        return float(self.word())

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]

    def lazy_integers(self, count: int) -> Iterator[int]:
        return (self.integer() for _ in range(count))

    def pairs(self, count: int) -> list[tuple[int, int]]:
        return [(self.integer(), self.integer()) for _ in range(count)]


def _counted_list(text: str) -> list[int]:
    reader = _Reader(text)
    return reader.integers(reader.integer())


def _segments(text: str) -> str:
    reader = _Reader(text)
    n, m = reader.integer(), reader.integer()
    return f"{max_consecutive_segments_sum(reader.integers(n), m)}\n"


def _altitudes(text: str) -> str:
    reader = _Reader(text)
    n = reader.integer()
    steps = reader.word() if n > 1 else ""
    return " ".join(map(str, altitude_profile(n, steps))) + "\n"


def _train(text: str) -> str:
    reader = _Reader(text)
    n, wagons, distance = reader.integer(), reader.integer(), reader.integer()
    return f"{train_cargo(reader.integers(n), wagons, distance)}\n"


def _distinct(text: str) -> str:
    return str(longest_distinct_run(_counted_list(text)))


def _odd_xor(text: str) -> str:
    return f"{count_odd_xor_subarrays(_counted_list(text))}\n"


def _abs_sum(text: str) -> str:
    return f"{max_absolute_subarray_sum(_counted_list(text))}\n"


def _bounded_list(text: str) -> str:
    reader = _Reader(text)
    capacity, count = reader.integer(), reader.integer()
    operations = [reader.char() for _ in range(count)]
    return "".join(f"{message}\n" for message in list_capacity_messages(capacity, operations))


def _cards(text: str) -> str:
    reader = _Reader(text)
    return f"{card_digit_sum_mod9(reader.integer(), reader.integer())}\n"


def _p_language(text: str) -> str:
    lines = text.splitlines()
    return decode_p_language(lines[0] if lines else "")


def _abbreviate(text: str) -> str:
    return f"{abbreviate(_Reader(text).word())}\n"


def _portions(text: str) -> str:
    reader = _Reader(text)
    basics = [reader.word() for _ in range(reader.integer())]
    recipes = []
    for _ in range(reader.integer()):
        name = reader.word()
        recipes.append((name, [reader.word() for _ in range(reader.integer())]))
    return format_portions(classify_portions(basics, recipes))


def _sweep(text: str) -> str:
    reader = _Reader(text)
    out = []
    while count := reader.integer():
        out.append(f"{sweep_min_diameter(reader.pairs(count)):g}\n")
    return "".join(out)


def _cover(text: str) -> str:
    reader = _Reader(text)
    out = []
    case = 0
    while count := reader.integer():
        case += 1
        out.append(f"Teste {case}\n{cover_holes_diameter(reader.pairs(count))}\n\n")
    return "".join(out)


def _perpendicular(text: str) -> str:
    reader = _Reader(text)
    segments = [
        (reader.number(), reader.number(), reader.number(), reader.number())
        for _ in range(reader.integer())
    ]
    return f"{count_perpendicular(segments)}\n"


def _delivery(text: str) -> str:
    reader = _Reader(text)
    point = delivery_point(reader.pairs(reader.integer()))
    return f"{point.x} {point.y}\n"


def _coin_boxes(text: str) -> str:
    reader = _Reader(text)
    n, count = reader.integer(), reader.integer()
    values = reader.integers(n)
    queries = []
    for _ in range(count):
        operation = reader.integer()
        queries.append((operation, *reader.integers(3 if operation == 1 else 2)))
    return "".join(f"{answer}\n" for answer in run_coin_boxes(values, queries))


def _parking(text: str) -> str:
    reader = _Reader(text)
    n, count = reader.integer(), reader.integer()
    return f"{park_cars(n, reader.lazy_integers(count))}\n"


def _candy(text: str) -> str:
    reader = _Reader(text)
    count = reader.integer()
    if count == 1:
        return "N"
    return "Y" if can_split_candy(reader.integers(count)) else "N"


def _bluff(text: str) -> str:
    reader = _Reader(text)
    n, count = reader.integer(), reader.integer()
    initial = reader.integers(n)
    bluff = first_bluff(initial, reader.lazy_integers(count))
    return f"{NO_BLUFF if bluff is None else bluff}\n"


def _bank(text: str) -> str:
    reader = _Reader(text)
    tellers, count = reader.integer(), reader.integer()
    return f"{count_long_waits(tellers, reader.pairs(count))}\n"


def _airport(text: str) -> str:
    reader = _Reader(text)
    out = []
    case = 0
    while True:
        n, count = reader.integer(), reader.integer()
        if n == 0 and count == 0:
            return "".join(out)
        case += 1
        airports = "".join(f"{airport} " for airport in busiest_airports(n, reader.pairs(count)))
        out.append(f"Teste {case}\n{airports}\n\n")


def _pool(text: str) -> str:
    return pool_ball_colour(_counted_list(text))


def _quilt(text: str) -> str:
    reader = _Reader(text)
    rows, cols = reader.integer(), reader.integer()
    patches = []
    for _ in range(reader.integer()):
        height, width = reader.integer(), reader.integer()
        patches.append(
            ["".join(reader.char() for _ in range(width)) for _ in range(height)]
        )
    placements = [
        (reader.integer(), reader.integer(), reader.integer())
        for _ in range(reader.integer())
    ]
    return "".join(f"{row}\n" for row in patch_quilt(rows, cols, patches, placements))


def _prime(text: str, rounds: int) -> str:
    n = _Reader(text).integer()
    return f"{MAYBE_PRIME if is_probable_prime(n, rounds) else NOT_PRIME}\n"


_HANDLERS: dict[str, Callable[[str], str]] = {
    "segments": _segments,
    "altitudes": _altitudes,
    "train": _train,
    "distinct": _distinct,
    "odd-xor": _odd_xor,
    "abs-sum": _abs_sum,
    "list": _bounded_list,
    "cards": _cards,
    "p-language": _p_language,
    "abbreviate": _abbreviate,
    "portions": _portions,
    "sweep": _sweep,
    "cover-holes": _cover,
    "perpendicular": _perpendicular,
    "delivery": _delivery,
    "coin-boxes": _coin_boxes,
    "parking": _parking,
    "candy": _candy,
    "bluff": _bluff,
    "bank": _bank,
    "airport": _airport,
    "pool": _pool,
    "quilt": _quilt,
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nepsolve", description="Solve a problem reading its input from stdin."
    )
    parser.add_argument("problem", choices=sorted([*_HANDLERS, "prime"]))
    parser.add_argument(
        "--rounds",
        type=int,
        default=PRIME_ROUNDS,
        help="witnesses tried by the prime test",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the chosen solver on standard input and print its answer."""
    args = _parser().parse_args(argv)
    text = sys.stdin.read()
    try:
        if args.problem == "prime":
            output = _prime(text, args.rounds)
        else:
            output = _HANDLERS[args.problem](text)
    except (ValueError, IndexError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())