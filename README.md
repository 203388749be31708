# nepsolve

A collection of solutions to short algorithmic exercises. Each solution is a
plain Python function that takes ordinary Python values and returns its
answer, and a `nepsolve` command runs any of them on problem input read from
standard input.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## What is inside

| Module                | Contents |
|-----------------------|----------|
| `nepsolve.sequences`  | Array and prefix problems: `max_consecutive_segments_sum`, `altitude_profile`, `train_cargo`, `longest_distinct_run`, `count_odd_xor_subarrays`, `max_absolute_subarray_sum`, `list_capacity_messages`, `card_digit_sum_mod9` |
| `nepsolve.strings`    | Text problems: `decode_p_language`, `abbreviate`, and recipe classification with `Portion`, `classify_portions` and `format_portions` |
| `nepsolve.geometry`   | Plane geometry: `Point`, `sweep_min_diameter`, `cover_holes_diameter`, `count_perpendicular`, `delivery_point` |
| `nepsolve.structures` | Data-structure problems: the range-assignment segment tree `AssignSumTree`, plus `run_coin_boxes`, `park_cars`, `can_split_candy`, `first_bluff`, `count_long_waits` |
| `nepsolve.misc`       | Assorted problems: `busiest_airports`, `pool_ball_colour`, `patch_quilt`, `is_probable_prime` |
| `nepsolve.cli`        | The `nepsolve` command |

Invalid input raises `ValueError` (or `IndexError` for out-of-range tree
positions) rather than producing a meaningless answer.

## Examples

```python
from nepsolve.strings import abbreviate
from nepsolve.sequences import longest_distinct_run, max_absolute_subarray_sum

abbreviate("internationalization")              # 'i18n'
longest_distinct_run([1, 2, 1, 3, 4])           # 4
max_absolute_subarray_sum([1, -3, 2, 3, -4])    # 5
```

Range assignment with range sums:

```python
from nepsolve.structures import AssignSumTree

tree = AssignSumTree([1, 2, 3, 4, 5])
tree.assign(1, 3, 10)   # positions are zero-based and inclusive
tree.total(0, 4)        # 1 + 10 + 10 + 10 + 5 = 36
```

`run_coin_boxes` wraps the same tree with one-based positions:
`(1, a, b, k)` sets boxes `a` to `b` to `k`, and `(2, a, b)` asks for their sum.

## Command line

Installing the package also installs a `nepsolve` command. It takes the name
of a problem, reads that problem's input from standard input and prints the
answer:

```
nepsolve cards < input.txt
```

The problem names are:

```
abbreviate  abs-sum  airport  altitudes  bank  bluff  candy  cards
coin-boxes  cover-holes  delivery  distinct  list  odd-xor  p-language
parking  perpendicular  pool  portions  prime  quilt  segments  sweep  train
```

`prime` runs a Miller-Rabin test and answers `talvez` for a probable prime or
`definitivamente nao primo` otherwise; `--rounds N` sets how many random
witnesses it tries (1,000,000 by default).

If the input is malformed or incomplete, the command prints `error: ...` to
standard error and exits with status 1.