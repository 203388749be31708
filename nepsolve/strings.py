"""Small text problems: a playground language, abbreviations and recipes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

TYPICAL = "porcao tipica"
COMMON = "porcao comum"


def decode_p_language(text: str) -> str:
    """Decode text in which every letter is preceded by a ``p``.

    Spaces pass through; characters not introduced by a ``p`` are dropped.
    """
    decoded: list[str] = []
    awaiting_letter = False
    for char in text:
        if char == " ":
            decoded.append(" ")
        elif char == "p" and not awaiting_letter:
            awaiting_letter = True
        elif awaiting_letter:
            awaiting_letter = False
            decoded.append(char)
    return "".join(decoded)


def abbreviate(word: str) -> str:
    """Numeronym of ``word``: first letter, inner length, last letter."""
    if not word:
        raise ValueError("word must not be empty")
    return f"{word[0]}{len(word) - 2}{word[-1]}"


@dataclass(frozen=True)
class Portion:
    """A classified recipe and the score of each of its ingredients."""

    name: str
    scores: tuple[int, ...]
    typical: bool

    @property
    def total(self) -> int:
        return sum(self.scores)


def classify_portions(
    basics: Iterable[str],
    recipes: Iterable[tuple[str, Iterable[str]]],
) -> list[Portion]:
    """Classify recipes by how many of their ingredients are typical.

    Basic ingredients score 1; each classified recipe then scores its own
    total when used as an ingredient of a later recipe.
    """
    scores: dict[str, int] = {name: 1 for name in basics}
    portions: list[Portion] = []
    for name, ingredients in recipes:
        ingredient_scores = tuple(scores.get(ingredient, 0) for ingredient in ingredients)
        total = sum(ingredient_scores)
        scores[name] = total
        portions.append(
            Portion(name, ingredient_scores, total > len(ingredient_scores) // 2)
        )
    return portions


def format_portions(portions: Iterable[Portion]) -> str:
    """Render classified portions as the judge's text report."""
    blocks = []
    for portion in portions:
        scores = "".join(f" {score}" for score in portion.scores)
        label = TYPICAL if portion.typical else COMMON
        blocks.append(f"{scores}\n{label} {portion.name}\n\n")
    return "".join(blocks)