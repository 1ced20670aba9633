"""Domain Service - headcount and scoring statistics."""

import math
from typing import Iterable, Tuple

from labs.domain.entities.assessment import TestQuestion


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def gender_percentages(total: int, male: int) -> Tuple[int, int]:
    """
    Split a headcount into male and female percentages.

    The female share is the complement of the rounded male share, so both
    values always add up to 100 (or are both 0 for an empty company).
    """
    if total <= 0:
        return 0, 0
    male_percentage = _round_half_up(male * 100 / total)
    return male_percentage, 100 - male_percentage


def count_correct_answers(answers: Iterable[TestQuestion]) -> int:
    """Count the test questions answered correctly."""
    return sum(1 for answer in answers if answer.is_correct)
