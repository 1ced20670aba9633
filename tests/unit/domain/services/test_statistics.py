from __future__ import annotations

import pytest

from labs.domain.entities.assessment import TestQuestion
from labs.domain.services.statistics import count_correct_answers, gender_percentages


@pytest.mark.parametrize(
    "total, male, expected",
    [
        (0, 0, (0, 0)),
        (4, 1, (25, 75)),
        (3, 1, (33, 67)),
        (3, 2, (67, 33)),
        (8, 1, (13, 87)),
        (2, 1, (50, 50)),
        (5, 5, (100, 0)),
        (5, 0, (0, 100)),
    ],
)
def test_gender_percentages(total: int, male: int, expected: tuple[int, int]) -> None:
    male_percentage, female_percentage = gender_percentages(total, male)

    assert (male_percentage, female_percentage) == expected
    if total:
        assert male_percentage + female_percentage == 100


def test_count_correct_answers_ignores_unanswered() -> None:
    answers = [
        TestQuestion(correct_answer="a", candidate_answer="a"),
        TestQuestion(correct_answer="b", candidate_answer="a"),
        TestQuestion(correct_answer="c"),
        TestQuestion(correct_answer="d", candidate_answer="d"),
    ]

    assert count_correct_answers(answers) == 2
    assert count_correct_answers([]) == 0
