from __future__ import annotations

import random

import pytest

from labs.domain.entities.errors import ValidationError
from labs.domain.entities.recruitment import Question
from labs.domain.services.question_sampler import (
    normalize_technologies,
    sample_questions,
)


def _pool(size: int) -> list[Question]:
    return [
        Question(
            question=f"Question {index}",
            correct_answer="a",
            options=["a", "b"],
            associated_technology="python",
        )
        for index in range(size)
    ]


def test_normalize_technologies_trims_and_deduplicates() -> None:
    assert normalize_technologies([" python ", "fastapi", "python", ""]) == [
        "python",
        "fastapi",
    ]


def test_normalize_technologies_splits_array_literals() -> None:
    assert normalize_technologies(['{python,"mongodb"}', "react"]) == [
        "python",
        "mongodb",
        "react",
    ]


def test_sample_questions_returns_distinct_questions() -> None:
    pool = _pool(12)

    chosen = sample_questions(pool, 10, random.Random(7))

    assert len(chosen) == 10
    assert len({question.id for question in chosen}) == 10
    assert all(question in pool for question in chosen)


def test_sample_questions_is_reproducible_with_seeded_rng() -> None:
    pool = _pool(20)

    first = sample_questions(pool, 5, random.Random(42))
    second = sample_questions(pool, 5, random.Random(42))

    assert [q.id for q in first] == [q.id for q in second]


def test_sample_questions_can_take_the_whole_pool() -> None:
    pool = _pool(3)

    assert {q.id for q in sample_questions(pool, 3)} == {q.id for q in pool}


def test_sample_questions_rejects_pool_smaller_than_request() -> None:
    with pytest.raises(ValidationError) as exc_info:
        sample_questions(_pool(4), 10)

    assert exc_info.value.details == {"requested": 10, "available": 4}


@pytest.mark.parametrize("count", [0, -1])
def test_sample_questions_rejects_non_positive_count(count: int) -> None:
    with pytest.raises(ValidationError):
        sample_questions(_pool(4), count)
