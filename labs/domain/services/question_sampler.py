"""
Domain Service - Question sampling

Selection of the questions that make up a generated test.
"""

import random
from typing import Iterable, List, Optional, Sequence

from labs.domain.entities.errors import ValidationError
from labs.domain.entities.recruitment import Question


def normalize_technologies(technologies: Iterable[str]) -> List[str]:
    """
    Clean a technology list.

    Values are trimmed, array literals such as ``{python,fastapi}`` are split
    and duplicates are dropped while preserving the first occurrence.
    """
    normalized: List[str] = []
    for raw in technologies:
        for item in raw.strip().strip("{}").split(","):
            value = item.strip().strip('"')
            if value and value not in normalized:
                normalized.append(value)
    return normalized


def sample_questions(
    questions: Sequence[Question],
    count: int,
    rng: Optional[random.Random] = None,
) -> List[Question]:
    """
    Pick ``count`` distinct questions uniformly at random.

    Args:
        questions: Candidate pool
        count: Number of questions requested
        rng: Random source, defaults to the module-level generator

    Raises:
        ValidationError: If ``count`` is not positive or exceeds the pool
    """
    if count < 1:
        raise ValidationError(
            "The number of questions must be positive", details={"requested": count}
        )

    if count > len(questions):
        raise ValidationError(
            f"Requested {count} questions but only {len(questions)} are available",
            details={"requested": count, "available": len(questions)},
        )

    source = rng or random
    return source.sample(list(questions), count)
