"""Domain Service - business rules shared by several resources."""

from datetime import datetime
from typing import Optional, Sequence

from labs.domain.entities.errors import ValidationError


def ensure_period(
    start: Optional[datetime], end: Optional[datetime], label: str = "period"
) -> None:
    """Reject a period whose end precedes its start."""
    if start is not None and end is not None and end < start:
        raise ValidationError(
            f"Invalid {label}: end date is before start date",
            details={"start": start.isoformat(), "end": end.isoformat()},
        )


def ensure_answer_in_options(correct_answer: str, options: Sequence[str]) -> None:
    if len(options) < 2:
        raise ValidationError("A question needs at least two options")
    if correct_answer not in options:
        raise ValidationError(
            "The correct answer must be one of the options",
            details={"correct_answer": correct_answer},
        )
