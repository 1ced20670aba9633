"""Domain services package."""

from .question_sampler import normalize_technologies, sample_questions
from .statistics import count_correct_answers, gender_percentages
from .tenancy_guard import TenancyGuard
from .validation import ensure_answer_in_options, ensure_period

__all__ = [
    "TenancyGuard",
    "count_correct_answers",
    "ensure_answer_in_options",
    "ensure_period",
    "gender_percentages",
    "normalize_technologies",
    "sample_questions",
]
