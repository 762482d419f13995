"""Answer-set validation and the completeness gate applied before a result
is finalised.

Problems are collected as human-readable issue strings. Only the completeness
gate raises.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
import logging
import math
from typing import Any

from pydantic import BaseModel, Field

from mbti_travel.engine.scoring import MAX_SCORE_MAGNITUDE, round_half_up
from mbti_travel.personality_types import ALL_POLES, Question, pole_dimension
from mbti_travel.questions import TOTAL_QUESTIONS


logger = logging.getLogger(__name__)

MIN_COMPLETENESS = 70


class AnswerValidation(BaseModel):
    """Validation report for a list of user answers."""

    is_valid: bool
    issues: list[str] = Field(default_factory=list)
    completeness: int = Field(ge=0)


class IncompleteTestError(ValueError):
    """Too few questions answered to finalise a result."""

    def __init__(self, completeness: int, issues: list[str] | None = None) -> None:
        self.completeness = completeness
        self.issues = list(issues or [])
        super().__init__(
            f"Test incomplete: {completeness}% completed. At least {MIN_COMPLETENESS}% required."
        )


# ---------------------------------------------------------------------------
# Field access
# ---------------------------------------------------------------------------
def _field(answer: Any, name: str) -> Any:
    """Read *name* from a model or a raw mapping."""
    if isinstance(answer, Mapping):
        return answer.get(name)
    return getattr(answer, name, None)


def _is_valid_value(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if math.isnan(value):
        return False
    return -MAX_SCORE_MAGNITUDE <= value <= MAX_SCORE_MAGNITUDE


# ---------------------------------------------------------------------------
# Issue collectors
# ---------------------------------------------------------------------------
def _missing_poles(answers: Sequence[Any]) -> list[str]:
    seen = {_field(a, "pole") for a in answers}
    return [pole for pole in ALL_POLES if pole not in seen]


def _catalog_issues(answers: Sequence[Any], questions: Iterable[Question]) -> list[str]:
    by_id = {q.id: q for q in questions}
    issues: list[str] = []
    for answer in answers:
        question_id = _field(answer, "question_id")
        pole = _field(answer, "pole")
        question = by_id.get(question_id)
        if question is None:
            issues.append(f"Answer refers to unknown question '{question_id}'")
            continue
        try:
            pair = pole_dimension(pole)
        except ValueError:
            issues.append(f"Answer to '{question_id}' has unknown pole {pole!r}")
            continue
        if pair != question.dimension:
            issues.append(
                f"Answer to '{question_id}' has pole {pole} outside dimension {question.dimension}"
            )
    return issues


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def validate_answers(
    answers: Sequence[Any],
    total_questions: int = TOTAL_QUESTIONS,
    questions: Iterable[Question] | None = None,
) -> AnswerValidation:
    """Check *answers* for completeness, pole coverage and value range.

    Args:
        answers: ``UserAnswer`` models or raw mappings with the same keys.
        total_questions: Size of the questionnaire.
        questions: Optional catalog used to check each answer's pole against
            its question's dimension.

    Returns:
        AnswerValidation; ``is_valid`` requires no issues and at least
        ``MIN_COMPLETENESS`` percent answered.
    """
    if not answers:
        return AnswerValidation(is_valid=False, issues=["No answers provided"], completeness=0)

    issues: list[str] = []

    missing = _missing_poles(answers)
    if missing:
        issues.append(f"Missing dimensions: {', '.join(missing)}")

    completeness = round_half_up(len(answers) / total_questions * 100) if total_questions > 0 else 0

    invalid_count = sum(1 for a in answers if not _is_valid_value(_field(a, "value")))
    if invalid_count:
        issues.append(f"{invalid_count} answers have invalid values")

    if questions is not None:
        issues.extend(_catalog_issues(answers, questions))

    return AnswerValidation(
        is_valid=not issues and completeness >= MIN_COMPLETENESS,
        issues=issues,
        completeness=completeness,
    )


def ensure_can_finalize(validation: AnswerValidation) -> None:
    """Raise :class:`IncompleteTestError` below the completeness threshold.

    Other issues do not block a result; they are only logged.
    """
    if validation.is_valid:
        return
    logger.warning("Test validation failed: %s", validation.issues)
    if validation.completeness < MIN_COMPLETENESS:
        raise IncompleteTestError(validation.completeness, validation.issues)
