"""Pydantic models for quiz session state and progress."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from mbti_travel.personality_types import MBTICode, UserAnswer


STATE_SCHEMA_VERSION = 1


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class QuizState(BaseModel):
    """Everything needed to resume a quiz. Scores are never stored; they are
    recomputed from ``answers``."""

    schema_version: int = STATE_SCHEMA_VERSION
    current_question_index: int = Field(default=0, ge=0)
    answers: list[UserAnswer] = Field(default_factory=list)
    is_completed: bool = False
    result_code: MBTICode | None = None
    started_at: datetime = Field(default_factory=_utcnow)
    completed_at: datetime | None = None


class QuizProgress(BaseModel):
    """Progress summary for the question flow."""

    current_question: int = Field(ge=1)
    total_questions: int = Field(ge=0)
    answered_questions: int = Field(ge=0)
    progress_percentage: int = Field(ge=0, le=100)
