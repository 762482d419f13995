"""MBTI travel-style quiz: questionnaire, scoring and result sharing."""

from .engine.scoring import MBTIResult, process_test
from .personality_types import MBTI_TYPES, MBTIType, UserAnswer, get_mbti_type
from .questions import QUESTIONS, TOTAL_QUESTIONS

__all__ = [
    "MBTIResult",
    "MBTIType",
    "MBTI_TYPES",
    "QUESTIONS",
    "TOTAL_QUESTIONS",
    "UserAnswer",
    "get_mbti_type",
    "process_test",
]
