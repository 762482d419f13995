"""MBTI scoring: answer accumulation, normalisation, type resolution,
confidence and per-dimension strength.

All functions are *pure*: no side-effects, no I/O. Scores are always
recomputed from the full answer list, so the result does not depend on the
order in which questions were answered.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable
import logging
import math

from pydantic import BaseModel, ConfigDict, Field

from mbti_travel.personality_types import (
    DEFAULT_TYPE_CODE,
    DIMENSION_PAIRS,
    MBTI_TYPES,
    DimensionPair,
    MBTICode,
    Pole,
    StrengthLabel,
    UserAnswer,
)


logger = logging.getLogger(__name__)

# Answer values range over [-2, 2]
MAX_SCORE_MAGNITUDE = 2.0

# (lower bound, label), checked from the top; bounds are inclusive
_STRENGTH_THRESHOLDS: tuple[tuple[float, StrengthLabel], ...] = (
    (1.3, "very clear"),
    (0.7, "clear"),
    (0.3, "moderate"),
)

# pair → (letter for score >= 0, letter for score < 0)
PREFERENCE_LETTERS: dict[DimensionPair, tuple[Pole, Pole]] = {
    "EI": ("E", "I"),
    "SN": ("N", "S"),
    "TF": ("F", "T"),
    "JP": ("P", "J"),
}

# pole → (pair, sign applied to the answer value)
_POLE_CONTRIBUTION: dict[Pole, tuple[DimensionPair, int]] = {
    pole: (pair, sign)
    for pair, letters in PREFERENCE_LETTERS.items()
    for pole, sign in zip(letters, (1, -1))
}


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class MBTIScores(BaseModel):
    """Normalised score per dimension pair.

    A score >= 0 resolves to E, N, F or P.
    """

    model_config = ConfigDict(frozen=True)

    EI: float = 0.0
    SN: float = 0.0
    TF: float = 0.0
    JP: float = 0.0

    def get(self, dimension: DimensionPair) -> float:
        return getattr(self, dimension)

    def as_dict(self) -> dict[str, float]:
        return {pair: self.get(pair) for pair in DIMENSION_PAIRS}


class DimensionScore(BaseModel):
    """Display detail for a single dimension pair."""

    model_config = ConfigDict(frozen=True)

    dimension: DimensionPair
    score: float
    preference: Pole
    strength: StrengthLabel


class MBTIResult(BaseModel):
    """Outcome of a scored test."""

    model_config = ConfigDict(frozen=True)

    type_code: MBTICode
    scores: MBTIScores
    confidence: int = Field(ge=0, le=100)
    dimension_scores: list[DimensionScore] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def round_half_up(value: float) -> int:
    """Round halves upward (0.5 → 1, 66.5 → 67)."""
    return math.floor(value + 0.5)


def resolve_preference(dimension: DimensionPair, score: float) -> Pole:
    """Pick the pole letter for *score*; 0 resolves to E, N, F or P."""
    non_negative, negative = PREFERENCE_LETTERS[dimension]
    return non_negative if score >= 0 else negative


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def calculate_scores(answers: Iterable[UserAnswer]) -> MBTIScores:
    """Fold *answers* into a normalised score per dimension pair.

    E, N, F and P answers add their value; I, S, T and J answers subtract it.
    Each pair's sum is divided by the number of answers for that pair, and a
    pair with no answers scores 0.
    """
    sums: dict[DimensionPair, float] = {pair: 0.0 for pair in DIMENSION_PAIRS}
    counts: dict[DimensionPair, int] = {pair: 0 for pair in DIMENSION_PAIRS}

    for answer in answers:
        pair, sign = _POLE_CONTRIBUTION[answer.pole]
        sums[pair] += sign * answer.value
        counts[pair] += 1

    return MBTIScores(**{
        pair: sums[pair] / counts[pair] if counts[pair] > 0 else 0.0
        for pair in DIMENSION_PAIRS
    })


def determine_type(
    scores: MBTIScores,
    known_codes: Collection[str] | None = None,
    default_code: MBTICode = DEFAULT_TYPE_CODE,
) -> MBTICode:
    """Map *scores* to a 4-letter type code in EI, SN, TF, JP order.

    Codes missing from *known_codes* (the descriptive catalog by default)
    fall back to *default_code*.
    """
    code = "".join(resolve_preference(pair, scores.get(pair)) for pair in DIMENSION_PAIRS)
    catalog = MBTI_TYPES if known_codes is None else known_codes
    if code not in catalog:
        logger.warning("Generated MBTI type %s not found in data. Defaulting to %s.", code, default_code)
        return default_code
    return code  # type: ignore[return-value]


def calculate_confidence(scores: MBTIScores) -> int:
    """Return confidence (0-100) from the mean absolute score."""
    average_strength = sum(abs(scores.get(pair)) for pair in DIMENSION_PAIRS) / len(DIMENSION_PAIRS)
    confidence = average_strength / MAX_SCORE_MAGNITUDE * 100
    return round_half_up(max(0.0, min(100.0, confidence)))


def get_strength_category(numeric_strength: float) -> StrengthLabel:
    """Bucket an absolute score into a qualitative label."""
    for lower_bound, label in _STRENGTH_THRESHOLDS:
        if numeric_strength >= lower_bound:
            return label
    return "slight"


def build_dimension_scores(scores: MBTIScores) -> list[DimensionScore]:
    """One :class:`DimensionScore` per pair, in EI, SN, TF, JP order."""
    return [
        DimensionScore(
            dimension=pair,
            score=scores.get(pair),
            preference=resolve_preference(pair, scores.get(pair)),
            strength=get_strength_category(abs(scores.get(pair))),
        )
        for pair in DIMENSION_PAIRS
    ]


def process_test(
    answers: list[UserAnswer],
    default_code: MBTICode = DEFAULT_TYPE_CODE,
) -> MBTIResult:
    """Run the full scoring pipeline over a complete answer list."""
    if not answers:
        raise ValueError("No answers provided for MBTI calculation")

    scores = calculate_scores(answers)
    return MBTIResult(
        type_code=determine_type(scores, default_code=default_code),
        scores=scores,
        confidence=calculate_confidence(scores),
        dimension_scores=build_dimension_scores(scores),
    )
