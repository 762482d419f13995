"""Tests for mbti_travel/personality_types.py: model validation and 16-type completeness."""

from mbti_travel.personality_types import (
    ALL_MBTI_CODES,
    DIMENSION_POLES,
    MBTI_TYPES,
    Answer,
    MBTIType,
    Question,
    TravelStyle,
    UnknownTypeCodeError,
    UserAnswer,
    get_all_mbti_codes,
    get_mbti_type,
    get_travel_recommendations,
    is_valid_mbti_code,
    pole_dimension,
    require_mbti_type,
)
from pydantic import ValidationError
import pytest


def _style() -> TravelStyle:
    return TravelStyle(
        preferences=["Quiet"],
        destinations=["Mountains"],
        activities=["Hiking"],
        planning_style="Loose plans",
        budget_approach="Frugal travel",
        accommodation_style="Small cabins",
        travel_companions=["Solo travel"],
    )


class TestPoles:
    def test_pole_dimension(self):
        assert pole_dimension("E") == "EI"
        assert pole_dimension("N") == "SN"
        assert pole_dimension("T") == "TF"
        assert pole_dimension("P") == "JP"

    def test_unknown_pole(self):
        with pytest.raises(ValueError, match="Unknown pole"):
            pole_dimension("X")  # type: ignore[arg-type]

    def test_every_pole_belongs_to_its_pair(self):
        for pair, poles in DIMENSION_POLES.items():
            for pole in poles:
                assert pole_dimension(pole) == pair


class TestQuestionModel:
    def test_valid_question(self):
        q = Question(
            id="x1",
            text="Pick one",
            dimension="EI",
            answers=[
                Answer(id="a", text="Out", value=2, pole="E"),
                Answer(id="b", text="In", value=-2, pole="I"),
            ],
        )
        assert q.get_answer("b").pole == "I"
        assert q.get_answer("zzz") is None

    def test_pole_outside_dimension_rejected(self):
        with pytest.raises(ValidationError, match="does not belong"):
            Question(
                id="x1",
                text="Pick one",
                dimension="EI",
                answers=[
                    Answer(id="a", text="Out", value=2, pole="E"),
                    Answer(id="b", text="Facts", value=2, pole="S"),
                ],
            )

    def test_needs_at_least_two_answers(self):
        with pytest.raises(ValidationError):
            Question(
                id="x1",
                text="Pick one",
                dimension="EI",
                answers=[Answer(id="a", text="Out", value=2, pole="E")],
            )

    def test_invalid_dimension(self):
        with pytest.raises(ValidationError):
            Question(id="x1", text="Pick one", dimension="XY", answers=[])  # type: ignore[arg-type]


class TestUserAnswer:
    def test_invalid_pole_rejected_at_construction(self):
        with pytest.raises(ValidationError):
            UserAnswer(question_id="q1", answer_id="q1a1", value=2, pole="X")  # type: ignore[arg-type]

    def test_from_selection(self):
        q = Question(
            id="x1",
            text="Pick one",
            dimension="JP",
            answers=[
                Answer(id="a", text="Plan", value=2, pole="J"),
                Answer(id="b", text="Wing it", value=-2, pole="P"),
            ],
        )
        ua = UserAnswer.from_selection(q, q.answers[1])
        assert ua.question_id == "x1"
        assert ua.answer_id == "b"
        assert ua.value == -2
        assert ua.pole == "P"


class TestMBTITypeModel:
    def test_valid_type(self):
        t = MBTIType(code="INTJ", name="Test", description="A test type", characteristics=["Calm"], travel_style=_style())
        assert t.image_url is None

    def test_unknown_code_rejected(self):
        with pytest.raises(ValidationError):
            MBTIType(code="XXXX", name="Test", description="A test type", characteristics=["Calm"], travel_style=_style())  # type: ignore[arg-type]

    def test_characteristics_required(self):
        with pytest.raises(ValidationError):
            MBTIType(code="INTJ", name="Test", description="A test type", characteristics=[], travel_style=_style())


class TestPreDefinedTypes:
    def test_sixteen_types(self):
        assert len(MBTI_TYPES) == 16
        assert set(MBTI_TYPES) == set(ALL_MBTI_CODES)

    def test_keys_match_codes(self):
        for code, t in MBTI_TYPES.items():
            assert t.code == code

    def test_every_letter_combination_present(self):
        combos = {
            a + b + c + d
            for a in "EI" for b in "SN" for c in "TF" for d in "JP"
        }
        assert combos == set(MBTI_TYPES)

    def test_unique_names(self):
        names = [t.name for t in MBTI_TYPES.values()]
        assert len(names) == len(set(names))


class TestLookupHelpers:
    def test_get_mbti_type_found(self):
        t = get_mbti_type("ENFP")
        assert t is not None
        assert t.name == "The Campaigner"

    def test_get_mbti_type_not_found(self):
        assert get_mbti_type("ABCD") is None

    def test_require_mbti_type_raises(self):
        with pytest.raises(UnknownTypeCodeError):
            require_mbti_type("ABCD")

    def test_is_valid_code(self):
        assert is_valid_mbti_code("ISTJ")
        assert not is_valid_mbti_code("istj")

    def test_all_codes(self):
        assert sorted(get_all_mbti_codes()) == sorted(ALL_MBTI_CODES)

    def test_travel_recommendations(self):
        style = get_travel_recommendations("ISTJ")
        assert style is not None
        assert style.planning_style == "Detailed and traditional planning approach"
        assert get_travel_recommendations("nope") is None
