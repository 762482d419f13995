"""Tests for mbti_travel/engine/validation.py."""

import logging

from mbti_travel.engine.validation import (
    MIN_COMPLETENESS,
    AnswerValidation,
    IncompleteTestError,
    ensure_can_finalize,
    validate_answers,
)
from mbti_travel.personality_types import UserAnswer
from mbti_travel.questions import QUESTIONS
import pytest


def _first_options(count: int) -> list[UserAnswer]:
    return [UserAnswer.from_selection(q, q.answers[0]) for q in QUESTIONS[:count]]


def _covering_answers(count: int) -> list[UserAnswer]:
    """*count* answers spread over the catalog so every pole is seen."""
    answers = []
    for i, q in enumerate(QUESTIONS[:count]):
        option = q.answers[0] if i % 2 == 0 else q.answers[-1]
        answers.append(UserAnswer.from_selection(q, option))
    return answers


class TestCompleteness:
    def test_empty_answers(self):
        report = validate_answers([])
        assert report.is_valid is False
        assert report.issues == ["No answers provided"]
        assert report.completeness == 0

    def test_twelve_of_eighteen_rounds_to_67(self):
        report = validate_answers(_first_options(12))
        assert report.completeness == 67
        assert report.is_valid is False

    def test_thirteen_of_eighteen_rounds_to_72(self):
        assert validate_answers(_first_options(13)).completeness == 72

    def test_all_answered(self):
        assert validate_answers(_first_options(18)).completeness == 100

    def test_custom_total(self):
        report = validate_answers(_first_options(1), total_questions=2)
        assert report.completeness == 50

    def test_zero_total_questions(self):
        assert validate_answers(_first_options(1), total_questions=0).completeness == 0


class TestPoleCoverage:
    def test_missing_poles_listed(self):
        # first options only carry E, S, T and J
        report = validate_answers(_first_options(18))
        assert "Missing dimensions: I, N, F, P" in report.issues
        assert report.is_valid is False

    def test_full_coverage_is_valid(self):
        answers = [UserAnswer.from_selection(q, q.answers[0]) for q in QUESTIONS]
        answers += [
            UserAnswer(question_id=f"x{p}", answer_id=f"x{p}a", value=0, pole=p)
            for p in "INFP"
        ]
        report = validate_answers(answers, total_questions=len(answers))
        assert report.issues == []
        assert report.is_valid is True


class TestValueRange:
    @pytest.mark.parametrize("bad_value", [3, -2.5, "2", None, True, float("nan")])
    def test_invalid_values_counted(self, bad_value):
        answers = [
            {"question_id": "q1", "answer_id": "q1a1", "value": bad_value, "pole": "E"},
            {"question_id": "q2", "answer_id": "q2a1", "value": 2, "pole": "E"},
        ]
        report = validate_answers(answers)
        assert "1 answers have invalid values" in report.issues

    def test_boundary_values_accepted(self):
        answers = [
            {"question_id": "q1", "answer_id": "q1a1", "value": 2, "pole": "E"},
            {"question_id": "q2", "answer_id": "q2a3", "value": -2, "pole": "I"},
            {"question_id": "q3", "answer_id": "q3a2", "value": 0.0, "pole": "E"},
        ]
        report = validate_answers(answers)
        assert not any("invalid values" in issue for issue in report.issues)


class TestCatalogChecks:
    def test_pole_outside_question_dimension(self):
        answers = [UserAnswer(question_id="q1", answer_id="q1a1", value=2, pole="S")]
        report = validate_answers(answers, questions=QUESTIONS)
        assert any("outside dimension EI" in issue for issue in report.issues)

    def test_unknown_question(self):
        answers = [UserAnswer(question_id="q99", answer_id="q99a1", value=2, pole="E")]
        report = validate_answers(answers, questions=QUESTIONS)
        assert "Answer refers to unknown question 'q99'" in report.issues

    def test_unknown_pole_in_mapping(self):
        answers = [{"question_id": "q1", "answer_id": "q1a1", "value": 2, "pole": "X"}]
        report = validate_answers(answers, questions=QUESTIONS)
        assert any("unknown pole" in issue for issue in report.issues)

    def test_catalog_answers_pass(self):
        report = validate_answers(_covering_answers(18), questions=QUESTIONS)
        assert not any("outside dimension" in issue for issue in report.issues)


class TestEnsureCanFinalize:
    def test_incomplete_raises(self):
        report = validate_answers(_first_options(12))
        with pytest.raises(IncompleteTestError, match="67% completed") as exc_info:
            ensure_can_finalize(report)
        assert exc_info.value.completeness == 67
        assert exc_info.value.issues == report.issues

    def test_incomplete_is_value_error(self):
        with pytest.raises(ValueError):
            ensure_can_finalize(AnswerValidation(is_valid=False, issues=[], completeness=10))

    def test_issues_above_threshold_only_logged(self, caplog):
        report = validate_answers(_first_options(18))
        assert report.issues
        with caplog.at_level(logging.WARNING):
            ensure_can_finalize(report)
        assert "Test validation failed" in caplog.text

    def test_exact_threshold_passes(self):
        ensure_can_finalize(AnswerValidation(is_valid=False, issues=["x"], completeness=MIN_COMPLETENESS))

    def test_valid_report_passes(self):
        ensure_can_finalize(AnswerValidation(is_valid=True, completeness=100))
