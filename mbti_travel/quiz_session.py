"""Quiz session: question navigation, answer collection, result calculation
and persistence.

The session holds exactly one answer per question. Results are always
recomputed from the full answer list.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
import logging

from mbti_travel.engine.scoring import MBTIResult, process_test, round_half_up
from mbti_travel.engine.validation import AnswerValidation, ensure_can_finalize, validate_answers
from mbti_travel.personality_types import (
    DEFAULT_TYPE_CODE,
    MBTICode,
    MBTIType,
    Question,
    UserAnswer,
    require_mbti_type,
)
from mbti_travel.questions import QUESTIONS
from mbti_travel.quiz_state_repository import QuizStateError, QuizStateRepository
from mbti_travel.session_models import QuizProgress, QuizState


logger = logging.getLogger(__name__)


class QuizSession:
    """Stateful driver for one quiz run."""

    def __init__(
        self,
        questions: Sequence[Question] = QUESTIONS,
        repository: QuizStateRepository | None = None,
        default_type_code: MBTICode = DEFAULT_TYPE_CODE,
    ) -> None:
        if not questions:
            raise ValueError("A quiz needs at least one question")
        self._questions = tuple(questions)
        self._repository = repository
        self._default_type_code = default_type_code
        self._state = QuizState()
        if repository is not None:
            self.load_progress()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def state(self) -> QuizState:
        return self._state

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    @property
    def answers(self) -> list[UserAnswer]:
        return list(self._state.answers)

    @property
    def current_question(self) -> Question | None:
        idx = self._state.current_question_index
        return self._questions[idx] if idx < len(self._questions) else None

    @property
    def progress(self) -> QuizProgress:
        return QuizProgress(
            current_question=self._state.current_question_index + 1,
            total_questions=len(self._questions),
            answered_questions=len(self._state.answers),
            progress_percentage=self.completion_percentage,
        )

    @property
    def completion_percentage(self) -> int:
        return round_half_up(len(self._state.answers) / len(self._questions) * 100)

    @property
    def can_go_back(self) -> bool:
        return self._state.current_question_index > 0

    @property
    def can_go_forward(self) -> bool:
        return self._state.current_question_index < len(self._questions) - 1

    @property
    def is_last_question(self) -> bool:
        return self._state.current_question_index == len(self._questions) - 1

    @property
    def has_answered_current_question(self) -> bool:
        question = self.current_question
        return question is not None and self.selected_answer_id(question.id) is not None

    def selected_answer_id(self, question_id: str) -> str | None:
        return next(
            (a.answer_id for a in self._state.answers if a.question_id == question_id),
            None,
        )

    # ------------------------------------------------------------------
    # Answering
    # ------------------------------------------------------------------
    def answer_question(self, answer_id: str, question_id: str | None = None) -> bool:
        """Record *answer_id* for the current (or given) question.

        Any earlier answer to the same question is replaced. Answering the
        current question advances to the next one unless it is the last.

        Returns:
            ``True`` if the answer was recorded.
        """
        question = self.current_question if question_id is None else self._find_question(question_id)
        if question is None:
            logger.warning("Question not found: %s", question_id)
            return False

        selected = question.get_answer(answer_id)
        if selected is None:
            logger.warning("Selected answer not found: %s", answer_id)
            return False

        answers = [a for a in self._state.answers if a.question_id != question.id]
        answers.append(UserAnswer.from_selection(question, selected))
        # a changed answer set invalidates any earlier result
        self._state = self._state.model_copy(update={
            "answers": answers,
            "is_completed": False,
            "result_code": None,
            "completed_at": None,
        })

        if question_id is None and not self.is_last_question:
            self.go_to_next_question()
        else:
            self.save_progress()
        return True

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def go_to_previous_question(self) -> None:
        self._set_index(max(0, self._state.current_question_index - 1))

    def go_to_next_question(self) -> None:
        self._set_index(min(len(self._questions) - 1, self._state.current_question_index + 1))

    def go_to_question(self, index: int) -> None:
        """Jump to *index*; out-of-range indices are ignored."""
        if 0 <= index < len(self._questions):
            self._set_index(index)

    # ------------------------------------------------------------------
    # Result
    # ------------------------------------------------------------------
    def validate(self) -> AnswerValidation:
        return validate_answers(
            self._state.answers,
            total_questions=len(self._questions),
            questions=self._questions,
        )

    def calculate_result(self) -> tuple[MBTIResult, MBTIType]:
        """Score the quiz and mark it completed.

        Raises:
            IncompleteTestError: Fewer than 70% of questions answered.
            UnknownTypeCodeError: The resolved code has no descriptive entry.
        """
        ensure_can_finalize(self.validate())

        result = process_test(self._state.answers, default_code=self._default_type_code)
        mbti_type = require_mbti_type(result.type_code)

        self._state = self._state.model_copy(update={
            "is_completed": True,
            "result_code": result.type_code,
            "completed_at": datetime.now(timezone.utc),
        })
        self.save_progress()
        logger.info("Quiz result: %s (confidence %d%%)", result.type_code, result.confidence)
        return result, mbti_type

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Start over and drop any stored state."""
        self._state = QuizState()
        if self._repository is None:
            return
        try:
            self._repository.delete_state()
        except OSError:
            logger.warning("Failed to clear stored quiz state", exc_info=True)

    def save_progress(self) -> None:
        if self._repository is None:
            return
        try:
            self._repository.save_state(self._state)
        except QuizStateError as e:
            logger.warning("Failed to save quiz progress: %s", e)

    def load_progress(self) -> None:
        """Replace the in-memory state with the stored one, if any."""
        if self._repository is None:
            return
        try:
            stored = self._repository.load_state()
        except QuizStateError as e:
            logger.warning("Failed to load quiz progress: %s", e)
            return
        if stored is None:
            return
        index = min(stored.current_question_index, len(self._questions) - 1)
        answers = self._one_answer_per_question(stored.answers)
        update: dict = {"current_question_index": index, "answers": answers}
        if len(answers) != len(stored.answers):
            update.update(is_completed=False, result_code=None, completed_at=None)
        self._state = stored.model_copy(update=update)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _one_answer_per_question(self, answers: list[UserAnswer]) -> list[UserAnswer]:
        """Keep the last answer per known question, in first-answered order."""
        known = {q.id for q in self._questions}
        latest: dict[str, UserAnswer] = {}
        for answer in answers:
            if answer.question_id in known:
                latest[answer.question_id] = answer
        dropped = len(answers) - len(latest)
        if dropped:
            logger.warning("Dropped %d duplicate or unknown stored answers", dropped)
        return list(latest.values())

    def _find_question(self, question_id: str) -> Question | None:
        return next((q for q in self._questions if q.id == question_id), None)

    def _set_index(self, index: int) -> None:
        if index == self._state.current_question_index:
            return
        self._state = self._state.model_copy(update={"current_question_index": index})
        self.save_progress()
