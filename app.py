"""🧳 MBTI Travel Style Quiz

Streamlit entry script: intro screen and the question flow. The results page
lives in ``pages/results.py``.
"""

import logging
import uuid

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

from mbti_travel.engine.validation import MIN_COMPLETENESS, IncompleteTestError
from mbti_travel.quiz_session import QuizSession
from mbti_travel.quiz_state_repository import QuizStateRepository, session_state_path
from mbti_travel.settings import load_settings

SETTINGS = load_settings()

logging.basicConfig(level=SETTINGS.log_level)
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="MBTI Travel Style", page_icon="🧳", layout="centered")


# ---------------------------------------------------------------------------
# Session-state helpers
# ---------------------------------------------------------------------------
def _get_session() -> QuizSession:
    if "quiz_session_key" not in st.session_state:
        st.session_state.quiz_session_key = uuid.uuid4().hex
    if "quiz_session" not in st.session_state:
        state_path = session_state_path(SETTINGS.state_path, st.session_state.quiz_session_key)
        st.session_state.quiz_session = QuizSession(
            repository=QuizStateRepository(state_path),
            default_type_code=SETTINGS.default_type_code,
        )
    session: QuizSession = st.session_state.quiz_session
    return session


def _submit(session: QuizSession) -> None:
    try:
        result, mbti_type = session.calculate_result()
    except IncompleteTestError as e:
        st.session_state.quiz_error = (
            f"Test incomplete: {e.completeness}% answered. "
            f"Please answer at least {MIN_COMPLETENESS}% of the questions to see your travel style."
        )
        return
    st.session_state.quiz_result = result
    st.session_state.pop("quiz_error", None)
    logger.info("Showing result %s (%s)", result.type_code, mbti_type.name)
    st.switch_page("pages/results.py")


# ---------------------------------------------------------------------------
# Intro
# ---------------------------------------------------------------------------
session = _get_session()

st.title("🧳 Discover Your Travel Personality")
st.caption(
    f"{len(session.questions)} quick questions about how you like to travel. "
    "Your answers map to one of 16 MBTI travel styles."
)

if not st.session_state.get("quiz_started") and not session.answers:
    if st.button("✈️ Start the test", type="primary", use_container_width=True):
        st.session_state.quiz_started = True
        st.rerun()
    st.stop()


# ---------------------------------------------------------------------------
# Question flow
# ---------------------------------------------------------------------------
progress = session.progress
st.progress(
    progress.progress_percentage / 100,
    text=f"Question {progress.current_question} of {progress.total_questions} "
    f"· {progress.answered_questions} answered",
)

question = session.current_question
if question is None:
    st.error("No question available.")
    st.stop()

st.subheader(question.text)
selected = session.selected_answer_id(question.id)
for answer in question.answers:
    is_selected = answer.id == selected
    if st.button(
        f"{'✅ ' if is_selected else ''}{answer.text}",
        key=f"answer_{answer.id}",
        use_container_width=True,
        type="primary" if is_selected else "secondary",
    ):
        session.answer_question(answer.id)
        st.rerun()

st.divider()
nav1, nav2, nav3 = st.columns(3)
with nav1:
    if st.button("⬅️ Previous", disabled=not session.can_go_back, use_container_width=True):
        session.go_to_previous_question()
        st.rerun()
with nav2:
    if st.button("Next ➡️", disabled=not session.can_go_forward, use_container_width=True):
        session.go_to_next_question()
        st.rerun()
with nav3:
    if st.button("🔄 Restart", use_container_width=True):
        session.reset()
        st.session_state.pop("quiz_result", None)
        st.session_state.pop("quiz_error", None)
        st.rerun()

if session.is_last_question or session.completion_percentage >= MIN_COMPLETENESS:
    if st.button("🎯 See my travel style", type="primary", use_container_width=True):
        _submit(session)

if "quiz_error" in st.session_state:
    st.warning(st.session_state.quiz_error)
