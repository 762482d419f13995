"""Tests for mbti_travel/quiz_state_repository.py."""

import json
from pathlib import Path

from mbti_travel.personality_types import UserAnswer
from mbti_travel.quiz_state_repository import QuizStateError, QuizStateRepository, session_state_path
from mbti_travel.session_models import STATE_SCHEMA_VERSION, QuizState
import pytest


@pytest.fixture
def repo(tmp_path):
    """Create a repository pointing at a temp directory."""
    return QuizStateRepository(state_path=str(tmp_path / "quiz_state.json"))


@pytest.fixture
def sample_state():
    return QuizState(
        current_question_index=2,
        answers=[
            UserAnswer(question_id="q1", answer_id="q1a1", value=2, pole="E"),
            UserAnswer(question_id="q2", answer_id="q2a3", value=-2, pole="I"),
        ],
    )


class TestQuizStateRepository:
    def test_load_nonexistent_returns_none(self, repo):
        assert repo.load_state() is None

    def test_save_and_load(self, repo, sample_state):
        repo.save_state(sample_state)
        loaded = repo.load_state()
        assert loaded is not None
        assert loaded.current_question_index == 2
        assert [a.answer_id for a in loaded.answers] == ["q1a1", "q2a3"]
        assert loaded.started_at == sample_state.started_at

    def test_save_creates_json_file(self, repo, sample_state):
        repo.save_state(sample_state)
        assert repo.path.exists()
        with open(repo.path) as f:
            data = json.load(f)
        assert data["schema_version"] == STATE_SCHEMA_VERSION
        assert data["answers"][0]["pole"] == "E"

    def test_no_tmp_file_left_behind(self, repo, sample_state):
        repo.save_state(sample_state)
        assert not repo.path.with_suffix(".tmp").exists()

    def test_overwrite_state(self, repo, sample_state):
        repo.save_state(sample_state)
        repo.save_state(QuizState(is_completed=True, result_code="INFJ"))
        loaded = repo.load_state()
        assert loaded.is_completed is True
        assert loaded.result_code == "INFJ"
        assert loaded.answers == []

    def test_delete_state(self, repo, sample_state):
        repo.save_state(sample_state)
        repo.delete_state()
        assert not Path(repo.path).exists()

    def test_delete_nonexistent_no_error(self, repo):
        repo.delete_state()  # should not raise


class TestCorruptState:
    def test_invalid_json_raises(self, repo):
        repo.path.write_text("{not json", encoding="utf-8")
        with pytest.raises(QuizStateError, match="Failed to load"):
            repo.load_state()

    def test_non_object_raises(self, repo):
        repo.path.write_text("[1, 2, 3]", encoding="utf-8")
        with pytest.raises(QuizStateError, match="expected a JSON object"):
            repo.load_state()

    def test_wrong_schema_version_raises(self, repo):
        repo.path.write_text(json.dumps({"schema_version": 99}), encoding="utf-8")
        with pytest.raises(QuizStateError, match="Unsupported quiz state schema version"):
            repo.load_state()

    def test_missing_schema_version_raises(self, repo):
        repo.path.write_text(json.dumps({"current_question_index": 0}), encoding="utf-8")
        with pytest.raises(QuizStateError, match="schema version"):
            repo.load_state()

    def test_invalid_answer_raises(self, repo):
        payload = {
            "schema_version": STATE_SCHEMA_VERSION,
            "answers": [{"question_id": "q1", "answer_id": "q1a1", "value": 2, "pole": "X"}],
        }
        repo.path.write_text(json.dumps(payload), encoding="utf-8")
        with pytest.raises(QuizStateError, match="Failed to load"):
            repo.load_state()

    def test_error_is_value_error(self, repo):
        repo.path.write_text("oops", encoding="utf-8")
        with pytest.raises(ValueError):
            repo.load_state()


class TestSessionStatePath:
    def test_key_added_to_stem(self, tmp_path):
        path = session_state_path(str(tmp_path / "mbti_test_state.json"), "abc123")
        assert path == tmp_path / "mbti_test_state_abc123.json"

    def test_distinct_keys_distinct_files(self):
        assert session_state_path("state.json", "a1") != session_state_path("state.json", "b2")

    @pytest.mark.parametrize("key", ["", "../etc", "a/b"])
    def test_invalid_key_rejected(self, key):
        with pytest.raises(ValueError, match="Invalid session key"):
            session_state_path("state.json", key)
