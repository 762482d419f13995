"""Repository for quiz session persistence (JSON file)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
import threading

from pydantic import ValidationError

from mbti_travel.session_models import STATE_SCHEMA_VERSION, QuizState


logger = logging.getLogger(__name__)

_DEFAULT_PATH = "mbti_test_state.json"


class QuizStateError(ValueError):
    """Stored quiz state is unreadable or uses an unsupported schema."""


def session_state_path(base_path: str, session_key: str) -> Path:
    """Per-session state file: ``mbti_test_state.json`` becomes
    ``mbti_test_state_<key>.json``."""
    if not session_key or not session_key.isalnum():
        raise ValueError(f"Invalid session key: {session_key!r}")
    base = Path(base_path)
    return base.with_stem(f"{base.stem}_{session_key}")


class QuizStateRepository:
    """Thread-safe persistence layer for QuizState."""

    def __init__(self, state_path: str | Path = _DEFAULT_PATH) -> None:
        self._path = Path(state_path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def save_state(self, state: QuizState) -> None:
        """Persist *state* to JSON file (atomic write)."""
        with self._lock:
            self._atomic_write(state)
        logger.debug("Quiz state saved: %s", self._path)

    def load_state(self) -> QuizState | None:
        """Load from JSON. Returns ``None`` when no file exists."""
        with self._lock:
            if not self._path.exists():
                return None
            try:
                with open(self._path, encoding="utf-8") as fh:
                    data = json.load(fh)
            except (OSError, json.JSONDecodeError) as exc:
                raise QuizStateError(f"Failed to load quiz state: {exc}") from exc

        if not isinstance(data, dict):
            raise QuizStateError("Failed to load quiz state: expected a JSON object")
        version = data.get("schema_version")
        if version != STATE_SCHEMA_VERSION:
            raise QuizStateError(
                f"Unsupported quiz state schema version {version!r} (expected {STATE_SCHEMA_VERSION})"
            )
        try:
            return QuizState.model_validate(data)
        except ValidationError as exc:
            raise QuizStateError(f"Failed to load quiz state: {exc}") from exc

    def delete_state(self) -> None:
        """Remove the state file if it exists."""
        with self._lock:
            if self._path.exists():
                self._path.unlink()
                logger.info("Quiz state deleted: %s", self._path)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _atomic_write(self, state: QuizState) -> None:
        tmp = self._path.with_suffix(".tmp")
        try:
            with open(tmp, "w", encoding="utf-8") as fh:
                json.dump(state.model_dump(mode="json"), fh, indent=2, ensure_ascii=False)
            tmp.replace(self._path)
        except Exception as exc:
            if tmp.exists():
                tmp.unlink()
            raise QuizStateError(f"Failed to save quiz state: {exc}") from exc
