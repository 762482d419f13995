"""Application settings read from environment variables.

The Streamlit entry script loads ``.env`` via ``load_dotenv()`` before calling
:func:`load_settings`.
"""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict

from mbti_travel.personality_types import DEFAULT_TYPE_CODE, MBTICode, is_valid_mbti_code


logger = logging.getLogger(__name__)

_DEFAULT_SHARE_BASE_URL = "http://localhost:8501"
_DEFAULT_STATE_PATH = "mbti_test_state.json"
_DEFAULT_LOG_LEVEL = "INFO"


class AppSettings(BaseModel):
    """Runtime configuration for the quiz app."""

    model_config = ConfigDict(frozen=True)

    share_base_url: str = _DEFAULT_SHARE_BASE_URL
    state_path: str = _DEFAULT_STATE_PATH
    default_type_code: MBTICode = DEFAULT_TYPE_CODE
    log_level: str = _DEFAULT_LOG_LEVEL


def load_settings() -> AppSettings:
    """Build settings from MBTI_* environment variables.

    An invalid MBTI_DEFAULT_TYPE is ignored with a warning.
    """
    share_base_url = os.getenv("MBTI_SHARE_BASE_URL", "") or _DEFAULT_SHARE_BASE_URL
    state_path = os.getenv("MBTI_STATE_PATH", "") or _DEFAULT_STATE_PATH
    log_level = (os.getenv("MBTI_LOG_LEVEL", "") or _DEFAULT_LOG_LEVEL).upper()

    default_type = os.getenv("MBTI_DEFAULT_TYPE", "").strip().upper()
    if default_type and not is_valid_mbti_code(default_type):
        logger.warning("MBTI_DEFAULT_TYPE=%s is not a known type, using %s", default_type, DEFAULT_TYPE_CODE)
        default_type = ""

    return AppSettings(
        share_base_url=share_base_url.rstrip("/"),
        state_path=state_path,
        default_type_code=default_type or DEFAULT_TYPE_CODE,
        log_level=log_level,
    )
