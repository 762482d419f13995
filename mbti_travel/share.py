"""Result sharing: share links, share text and resolving shared links.

A share link carries only the type code (``/results?type=ENFP``); opening it
resolves to the same descriptive content as looking the code up directly.
"""

from __future__ import annotations

from collections.abc import Callable
import re
from urllib.parse import parse_qs, quote, urlsplit

from pydantic import BaseModel

from mbti_travel.engine.scoring import MBTIResult, MBTIScores
from mbti_travel.personality_types import MBTICode, MBTIType, get_mbti_type, require_mbti_type


# (key, fallback) → translated string
TranslationFunction = Callable[[str, str], str]

RESULTS_PATH = "/results"
SHARED_RESULT_CONFIDENCE = 85

_DEFAULT_BASE_URL = "http://localhost:8501"
_TEMPLATE_RE = re.compile(r"\{\{(\w+)\}\}")

_SHARE_TEXT_TEMPLATE = (
    "🧳 I'm a {{code}} ({{name}}) traveler! Discover your MBTI travel style "
    "and find out what kind of adventurer you are! ✈️"
)
_SHARE_TITLE_TEMPLATE = "MBTI Travel Style: {{code}} - {{name}}"


class InvalidShareLinkError(ValueError):
    """A shared link has no type parameter or an unknown type code."""


class ShareData(BaseModel):
    """Everything a sharing target needs."""

    title: str
    text: str
    url: str
    personality_type: str
    travel_style: str


# ---------------------------------------------------------------------------
# Text helpers
# ---------------------------------------------------------------------------
def replace_template(template: str, variables: dict[str, str]) -> str:
    """Substitute ``{{key}}`` placeholders; unknown keys are left as-is."""
    return _TEMPLATE_RE.sub(lambda m: variables.get(m.group(1)) or m.group(0), template)


def _type_name(mbti_type: MBTIType, translate: TranslationFunction | None) -> str:
    if translate is None:
        return mbti_type.name
    return translate(f"questions.mbtiTypes.{mbti_type.code}.name", mbti_type.name)


def generate_share_text(mbti_type: MBTIType, translate: TranslationFunction | None = None) -> str:
    template = _SHARE_TEXT_TEMPLATE
    if translate is not None:
        template = translate("share.data.text", _SHARE_TEXT_TEMPLATE)
    return replace_template(template, {"code": mbti_type.code, "name": _type_name(mbti_type, translate)})


def generate_share_title(mbti_type: MBTIType, translate: TranslationFunction | None = None) -> str:
    template = _SHARE_TITLE_TEMPLATE
    if translate is not None:
        template = translate("share.data.title", _SHARE_TITLE_TEMPLATE)
    return replace_template(template, {"code": mbti_type.code, "name": _type_name(mbti_type, translate)})


# ---------------------------------------------------------------------------
# Links
# ---------------------------------------------------------------------------
def create_shareable_url(type_code: str, base_url: str | None = None) -> str:
    """Build ``<base>/results?type=<code>``."""
    base = (base_url or _DEFAULT_BASE_URL).rstrip("/")
    return f"{base}{RESULTS_PATH}?type={quote(type_code, safe='')}"


def parse_shared_type(url_or_query: str) -> MBTICode:
    """Extract and check the type code from a share URL or query string.

    Raises:
        InvalidShareLinkError: Missing ``type`` parameter or unknown code.
    """
    query = urlsplit(url_or_query).query if "?" in url_or_query else url_or_query.lstrip("?")
    values = parse_qs(query).get("type")
    if not values or not values[0].strip():
        raise InvalidShareLinkError("Shared link has no type parameter")

    code = values[0].strip()
    mbti_type = get_mbti_type(code)
    if mbti_type is None:
        raise InvalidShareLinkError(f"Invalid MBTI type code in shared link: {code!r}")
    return mbti_type.code


def resolve_shared_type(url_or_query: str) -> MBTIType:
    """Descriptive content for a share link."""
    return require_mbti_type(parse_shared_type(url_or_query))


def shared_result(type_code: MBTICode) -> MBTIResult:
    """Placeholder result for a type opened from a share link.

    Scores are not part of the link, so they are zero and the dimension
    breakdown is empty.
    """
    return MBTIResult(
        type_code=type_code,
        scores=MBTIScores(),
        confidence=SHARED_RESULT_CONFIDENCE,
        dimension_scores=[],
    )


# ---------------------------------------------------------------------------
# Share payload
# ---------------------------------------------------------------------------
def create_share_data(
    mbti_type: MBTIType,
    translate: TranslationFunction | None = None,
    base_url: str | None = None,
) -> ShareData:
    return ShareData(
        title=generate_share_title(mbti_type, translate),
        text=generate_share_text(mbti_type, translate),
        url=create_shareable_url(mbti_type.code, base_url),
        personality_type=mbti_type.code,
        travel_style=mbti_type.travel_style.planning_style,
    )


def format_clipboard_text(share_data: ShareData) -> str:
    """Text copied to the clipboard: share text followed by the link."""
    return f"{share_data.text}\n\n{share_data.url}"


def validate_share_data(share_data: ShareData) -> bool:
    return bool(
        share_data.title
        and share_data.text
        and share_data.url
        and share_data.personality_type
    )
