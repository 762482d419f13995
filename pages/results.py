"""🧳 Travel style result (Streamlit page).

Shows the session result, or a shared result when opened with ``?type=``.
"""

from __future__ import annotations

import logging

from mbti_travel.engine.scoring import MBTIResult
from mbti_travel.personality_types import get_mbti_type
from mbti_travel.settings import load_settings
from mbti_travel.share import (
    InvalidShareLinkError,
    create_share_data,
    format_clipboard_text,
    parse_shared_type,
    shared_result,
)
import plotly.graph_objects as go  # type: ignore[import-untyped]
import streamlit as st


logger = logging.getLogger(__name__)

SETTINGS = load_settings()

st.set_page_config(page_title="Your Travel Style", page_icon="🧳", layout="centered")

_DIMENSION_LABELS = {
    "EI": "Extraversion ↔ Introversion",
    "SN": "Sensing ↔ iNtuition",
    "TF": "Thinking ↔ Feeling",
    "JP": "Judging ↔ Perceiving",
}


# ---------------------------------------------------------------------------
# Load result
# ---------------------------------------------------------------------------
def _load_result() -> tuple[MBTIResult | None, bool]:
    shared_code = st.query_params.get("type")
    if shared_code:
        try:
            code = parse_shared_type(f"type={shared_code}")
        except InvalidShareLinkError as e:
            logger.warning("Rejected shared link: %s", e)
            st.error("Invalid MBTI type code in shared link.")
            return None, True
        return shared_result(code), True
    return st.session_state.get("quiz_result"), False


result, is_shared = _load_result()
if result is None:
    if not is_shared:
        st.info("No result yet. Take the test first!")
    if st.button("✈️ Take the test", use_container_width=True):
        st.switch_page("app.py")
    st.stop()

mbti_type = get_mbti_type(result.type_code)
if mbti_type is None:
    st.error("Failed to load test results. Please retake the test.")
    st.stop()


# ---------------------------------------------------------------------------
# Type summary
# ---------------------------------------------------------------------------
st.title(f"{mbti_type.code} · {mbti_type.name}")
if is_shared:
    st.caption("Shared result")
st.write(mbti_type.description)
st.metric("Confidence", f"{result.confidence}%")
st.markdown(" ".join(f"`{c}`" for c in mbti_type.characteristics))


# ---------------------------------------------------------------------------
# Dimension breakdown
# ---------------------------------------------------------------------------
if result.dimension_scores:
    st.subheader("📊 Your dimensions")
    fig = go.Figure(go.Bar(
        x=[ds.score for ds in result.dimension_scores],
        y=[_DIMENSION_LABELS[ds.dimension] for ds in result.dimension_scores],
        orientation="h",
        text=[f"{ds.preference} · {ds.strength}" for ds in result.dimension_scores],
        textposition="outside",
        marker_color=["#3498DB" if ds.score >= 0 else "#E67E22" for ds in result.dimension_scores],
    ))
    fig.update_layout(xaxis_range=[-2.5, 2.5], height=320)
    st.plotly_chart(fig, use_container_width=True)


# ---------------------------------------------------------------------------
# Travel recommendations
# ---------------------------------------------------------------------------
style = mbti_type.travel_style
st.subheader("🗺️ Your travel style")
c1, c2 = st.columns(2)
with c1:
    st.markdown("**Preferences**\n\n" + "\n".join(f"- {p}" for p in style.preferences))
    st.markdown("**Destinations**\n\n" + "\n".join(f"- {d}" for d in style.destinations))
    st.markdown("**Companions**\n\n" + "\n".join(f"- {c}" for c in style.travel_companions))
with c2:
    st.markdown("**Activities**\n\n" + "\n".join(f"- {a}" for a in style.activities))
    st.markdown(f"**Planning:** {style.planning_style}")
    st.markdown(f"**Budget:** {style.budget_approach}")
    st.markdown(f"**Stay:** {style.accommodation_style}")


# ---------------------------------------------------------------------------
# Share
# ---------------------------------------------------------------------------
st.subheader("📤 Share")
share = create_share_data(mbti_type, base_url=SETTINGS.share_base_url)
st.code(format_clipboard_text(share), language=None)

if st.button("🔄 Retake the test", use_container_width=True):
    session = st.session_state.get("quiz_session")
    if session is not None:
        session.reset()
    st.session_state.pop("quiz_result", None)
    st.session_state.pop("quiz_started", None)
    st.switch_page("app.py")
