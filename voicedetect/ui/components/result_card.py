"""
Result card display components.
"""

from typing import Any

import streamlit as st

from voicedetect.core.models import ClassificationResult

AI_GENERATED = "AI_GENERATED"


def classification_label(result: ClassificationResult) -> str:
    """Human-readable verdict: "AI Generated" or "Human Voice"."""
    return "AI Generated" if result.classification == AI_GENERATED else "Human Voice"


def classification_icon(result: ClassificationResult) -> str:
    return "\U0001f916" if result.classification == AI_GENERATED else "\U0001f464"


def _as_score(value: Any) -> float | None:
    """The confidence as a float, or None when the service sent something else."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    return float(value)


def format_confidence(score: Any) -> str:
    """Format a [0, 1] confidence as a percentage with one decimal (0.87 -> "87.0%").

    Missing or non-numeric scores render as "N/A".
    """
    score = _as_score(score)
    if score is None:
        return "N/A"
    return f"{score * 100:.1f}%"


def render_result_card(result: ClassificationResult) -> None:
    """Render the verdict, confidence, detected language and explanation."""
    with st.container(border=True):
        col1, col2 = st.columns([4, 1])
        with col1:
            st.markdown("**Classification Result**")
        with col2:
            if result.is_verdict:
                st.badge("Success", icon=":material/check:", color="green")

        st.markdown(f"### {classification_icon(result)} {classification_label(result)}")
        st.caption("Voice classification complete")

    col_conf, col_lang = st.columns(2)
    with col_conf:
        with st.container(border=True):
            st.markdown("**Confidence Score**")
            st.metric("Certainty", format_confidence(result.confidence_score))
            score = _as_score(result.confidence_score)
            if score is not None:
                st.progress(min(max(score, 0.0), 1.0))
    with col_lang:
        with st.container(border=True):
            st.markdown("**Detected Language**")
            st.metric("Primary language", str(result.language or "unknown").capitalize())

    with st.container(border=True):
        st.markdown("**Analysis Explanation**")
        st.info(str(result.explanation or ""))


def render_placeholder() -> None:
    """Empty state shown before the first result arrives."""
    with st.container(border=True):
        st.markdown("### \U0001f399️ Ready to Analyze")
        st.caption(
            "Upload an audio file and select a language to begin voice detection analysis"
        )
