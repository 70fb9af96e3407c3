"""
Voice Detection Streamlit UI - main entry point.

Run with: ``streamlit run voicedetect/ui/app.py``

One ``SubmissionController`` is kept per browser session in
``st.session_state``; widgets only call its presentation surface.
"""

# ---------------------------------------------------------------------------
# Ensure project root is on sys.path so ``from voicedetect.xxx`` imports work.
# Streamlit replaces sys.path[0] with the script directory.
# ---------------------------------------------------------------------------
import sys  # noqa: E402
from pathlib import Path  # noqa: E402

_project_root = str(Path(__file__).resolve().parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import asyncio  # noqa: E402
import logging  # noqa: E402

import streamlit as st  # noqa: E402

from voicedetect.core.config import get_settings  # noqa: E402
from voicedetect.core.exceptions import ValidationError  # noqa: E402
from voicedetect.core.models import AudioAsset, Language  # noqa: E402
from voicedetect.services.submission import SubmissionController, create_controller  # noqa: E402
from voicedetect.ui.components.result_card import (  # noqa: E402
    render_placeholder,
    render_result_card,
)

logging.basicConfig(level=get_settings().log_level.upper())
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Page config (must be first Streamlit call)
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="Voice Detection",
    page_icon="\U0001f399️",
    layout="wide",
)


def _get_controller() -> SubmissionController:
    if "controller" not in st.session_state:
        st.session_state.controller = create_controller()
    return st.session_state.controller


def _on_file_change() -> None:
    controller = _get_controller()
    uploaded = st.session_state.get("audio_upload")
    try:
        controller.select_file(AudioAsset.from_upload(uploaded) if uploaded else None)
    except ValidationError as exc:
        controller.select_file(None)
        st.session_state.upload_error = exc.detail
    else:
        st.session_state.upload_error = ""


def _request_submit() -> None:
    st.session_state.submit_requested = True


def _render_language_picker(controller: SubmissionController) -> None:
    with st.container(border=True):
        st.markdown("**Language**")
        st.caption("Select the audio language")
        cols = st.columns(len(Language))
        for col, lang in zip(cols, Language, strict=True):
            with col:
                if st.button(
                    lang.short_name,
                    key=f"lang_{lang.value}",
                    help=lang.full_name,
                    type="primary" if controller.language is lang else "secondary",
                    use_container_width=True,
                ):
                    controller.select_language(lang)
                    st.session_state.upload_error = ""
                    st.rerun()


def _render_uploader() -> None:
    with st.container(border=True):
        st.markdown("**Audio File**")
        st.caption("Upload WAV or MP3 format")
        st.file_uploader(
            "Choose file or drag & drop",
            type=["wav", "mp3"],
            key="audio_upload",
            on_change=_on_file_change,
        )


def main() -> None:
    controller = _get_controller()

    st.title("\U0001f399️ Voice Detection")
    st.caption("Human or AI-generated voice classification")

    left, right = st.columns([2, 3])

    with left:
        _render_language_picker(controller)
        _render_uploader()

        # The click callback runs before this script, so the button below is
        # already rendered disabled while the request runs further down.
        submitting = st.session_state.get("submit_requested", False)
        st.button(
            "Analyze Voice",
            key="analyze",
            type="primary",
            disabled=submitting or controller.is_busy,
            use_container_width=True,
            on_click=_request_submit,
        )
        if submitting:
            with st.spinner("Analyzing..."):
                try:
                    asyncio.run(controller.submit())
                finally:
                    st.session_state.submit_requested = False
            st.rerun()

        error = st.session_state.get("upload_error") or controller.error_message
        if error:
            st.error(error)

    with right:
        if controller.result is not None:
            render_result_card(controller.result)
        else:
            render_placeholder()


main()
