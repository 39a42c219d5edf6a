from __future__ import annotations

import time

import streamlit as st

from dog_license.app.services import LookupResult, build_application_service
from dog_license.config import Settings
from dog_license.web.components.record_view import render_help, render_not_found, render_record
from dog_license.web.framework.state import ensure_defaults, pop_track_prefill

RESULT_KEY = "track_result"
INPUT_KEY = "track_input"
AUTO_ID_KEY = "track_auto_id"
QUERY_PARAM = "id"


def _search(tracking_number: str, settings: Settings) -> None:
    """Run a lookup and keep the result in session state. Blank input is a no-op."""
    if not (tracking_number or "").strip():
        return
    service = build_application_service(settings)
    with st.spinner("Searching for your application..."):
        time.sleep(settings.lookup_delay)
        result: LookupResult = service.lookup(tracking_number)
    st.session_state[RESULT_KEY] = result


def render(settings: Settings) -> None:
    ensure_defaults({RESULT_KEY: None, INPUT_KEY: ""})

    st.title("🔍 Track Your Dog License Application")
    st.write("Enter your tracking number to check the status of your application.")

    # ?id=... (or a hand-off from the wizard) pre-fills the box and searches once
    query_id = (st.query_params.get(QUERY_PARAM) or "").strip()
    prefill = pop_track_prefill()
    if prefill and not query_id:
        st.query_params[QUERY_PARAM] = prefill
        query_id = prefill
    if query_id and query_id != st.session_state.get(AUTO_ID_KEY):
        st.session_state[AUTO_ID_KEY] = query_id
        st.session_state[INPUT_KEY] = query_id
        _search(query_id, settings)

    with st.container(border=True):
        st.subheader("Find Your Application")
        st.caption("Enter your unique tracking number below")
        with st.form("track_form", border=False):
            value = st.text_input(
                "Tracking number",
                placeholder="e.g., DOG-1234567890-5678",
                key=INPUT_KEY,
                label_visibility="collapsed",
            )
            clicked = st.form_submit_button("🔍 Track Application", type="primary", use_container_width=True)

    if clicked:
        _search(value, settings)

    result = st.session_state.get(RESULT_KEY)
    if result is None:
        render_help()
    elif result.found:
        render_record(result.record)
    else:
        render_not_found(result.tracking_number)
