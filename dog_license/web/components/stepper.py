from __future__ import annotations

import streamlit as st

from dog_license.app.wizard import STEPS, WizardState

_MARKERS = {"done": "✅", "active": "🔵", "todo": "⚪"}


def render_progress(state: WizardState) -> None:
    """Step indicator: completed steps ticked, the active one highlighted."""
    cols = st.columns(len(STEPS))
    for i, (col, step, status) in enumerate(zip(cols, STEPS, state.progress())):
        with col:
            number = "✓" if status == "done" else str(i + 1)
            title = f"**{step.title}**" if status == "active" else step.title
            st.markdown(f"{_MARKERS[status]} {number} · {title}")
            st.caption(step.description)
    st.progress(state.current_step / (len(STEPS) - 1))
