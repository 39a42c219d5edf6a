from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import streamlit as st

from dog_license.app.wizard import WizardState

WIZARD_KEY = "wizard_state"
TOAST_QUEUE_KEY = "_queued_toasts"
TRACK_PREFILL_KEY = "track_prefill"


def ensure_defaults(defaults: Dict[str, Any]) -> None:
    """Ensure session_state has default values for keys."""
    for k, v in defaults.items():
        if k not in st.session_state:
            st.session_state[k] = v


def get_wizard_state() -> WizardState:
    ensure_defaults({WIZARD_KEY: WizardState()})
    return st.session_state[WIZARD_KEY]


def queue_toast(message: str, icon: Optional[str] = None) -> None:
    """Show ``message`` as a toast on the next run (survives ``st.rerun``)."""
    queue: List[Tuple[str, Optional[str]]] = st.session_state.setdefault(TOAST_QUEUE_KEY, [])
    queue.append((message, icon))


def show_queued_toasts() -> None:
    for message, icon in st.session_state.pop(TOAST_QUEUE_KEY, []):
        st.toast(message, icon=icon)


def set_track_prefill(tracking_number: str) -> None:
    """Hand a tracking number to the tracking page across ``st.switch_page``."""
    st.session_state[TRACK_PREFILL_KEY] = tracking_number


def pop_track_prefill() -> Optional[str]:
    return st.session_state.pop(TRACK_PREFILL_KEY, None)
