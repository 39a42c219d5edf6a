from __future__ import annotations

import time
from datetime import date, timedelta
from typing import Any, Callable, Dict, List, Optional

import streamlit as st

from dog_license.app.services import build_application_service
from dog_license.app.wizard import GENERIC_STEP_ERROR, STEPS, WizardState
from dog_license.config import Settings
from dog_license.domain import DogGender, LicensePeriod, SpayNeuter, calculate_fee, license_label
from dog_license.infra.common import parse_date
from dog_license.infra.logging import get_logger
from dog_license.web.components.fee_table import render_fee_schedule
from dog_license.web.components.stepper import render_progress
from dog_license.web.formatting import format_currency, format_period_option
from dog_license.web.framework.state import (
    get_wizard_state,
    queue_toast,
    set_track_prefill,
    show_queued_toasts,
)

logger = get_logger(__name__)

TRACK_APPLICATION_PAGE = "pages/2_Track_Application.py"
EARLIEST_DATE = date(2000, 1, 1)


# =============================================================================
# Field helpers (widget value -> draft value)
# =============================================================================


def _key(name: str) -> str:
    return f"wiz_{name}"


def _field_error(state: WizardState, name: str) -> None:
    msg = state.errors.get(name)
    if msg:
        st.markdown(f":red[{msg}]")


def _text(state: WizardState, name: str, label: str, placeholder: Optional[str] = None) -> str:
    value = st.text_input(label, value=str(state.draft.get(name) or ""), placeholder=placeholder, key=_key(name))
    _field_error(state, name)
    return value


def _choice(state: WizardState, name: str, label: str, options: List[str]) -> Optional[str]:
    current = state.draft.get(name)
    value = st.radio(
        label,
        options,
        index=options.index(current) if current in options else None,
        format_func=str.capitalize,
        horizontal=True,
        key=_key(name),
    )
    _field_error(state, name)
    return value


def _number(state: WizardState, name: str, label: str) -> Optional[float]:
    current = state.draft.get(name)
    value = st.number_input(
        label,
        min_value=0.0,
        value=float(current) if current is not None else None,
        step=1.0,
        key=_key(name),
    )
    _field_error(state, name)
    return value


def _date(state: WizardState, name: str, label: str) -> Optional[str]:
    value = st.date_input(
        label,
        value=parse_date(state.draft.get(name) or ""),
        min_value=EARLIEST_DATE,
        max_value=date.today() + timedelta(days=365 * 10),
        format="YYYY-MM-DD",
        key=_key(name),
    )
    _field_error(state, name)
    return value.isoformat() if isinstance(value, date) else None


# =============================================================================
# Steps
# =============================================================================


def _owner_step(state: WizardState) -> Dict[str, Any]:
    v: Dict[str, Any] = {}
    c1, c2 = st.columns(2)
    with c1:
        v["owner_first_name"] = _text(state, "owner_first_name", "First Name *")
    with c2:
        v["owner_last_name"] = _text(state, "owner_last_name", "Last Name *")
    v["owner_address"] = _text(state, "owner_address", "Street Address *")
    c1, c2 = st.columns(2)
    with c1:
        v["owner_city"] = _text(state, "owner_city", "City *")
    with c2:
        v["owner_zip_code"] = _text(state, "owner_zip_code", "ZIP Code *", placeholder="12345")
    v["owner_phone"] = _text(state, "owner_phone", "Phone Number *", placeholder="(123) 456-7890")
    v["owner_email"] = _text(state, "owner_email", "Email Address *", placeholder="you@example.com")
    return v


def _dog_step(state: WizardState) -> Dict[str, Any]:
    v: Dict[str, Any] = {}
    v["dog_name"] = _text(state, "dog_name", "Dog's Name *")
    c1, c2 = st.columns(2)
    with c1:
        v["dog_breed"] = _text(state, "dog_breed", "Breed *")
    with c2:
        v["dog_color"] = _text(state, "dog_color", "Primary Color *")
    v["dog_gender"] = _choice(state, "dog_gender", "Gender *", [g.value for g in DogGender])
    c1, c2 = st.columns(2)
    with c1:
        v["dog_age"] = _number(state, "dog_age", "Age (years) *")
    with c2:
        v["dog_weight"] = _number(state, "dog_weight", "Weight (lbs) *")
    v["is_spayed_neutered"] = _choice(
        state, "is_spayed_neutered", "Is the dog spayed/neutered? *", [s.value for s in SpayNeuter]
    )
    return v


def _vaccination_step(state: WizardState) -> Dict[str, Any]:
    st.info("**PA State Requirement:** All dogs must have a current rabies vaccination to obtain a license.")
    v: Dict[str, Any] = {}
    c1, c2 = st.columns(2)
    with c1:
        v["rabies_vaccination_date"] = _date(state, "rabies_vaccination_date", "Rabies Vaccination Date *")
    with c2:
        v["rabies_vaccination_expiry"] = _date(state, "rabies_vaccination_expiry", "Vaccination Expiry Date *")
    v["veterinarian_name"] = _text(state, "veterinarian_name", "Veterinarian's Name *")
    v["veterinarian_address"] = _text(state, "veterinarian_address", "Veterinarian's Address *")
    return v


def _license_step(state: WizardState) -> Dict[str, Any]:
    options = [p.value for p in LicensePeriod]
    current = state.draft.get("license_period")
    period = st.selectbox(
        "License Period *",
        options,
        index=options.index(current) if current in options else None,
        placeholder="Select license period",
        format_func=format_period_option,
        key=_key("license_period"),
    )
    _field_error(state, "license_period")

    if period:
        fee = format_currency(calculate_fee(period))
        with st.container(border=True):
            st.markdown("#### Payment Summary")
            c1, c2 = st.columns([3, 1])
            c1.write("License Period:")
            c2.write(f"**{license_label(period)}**")
            c1.write("License Fee:")
            c2.write(f"**{fee}**")
            st.divider()
            c1, c2 = st.columns([3, 1])
            c1.markdown("**Total Amount:**")
            c2.markdown(f"**{fee}**")
            st.caption(
                "Payment will be processed upon submission. You will receive a tracking number "
                "to monitor your application status."
            )

    with st.expander("All license fees"):
        render_fee_schedule()
    return {"license_period": period}


_STEP_RENDERERS: List[Callable[[WizardState], Dict[str, Any]]] = [
    _owner_step,
    _dog_step,
    _vaccination_step,
    _license_step,
]


# =============================================================================
# Page
# =============================================================================


def _first_step_with_error(state: WizardState) -> int:
    for i, step in enumerate(STEPS):
        if any(f in state.errors for f in step.fields):
            return i
    return state.current_step


def _submit(state: WizardState, settings: Settings) -> None:
    service = build_application_service(settings)
    result = service.submit(state.draft)

    if not result.success:
        if result.field_errors:
            state.errors = dict(result.field_errors)
            state.current_step = _first_step_with_error(state)
        queue_toast(result.error or GENERIC_STEP_ERROR, icon="❌")
        st.rerun()

    st.toast(result.message, icon="✅")
    st.success(result.message)
    state.reset()
    set_track_prefill(result.tracking_number)
    logger.info(f"redirecting to tracking page for {result.tracking_number}")
    time.sleep(settings.redirect_delay)
    st.switch_page(TRACK_APPLICATION_PAGE)


def render(settings: Settings) -> None:
    show_queued_toasts()
    state = get_wizard_state()

    st.title("Dog License Application")
    st.caption("Pennsylvania State Compliance")
    render_progress(state)

    step = state.step
    with st.container(border=True):
        st.subheader(step.title)
        st.caption(step.description)
        values = _STEP_RENDERERS[state.current_step](state)
    state.update(values)

    submitted = False
    prev_col, _, next_col = st.columns([1, 2, 1])
    with prev_col:
        if st.button("← Previous", key="wizard_prev", disabled=state.is_first, use_container_width=True):
            state.prev_step()
            st.rerun()
    with next_col:
        if state.is_last:
            submitted = st.button("📄 Submit Application", key="wizard_submit", type="primary",
                                  use_container_width=True)
        elif st.button("Next →", key="wizard_next", type="primary", use_container_width=True):
            if not state.next_step():
                queue_toast(GENERIC_STEP_ERROR, icon="⚠️")
            st.rerun()

    if submitted:
        _submit(state, settings)
