from __future__ import annotations

import streamlit as st

from dog_license.web.components.fee_table import render_fee_schedule

NEW_APPLICATION_PAGE = "pages/1_New_Application.py"
TRACK_APPLICATION_PAGE = "pages/2_Track_Application.py"


def render() -> None:
    st.title("🐕 Pennsylvania Dog License Portal")
    st.markdown(
        "Quick and easy dog licensing for Pennsylvania residents. "
        "Apply online and track your application status in real-time."
    )

    left, right = st.columns(2)
    with left:
        with st.container(border=True):
            st.subheader("➕ New Application")
            st.caption("Submit a new dog license application for Pennsylvania state compliance")
            st.page_link(NEW_APPLICATION_PAGE, label="Start New Application", icon="➕")
    with right:
        with st.container(border=True):
            st.subheader("🔍 Track Application")
            st.caption("Check the status of your submitted dog license applications")
            st.page_link(TRACK_APPLICATION_PAGE, label="Track Your Application", icon="🔍")

    st.markdown("---")
    st.header("Why Choose Our Platform?")
    features = [
        ("✅", "Easy Process", "Simple step-by-step form with validation to ensure accuracy"),
        ("🛡️", "PA Compliant", "Meets all Pennsylvania state requirements for dog licensing"),
        ("🔍", "Track Status", "Monitor your application status with unique tracking number"),
    ]
    for col, (icon, title, text) in zip(st.columns(3), features):
        with col:
            st.markdown(f"#### {icon} {title}")
            st.write(text)

    st.markdown("---")
    st.subheader("License Fees")
    render_fee_schedule("Fees are shown for reference; no payment is collected online.")
