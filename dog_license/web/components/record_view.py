"""Read-only rendering of a submitted application on the tracking page."""
from __future__ import annotations

from typing import List, Tuple

import streamlit as st

from dog_license.domain import ApplicationRecord, build_timeline, status_badge
from dog_license.web.formatting import (
    format_currency,
    format_date,
    format_datetime,
    format_number,
    format_period,
)

_TIMELINE_MARKERS = {"done": "🟢", "approved": "🟢", "rejected": "🔴", "waiting": "⚪"}


def _fields(pairs: List[Tuple[str, str]]) -> None:
    cols = st.columns(2)
    for i, (label, value) in enumerate(pairs):
        with cols[i % 2]:
            st.caption(label)
            st.markdown(f"**{value}**")


def render_status(record: ApplicationRecord) -> None:
    badge = status_badge(record.status)
    submitted = format_datetime(record.submitted_at)
    with st.container(border=True):
        left, right = st.columns([3, 1])
        with left:
            st.subheader("Application Status")
            st.code(record.tracking_number, language=None)
        with right:
            st.markdown(f":{badge.color}[**{badge.icon} {badge.label}**]")
        st.caption(f"📅 Submitted: {submitted}")

        st.markdown("##### Application Timeline")
        for entry in build_timeline(record, submitted_label=submitted):
            line = f"{_TIMELINE_MARKERS.get(entry.state, '⚪')} **{entry.title}**"
            if entry.detail:
                line += f"  \n{entry.detail}"
            st.markdown(line)


def render_record(record: ApplicationRecord) -> None:
    render_status(record)

    with st.container(border=True):
        st.subheader("👤 Owner Information")
        _fields([
            ("Name", record.owner_full_name),
            ("Email", record.owner_email),
            ("Phone", record.owner_phone),
            ("Address", f"{record.owner_address}, {record.owner_city}, PA {record.owner_zip_code}"),
        ])

    with st.container(border=True):
        st.subheader("🐕 Dog Information")
        _fields([
            ("Name", record.dog_name),
            ("Breed", record.dog_breed),
            ("Color", record.dog_color),
            ("Gender", record.dog_gender.value.capitalize()),
            ("Age", f"{format_number(record.dog_age)} years"),
            ("Weight", f"{format_number(record.dog_weight)} lbs"),
            ("Spayed/Neutered", record.is_spayed_neutered.value.capitalize()),
        ])

    with st.container(border=True):
        st.subheader("💉 Vaccination & Veterinarian")
        _fields([
            ("Rabies Vaccination Date", format_date(record.rabies_vaccination_date)),
            ("Vaccination Expiry", format_date(record.rabies_vaccination_expiry)),
            ("Veterinarian Name", record.veterinarian_name),
            ("Veterinarian Address", record.veterinarian_address),
        ])

    with st.container(border=True):
        st.subheader("💲 License & Payment")
        _fields([
            ("License Period", format_period(record.license_period)),
            ("License Fee", format_currency(record.license_fee)),
        ])


def render_not_found(tracking_number: str) -> None:
    with st.container(border=True):
        st.markdown("### 🔍 Application Not Found")
        st.write(f'We couldn\'t find an application with tracking number "{tracking_number}".')
        st.markdown(
            "**Please check:**\n"
            "- The tracking number is entered correctly\n"
            "- The application was submitted on this device and browser\n"
            "- Your browser's local storage hasn't been cleared"
        )


def render_help() -> None:
    with st.container(border=True):
        st.markdown("#### Need Help?")
        st.markdown(
            "- Tracking numbers are generated automatically when you submit your application\n"
            "- Your tracking number follows the format: `DOG-[timestamp]-[number]`\n"
            "- Applications are stored locally on your device and browser\n"
            "- Make sure you're using the same browser where you submitted your application\n"
            "- Contact support if you need assistance with your application"
        )
