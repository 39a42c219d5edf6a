"""
Business rules: pure functions, no IO.

- rabies vaccination must be current at submission time
- status badge and review timeline shown on the tracking page
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from ..infra.common import parse_date
from ..infra.exceptions import VaccinationExpiredError
from .models import ApplicationRecord, ApplicationStatus


# =============================================================================
# Vaccination rule
# =============================================================================


def is_vaccination_current(expiry: str, today: date) -> bool:
    """An expiry date equal to today still counts as current."""
    expiry_date = parse_date(expiry)
    if expiry_date is None:
        return False
    return not expiry_date < today


def ensure_vaccination_current(expiry: str, today: date) -> None:
    """Raise ``VaccinationExpiredError`` when the expiry is strictly before ``today``."""
    if not is_vaccination_current(expiry, today):
        raise VaccinationExpiredError(expiry=expiry)


# =============================================================================
# Status presentation
# =============================================================================


@dataclass(frozen=True)
class StatusBadge:
    label: str
    color: str  # streamlit markdown color name
    icon: str


_BADGES = {
    ApplicationStatus.PENDING.value: StatusBadge("PENDING", "orange", "🕒"),
    ApplicationStatus.APPROVED.value: StatusBadge("APPROVED", "green", "✅"),
    ApplicationStatus.REJECTED.value: StatusBadge("REJECTED", "red", "❌"),
}


def status_badge(status) -> StatusBadge:
    """Badge for a status; unknown values get a grey badge with the raw label."""
    value = status.value if isinstance(status, ApplicationStatus) else str(status or "")
    return _BADGES.get(value, StatusBadge(value.upper() or "UNKNOWN", "gray", "🕒"))


@dataclass(frozen=True)
class TimelineEntry:
    title: str
    detail: str
    state: str  # done | approved | rejected | waiting


def build_timeline(record: ApplicationRecord, submitted_label: Optional[str] = None) -> List[TimelineEntry]:
    """Submitted step, then either the decision or "Under Review"."""
    entries = [
        TimelineEntry("Application Submitted", submitted_label or record.submitted_at, "done"),
    ]
    if record.status == ApplicationStatus.APPROVED:
        entries.append(TimelineEntry("Application Approved", "", "approved"))
    elif record.status == ApplicationStatus.REJECTED:
        entries.append(TimelineEntry("Application Rejected", "", "rejected"))
    else:
        entries.append(TimelineEntry("Under Review", "Your application is being processed", "waiting"))
    return entries
