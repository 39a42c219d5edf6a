"""
Unit tests for the vaccination rule and the tracking page presentation rules.
"""

from datetime import date

import pytest

from dog_license.domain import (
    ApplicationForm,
    ApplicationRecord,
    ApplicationStatus,
    build_timeline,
    ensure_vaccination_current,
    is_vaccination_current,
    status_badge,
)
from dog_license.infra.exceptions import BusinessRuleError, VaccinationExpiredError


class TestVaccinationRule:
    """Rabies vaccination must not be expired at submission"""

    def test_future_expiry_is_current(self):
        assert is_vaccination_current("2025-06-01", date(2024, 1, 1))

    def test_expiry_today_is_current(self):
        assert is_vaccination_current("2024-01-01", date(2024, 1, 1))

    def test_expiry_yesterday_is_expired(self):
        assert not is_vaccination_current("2023-12-31", date(2024, 1, 1))

    def test_unparsable_expiry_is_not_current(self):
        assert not is_vaccination_current("soon", date(2024, 1, 1))
        assert not is_vaccination_current("", date(2024, 1, 1))

    def test_ensure_raises_with_user_message(self):
        with pytest.raises(VaccinationExpiredError) as exc_info:
            ensure_vaccination_current("2023-12-31", date(2024, 1, 1))
        err = exc_info.value
        assert isinstance(err, BusinessRuleError)
        assert err.message == "Rabies vaccination has expired. Please update vaccination before applying."
        assert err.details["expiry"] == "2023-12-31"

    def test_ensure_passes_when_current(self):
        ensure_vaccination_current("2024-01-01", date(2024, 1, 1))


class TestStatusBadge:

    @pytest.mark.parametrize("status,label,color", [
        (ApplicationStatus.PENDING, "PENDING", "orange"),
        ("approved", "APPROVED", "green"),
        ("rejected", "REJECTED", "red"),
    ])
    def test_known_statuses(self, status, label, color):
        badge = status_badge(status)
        assert badge.label == label
        assert badge.color == color

    def test_unknown_status_is_gray(self):
        badge = status_badge("archived")
        assert badge.label == "ARCHIVED"
        assert badge.color == "gray"


class TestTimeline:

    @pytest.fixture(autouse=True)
    def _record(self, draft):
        form = ApplicationForm.from_draft(draft)
        self.record = ApplicationRecord.create(form, "DOG-1-1", "2024-01-01T00:00:00.000Z")

    def test_pending_shows_under_review(self):
        entries = build_timeline(self.record, submitted_label="January 1, 2024 at 12:00 AM")
        assert [e.title for e in entries] == ["Application Submitted", "Under Review"]
        assert entries[0].detail == "January 1, 2024 at 12:00 AM"
        assert entries[1].detail == "Your application is being processed"

    def test_approved(self):
        approved = self.record.model_copy(update={"status": ApplicationStatus.APPROVED})
        entries = build_timeline(approved)
        assert entries[0].detail == "2024-01-01T00:00:00.000Z"
        assert entries[-1].title == "Application Approved"
        assert entries[-1].state == "approved"

    def test_rejected(self):
        rejected = self.record.model_copy(update={"status": ApplicationStatus.REJECTED})
        assert build_timeline(rejected)[-1].title == "Application Rejected"
