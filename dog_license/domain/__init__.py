"""
Domain layer: application record schema, fee table, business rules.
"""
from .models import (
    FIELD_MESSAGES,
    LICENSE_FEES,
    LICENSE_LABELS,
    ApplicationForm,
    ApplicationRecord,
    ApplicationStatus,
    DogGender,
    LicensePeriod,
    SpayNeuter,
    calculate_fee,
    errors_from_exception,
    license_label,
)
from .rules import (
    StatusBadge,
    TimelineEntry,
    build_timeline,
    ensure_vaccination_current,
    is_vaccination_current,
    status_badge,
)

__all__ = [
    "ApplicationForm",
    "ApplicationRecord",
    "ApplicationStatus",
    "DogGender",
    "SpayNeuter",
    "LicensePeriod",
    "LICENSE_FEES",
    "LICENSE_LABELS",
    "FIELD_MESSAGES",
    "calculate_fee",
    "license_label",
    "errors_from_exception",
    "is_vaccination_current",
    "ensure_vaccination_current",
    "StatusBadge",
    "status_badge",
    "TimelineEntry",
    "build_timeline",
]
