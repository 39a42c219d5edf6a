"""
Application services (use cases).

- ApplicationService.submit: validate, enforce the vaccination rule, persist
- ApplicationService.lookup: find a submitted application by tracking number
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from ..adapters import JsonApplicationStore, LocalStorage
from ..config import Settings, load_settings
from ..domain import ApplicationForm, ApplicationRecord, ensure_vaccination_current
from ..infra.common import Clock, IdFactory, get_clock
from ..infra.exceptions import ErrorHandler, StoreError, VaccinationExpiredError, ValidationError
from ..infra.logging import get_logger
from ..infra.serialization import Serializer
from ..ports.store import ApplicationStore
from .wizard import GENERIC_STEP_ERROR

logger = get_logger(__name__)

SAVE_FAILED_MESSAGE = "Failed to save application. Please try again."


# =============================================================================
# Results
# =============================================================================


@dataclass
class ServiceResult:
    success: bool = True
    message: str = ""
    error: Optional[str] = None
    error_code: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass
class SubmissionResult(ServiceResult):
    record: Optional[ApplicationRecord] = None
    field_errors: Dict[str, str] = field(default_factory=dict)

    @property
    def tracking_number(self) -> Optional[str]:
        return self.record.tracking_number if self.record else None


class LookupOutcome(Enum):
    IDLE = "idle"  # nothing entered
    FOUND = "found"
    NOT_FOUND = "not_found"


@dataclass
class LookupResult:
    outcome: LookupOutcome
    tracking_number: str = ""
    record: Optional[ApplicationRecord] = None

    @property
    def found(self) -> bool:
        return self.outcome is LookupOutcome.FOUND


# =============================================================================
# ApplicationService
# =============================================================================


class ApplicationService:
    """Submit and look up dog license applications."""

    def __init__(
        self,
        store: ApplicationStore,
        clock: Optional[Clock] = None,
        id_factory: Optional[IdFactory] = None,
    ):
        self._store = store
        self._clock = clock
        self._ids = id_factory or IdFactory(clock)
        self._errors = ErrorHandler(logger)

    @property
    def clock(self) -> Clock:
        return self._clock or get_clock()

    def submit(self, draft: Dict[str, Any]) -> SubmissionResult:
        """
        Validate the whole draft and persist a new pending application.

        Never raises for expected failures: validation errors, an expired
        rabies vaccination and storage failures all come back as an
        unsuccessful result with a user-facing ``error`` message. Nothing is
        written unless the result is successful.
        """
        try:
            form = ApplicationForm.from_draft(draft)
        except ValidationError as e:
            logger.info(f"submission rejected: invalid fields {sorted(e.errors)}")
            return SubmissionResult(success=False, error=GENERIC_STEP_ERROR,
                                    error_code=e.error_code, field_errors=e.errors)

        try:
            ensure_vaccination_current(form.rabies_vaccination_expiry, self.clock.today())
        except VaccinationExpiredError as e:
            logger.info(f"submission rejected: rabies vaccination expired on {form.rabies_vaccination_expiry}")
            return SubmissionResult(success=False, error=e.message, error_code=e.error_code)

        tracking_number = self._ids.tracking_number()
        record = ApplicationRecord.create(form, tracking_number, self.clock.now_iso())

        try:
            count = self._store.append(record)
        except StoreError as e:
            self._errors.handle_and_log(e, {"tracking_number": tracking_number})
            return SubmissionResult(success=False, error=SAVE_FAILED_MESSAGE, error_code=e.error_code)

        logger.info(
            f"application {tracking_number} stored ({count} total, "
            f"{record.license_period.value}, ${record.license_fee})"
        )
        logger.debug(f"stored record: {Serializer.serialize_for_logging(record.to_storage())}")
        return SubmissionResult(
            success=True,
            message=f"Application submitted! Tracking number: {tracking_number}",
            record=record,
            data={"count": count},
        )

    def lookup(self, tracking_number: Optional[str]) -> LookupResult:
        """
        Find an application by exact tracking number (surrounding whitespace
        ignored). Unreadable storage is reported as not found.
        """
        needle = (tracking_number or "").strip()
        if not needle:
            return LookupResult(LookupOutcome.IDLE)
        try:
            record = self._store.find_by_tracking_number(needle)
        except StoreError as e:
            self._errors.handle_and_log(e, {"tracking_number": needle})
            record = None
        if record is None:
            logger.info(f"lookup {needle}: not found")
            return LookupResult(LookupOutcome.NOT_FOUND, needle)
        return LookupResult(LookupOutcome.FOUND, needle, record)


def build_application_service(settings: Optional[Settings] = None, clock: Optional[Clock] = None) -> ApplicationService:
    """Wire the service to the local storage file described by ``settings``."""
    settings = settings or load_settings()
    storage = LocalStorage(settings.storage_file, quota_bytes=settings.storage_quota_bytes)
    store = JsonApplicationStore(storage, key=settings.storage_key)
    return ApplicationService(store, clock=clock)
