"""
Domain models: pure data structures, no IO.

``ApplicationForm`` is what the wizard collects; ``ApplicationRecord`` is
what gets persisted (form + tracking number, status, timestamp, fee).
Persisted keys are camelCase; Python attributes are snake_case.
"""
from __future__ import annotations

import re
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from ..infra.exceptions import ValidationError as FieldValidationError


# =============================================================================
# Enums
# =============================================================================


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class DogGender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class SpayNeuter(str, Enum):
    YES = "yes"
    NO = "no"


class LicensePeriod(str, Enum):
    ONE_YEAR = "1-year"
    TWO_YEAR = "2-year"
    THREE_YEAR = "3-year"


# =============================================================================
# Fee table
# =============================================================================


LICENSE_FEES: Dict[LicensePeriod, int] = {
    LicensePeriod.ONE_YEAR: 25,
    LicensePeriod.TWO_YEAR: 45,
    LicensePeriod.THREE_YEAR: 60,
}

LICENSE_LABELS: Dict[LicensePeriod, str] = {
    LicensePeriod.ONE_YEAR: "1 Year",
    LicensePeriod.TWO_YEAR: "2 Years",
    LicensePeriod.THREE_YEAR: "3 Years",
}


def _as_period(period: Any) -> Optional[LicensePeriod]:
    if isinstance(period, LicensePeriod):
        return period
    try:
        return LicensePeriod(period)
    except ValueError:
        return None


def calculate_fee(period: Any) -> int:
    """License fee in dollars for a period; 0 when unset or unknown."""
    p = _as_period(period)
    return LICENSE_FEES[p] if p is not None else 0


def license_label(period: Any) -> str:
    p = _as_period(period)
    return LICENSE_LABELS[p] if p is not None else ""


# =============================================================================
# Form schema
# =============================================================================


ZIP_PATTERN = re.compile(r"^\d{5}$")
PHONE_PATTERN = re.compile(r"^[\d\s()+-]+$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Message shown when a field fails a constraint that has no custom validator
# (missing value, too short, wrong enum member, non-positive number).
FIELD_MESSAGES: Dict[str, str] = {
    "owner_first_name": "First name must be at least 2 characters",
    "owner_last_name": "Last name must be at least 2 characters",
    "owner_address": "Address is required",
    "owner_city": "City is required",
    "owner_zip_code": "ZIP code must be 5 digits",
    "owner_phone": "Phone number is required",
    "owner_email": "Invalid email format",
    "dog_name": "Dog name is required",
    "dog_breed": "Breed is required",
    "dog_color": "Color is required",
    "dog_gender": "Please select a gender",
    "dog_age": "Age must be a positive number",
    "dog_weight": "Weight must be a positive number",
    "is_spayed_neutered": "Please select yes or no",
    "rabies_vaccination_date": "Vaccination date is required",
    "rabies_vaccination_expiry": "Expiry date is required",
    "veterinarian_name": "Veterinarian name is required",
    "veterinarian_address": "Veterinarian address is required",
    "license_period": "Please select a license period",
}


class ApplicationForm(BaseModel):
    """Everything the applicant enters across the four wizard steps."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    # Owner
    owner_first_name: str = Field(min_length=2)
    owner_last_name: str = Field(min_length=2)
    owner_address: str = Field(min_length=1)
    owner_city: str = Field(min_length=1)
    owner_zip_code: str
    owner_phone: str
    owner_email: str

    # Dog
    dog_name: str = Field(min_length=1)
    dog_breed: str = Field(min_length=1)
    dog_color: str = Field(min_length=1)
    dog_gender: DogGender
    dog_age: float = Field(gt=0, allow_inf_nan=False)
    dog_weight: float = Field(gt=0, allow_inf_nan=False)
    is_spayed_neutered: SpayNeuter

    # Vaccination & vet
    rabies_vaccination_date: str = Field(min_length=1)
    rabies_vaccination_expiry: str = Field(min_length=1)
    veterinarian_name: str = Field(min_length=1)
    veterinarian_address: str = Field(min_length=1)

    # License
    license_period: LicensePeriod

    @field_validator("owner_zip_code")
    @classmethod
    def validate_zip(cls, v: str) -> str:
        if not ZIP_PATTERN.match(v):
            raise ValueError("ZIP code must be 5 digits")
        return v

    @field_validator("owner_phone")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        if not PHONE_PATTERN.match(v):
            raise ValueError("Invalid phone format")
        if len(v) < 10:
            raise ValueError("Phone number is required")
        return v

    @field_validator("owner_email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Invalid email format")
        return v

    @field_validator("rabies_vaccination_date", "rabies_vaccination_expiry", mode="before")
    @classmethod
    def coerce_date(cls, v: Any) -> Any:
        # date pickers hand back date objects; the record keeps YYYY-MM-DD
        if isinstance(v, datetime):
            return v.date().isoformat()
        if isinstance(v, date):
            return v.isoformat()
        return v

    @field_validator("rabies_vaccination_date", "rabies_vaccination_expiry")
    @classmethod
    def validate_date(cls, v: str) -> str:
        try:
            date.fromisoformat(v)
        except ValueError:
            raise ValueError("Enter a valid date (YYYY-MM-DD)")
        return v

    @property
    def owner_full_name(self) -> str:
        return f"{self.owner_first_name} {self.owner_last_name}"

    @classmethod
    def from_draft(cls, data: Dict[str, Any]) -> "ApplicationForm":
        """Validate a complete draft; raises ``FieldValidationError`` with per-field messages."""
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            errors = errors_from_exception(exc, cls)
            raise FieldValidationError(f"{len(errors)} invalid field(s)", errors=errors) from exc

    @classmethod
    def field_errors(cls, data: Dict[str, Any], only: Optional[Iterable[str]] = None) -> Dict[str, str]:
        """Validate ``data`` and return ``{field_name: message}``.

        ``only`` restricts the report to a subset of fields, which is how a
        single wizard step is checked against a partially filled draft.
        """
        try:
            cls.model_validate(data)
        except ValidationError as exc:
            errors = errors_from_exception(exc, cls)
        else:
            errors = {}
        if only is not None:
            wanted = set(only)
            errors = {k: v for k, v in errors.items() if k in wanted}
        return errors


def errors_from_exception(exc: ValidationError, model: type = ApplicationForm) -> Dict[str, str]:
    """Translate a pydantic error into one user-facing message per field."""
    by_alias = {f.alias or name: name for name, f in model.model_fields.items()}
    errors: Dict[str, str] = {}
    for err in exc.errors():
        if not err.get("loc"):
            continue
        loc = str(err["loc"][0])
        name = by_alias.get(loc, loc)
        if name in errors:
            continue
        if err.get("type") == "value_error":
            ctx_error = (err.get("ctx") or {}).get("error")
            errors[name] = str(ctx_error) if ctx_error else err.get("msg", "")
        else:
            errors[name] = FIELD_MESSAGES.get(name, err.get("msg", "Invalid value"))
    return errors


# =============================================================================
# Persisted record
# =============================================================================


WHOLE_NUMBER_KEYS = ("dogAge", "dogWeight")


class ApplicationRecord(ApplicationForm):
    """A submitted application. Created once, never mutated."""

    model_config = ConfigDict(frozen=True)

    tracking_number: str = Field(min_length=1)
    status: ApplicationStatus = ApplicationStatus.PENDING
    submitted_at: str
    license_fee: int = Field(ge=0)

    @classmethod
    def create(
        cls,
        form: ApplicationForm,
        tracking_number: str,
        submitted_at: str,
    ) -> "ApplicationRecord":
        """Build a new pending record; the fee is taken from the fee table."""
        return cls(
            **form.model_dump(),
            tracking_number=tracking_number,
            status=ApplicationStatus.PENDING,
            submitted_at=submitted_at,
            license_fee=calculate_fee(form.license_period),
        )

    def to_storage(self) -> Dict[str, Any]:
        """camelCase dict in the persisted key order."""
        data = self.model_dump(mode="json", by_alias=True)
        # whole numbers are written as integers, the way JSON.stringify writes them
        for key in WHOLE_NUMBER_KEYS:
            value = data.get(key)
            if isinstance(value, float) and value.is_integer():
                data[key] = int(value)
        ordered: Dict[str, Any] = {"trackingNumber": data.pop("trackingNumber")}
        tail = {k: data.pop(k) for k in ("status", "submittedAt", "licenseFee")}
        ordered.update(data)
        ordered.update(tail)
        return ordered

    @classmethod
    def from_storage(cls, data: Dict[str, Any]) -> "ApplicationRecord":
        return cls.model_validate(data)
