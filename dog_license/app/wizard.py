"""
Application wizard state machine.

Holds the draft across the four steps and decides whether the user may
move forward. No Streamlit imports here: the page binds this object to
``st.session_state``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..domain import ApplicationForm, calculate_fee

GENERIC_STEP_ERROR = "Please fill in all required fields correctly"


@dataclass(frozen=True)
class WizardStep:
    title: str
    description: str
    fields: Tuple[str, ...]


STEPS: Tuple[WizardStep, ...] = (
    WizardStep(
        "Owner Information",
        "Your contact details",
        ("owner_first_name", "owner_last_name", "owner_address", "owner_city",
         "owner_zip_code", "owner_phone", "owner_email"),
    ),
    WizardStep(
        "Dog Information",
        "Details about your dog",
        ("dog_name", "dog_breed", "dog_color", "dog_gender", "dog_age", "dog_weight",
         "is_spayed_neutered"),
    ),
    WizardStep(
        "Vaccination & Vet",
        "Health and veterinary info",
        ("rabies_vaccination_date", "rabies_vaccination_expiry", "veterinarian_name",
         "veterinarian_address"),
    ),
    WizardStep(
        "License & Payment",
        "License period and payment",
        ("license_period",),
    ),
)


@dataclass
class WizardState:
    current_step: int = 0
    draft: Dict[str, Any] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def step(self) -> WizardStep:
        return STEPS[self.current_step]

    @property
    def is_first(self) -> bool:
        return self.current_step == 0

    @property
    def is_last(self) -> bool:
        return self.current_step == len(STEPS) - 1

    @property
    def license_fee(self) -> int:
        return calculate_fee(self.draft.get("license_period"))

    def progress(self) -> List[str]:
        """Per step: ``done``, ``active`` or ``todo``."""
        out = []
        for i in range(len(STEPS)):
            if i < self.current_step:
                out.append("done")
            elif i == self.current_step:
                out.append("active")
            else:
                out.append("todo")
        return out

    def update(self, values: Dict[str, Any]) -> None:
        self.draft.update(values)

    def validate_step(self, step: Optional[int] = None) -> Dict[str, str]:
        """Check one step's fields; errors for that step replace the old ones."""
        idx = self.current_step if step is None else step
        fields = STEPS[idx].fields
        step_errors = ApplicationForm.field_errors(self.draft, only=fields)
        self.errors = {k: v for k, v in self.errors.items() if k not in fields}
        self.errors.update(step_errors)
        return step_errors

    def validate_all(self) -> Dict[str, str]:
        self.errors = ApplicationForm.field_errors(self.draft)
        return dict(self.errors)

    def next_step(self) -> bool:
        """Advance if the active step is valid. Returns False when blocked."""
        if self.validate_step():
            return False
        if not self.is_last:
            self.current_step += 1
        return True

    def prev_step(self) -> None:
        if self.current_step > 0:
            self.current_step -= 1

    def reset(self) -> None:
        self.current_step = 0
        self.draft = {}
        self.errors = {}
