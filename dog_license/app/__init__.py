"""
Application layer: use cases and wizard state.
"""
from .services import (
    ApplicationService,
    LookupOutcome,
    LookupResult,
    SubmissionResult,
    build_application_service,
)
from .wizard import GENERIC_STEP_ERROR, STEPS, WizardState, WizardStep

__all__ = [
    "ApplicationService",
    "LookupOutcome",
    "LookupResult",
    "SubmissionResult",
    "build_application_service",
    "GENERIC_STEP_ERROR",
    "STEPS",
    "WizardState",
    "WizardStep",
]
