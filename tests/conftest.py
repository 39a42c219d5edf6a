"""Shared fixtures: a complete, valid application draft."""

import pytest


def make_draft(**overrides):
    """Draft as the wizard collects it (snake_case keys, dates as YYYY-MM-DD)."""
    draft = {
        "owner_first_name": "Jane",
        "owner_last_name": "Doe",
        "owner_address": "12 Market St",
        "owner_city": "Harrisburg",
        "owner_zip_code": "17101",
        "owner_phone": "(717) 555-0100",
        "owner_email": "jane.doe@example.com",
        "dog_name": "Rex",
        "dog_breed": "Beagle",
        "dog_color": "Brown",
        "dog_gender": "male",
        "dog_age": 3,
        "dog_weight": 25.5,
        "is_spayed_neutered": "yes",
        "rabies_vaccination_date": "2023-06-01",
        "rabies_vaccination_expiry": "2025-06-01",
        "veterinarian_name": "Dr. Smith",
        "veterinarian_address": "5 Vet Way, Harrisburg, PA",
        "license_period": "1-year",
    }
    draft.update(overrides)
    return draft


@pytest.fixture
def draft():
    return make_draft()


@pytest.fixture
def draft_factory():
    return make_draft
