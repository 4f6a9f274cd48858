"""
Shared test fixtures for the form validation test suite.
"""
from datetime import date, datetime, timedelta

import pytest

from eventforms.config import get_settings


# ==========================================================================
# Clock
# ==========================================================================

@pytest.fixture
def now():
    """A fixed reference instant for schedule rules."""
    return datetime(2026, 3, 10, 12, 0, 0)


@pytest.fixture
def tomorrow():
    return date.today() + timedelta(days=1)


@pytest.fixture
def yesterday():
    return date.today() - timedelta(days=1)


# ==========================================================================
# Settings
# ==========================================================================

@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ==========================================================================
# Forms (valid)
# ==========================================================================

@pytest.fixture
def event_form(tomorrow):
    return {
        "eventName": "Hackathon 2026",
        "eventDate": tomorrow.isoformat(),
        "startTime": "10:00",
        "endTime": "18:30",
        "venue": "Himalaya Hall",
        "description": "A 24 hour build sprint for student teams.",
        "maxCapacity": "120",
    }


@pytest.fixture
def registration_form():
    return {
        "email": "asha.rao@gmail.com",
        "password": "secret123",
        "confirmPassword": "secret123",
        "firstName": "Asha",
        "lastName": "Rao",
        "phoneNumber": "98765 43210",
        "collegeName": "BITS Pilani",
    }


@pytest.fixture
def schedule_form(now):
    return {
        "eventName": "Felicity Merch Drop",
        "eventType": "merchandise",
        "eventStartDate": (now + timedelta(days=10)).isoformat(),
        "eventEndDate": (now + timedelta(days=11)).isoformat(),
        "registrationDeadline": (now + timedelta(days=5)).isoformat(),
        "eligibility": "all",
        "registrationLimit": 200,
        "registrationFee": 0,
    }
