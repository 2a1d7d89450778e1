"""Shared fixtures: a mocked Twilio client and an app wired to it."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from onboarding_gateway.api.dependencies import get_lookup_service, get_verification_service
from onboarding_gateway.main import app
from onboarding_gateway.services.lookup_service import PhoneLookupService
from onboarding_gateway.services.verification_service import VerificationService

VERIFY_SERVICE_SID = "VA00000000000000000000000000000000"


def make_phone_resource(**overrides) -> SimpleNamespace:
    """A stand-in for twilio's PhoneNumberInstance."""
    fields = {
        "valid": True,
        "phone_number": "+14155552671",
        "national_format": "(415) 555-2671",
        "country_code": "US",
        "calling_country_code": "1",
        "validation_errors": [],
        "caller_name": None,
        "sim_swap": None,
        "call_forwarding": None,
        "line_status": None,
        "line_type_intelligence": None,
        "identity_match": None,
        "reassigned_number": None,
        "sms_pumping_risk": None,
        "phone_number_quality_score": None,
        "pre_fill": None,
        "url": "https://lookups.twilio.com/v2/PhoneNumbers/+14155552671",
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


@pytest.fixture
def twilio_client() -> MagicMock:
    """Mocked Twilio REST client with successful defaults."""
    client = MagicMock()
    client.lookups.v2.phone_numbers.return_value.fetch.return_value = make_phone_resource()

    verify = client.verify.v2.services.return_value
    verify.verifications.create.return_value = SimpleNamespace(
        sid="VE00000000000000000000000000000000", status="pending"
    )
    verify.verification_checks.create.return_value = SimpleNamespace(
        status="approved", channel="sms"
    )
    return client


@pytest.fixture
def phone_lookup(twilio_client) -> MagicMock:
    """The mock behind client.lookups.v2.phone_numbers(...)."""
    return twilio_client.lookups.v2.phone_numbers


@pytest.fixture
def verify_api(twilio_client) -> MagicMock:
    """The mock behind client.verify.v2.services(...)."""
    return twilio_client.verify.v2.services.return_value


@pytest.fixture
def lookup_service(twilio_client) -> PhoneLookupService:
    return PhoneLookupService(twilio_client)


@pytest.fixture
def verification_service(twilio_client) -> VerificationService:
    return VerificationService(twilio_client, VERIFY_SERVICE_SID)


@pytest.fixture
def client(lookup_service, verification_service):
    """HTTP client for the app with Twilio replaced by the mock."""
    app.dependency_overrides[get_lookup_service] = lambda: lookup_service
    app.dependency_overrides[get_verification_service] = lambda: verification_service
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def phone_resource():
    """Factory for PhoneNumberInstance stand-ins."""
    return make_phone_resource
