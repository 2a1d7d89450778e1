"""Tests for the onboarding step sequence."""

import pytest
from twilio.base.exceptions import TwilioRestException

from onboarding_gateway.core.exceptions import StateTransitionError
from onboarding_gateway.core.models import OnboardingSession, OnboardingStep
from onboarding_gateway.services.onboarding_service import (
    INVALID_CODE_MESSAGE,
    INVALID_PHONE_MESSAGE,
    NETWORK_ERROR_MESSAGE,
    OnboardingService,
)
from onboarding_gateway.services.state_machine import ALLOWED_TRANSITIONS, OnboardingStateMachine


@pytest.fixture
def service(lookup_service, verification_service) -> OnboardingService:
    return OnboardingService(lookup_service, verification_service)


def session_at(step: OnboardingStep, **fields) -> OnboardingSession:
    return OnboardingSession(step=step, **fields)


class TestStateMachine:
    """Tests for step transitions."""

    def test_steps_form_a_single_line(self) -> None:
        steps = list(OnboardingStep)
        for current, following in zip(steps, steps[1:]):
            assert ALLOWED_TRANSITIONS[current] == [following]

    def test_dashboard_is_terminal(self) -> None:
        machine = OnboardingStateMachine(session_at(OnboardingStep.DASHBOARD))
        assert machine.is_terminal_state()

    def test_skipping_a_step_is_rejected(self) -> None:
        machine = OnboardingStateMachine(OnboardingSession())

        with pytest.raises(StateTransitionError):
            machine.transition_to(OnboardingStep.EMAIL)

    def test_transition_updates_session(self) -> None:
        session = OnboardingSession()
        OnboardingStateMachine(session).transition_to(OnboardingStep.PHONE_OTP)
        assert session.step == OnboardingStep.PHONE_OTP


class TestFullFlow:
    """Walk the whole onboarding sequence."""

    def test_happy_path(self, service, phone_lookup, verify_api) -> None:
        session = OnboardingSession()

        session, error = service.submit_phone(session, "  +14155552671 ")
        assert error is None
        assert session.step == OnboardingStep.PHONE_OTP
        assert session.phone == "+14155552671"
        phone_lookup.assert_called_once_with("+14155552671")

        session, error = service.submit_phone_code(session, "123456")
        assert error is None
        assert session.step == OnboardingStep.PHONE_VERIFIED

        session = service.begin_email(session)
        assert session.step == OnboardingStep.EMAIL

        session, error = service.submit_email(session, "user@example.com")
        assert error is None
        assert session.step == OnboardingStep.EMAIL_OTP
        assert session.email == "user@example.com"

        session, error = service.submit_email_code(session, "654321")
        assert error is None
        assert session.is_complete

        assert [c.kwargs["channel"] for c in verify_api.verifications.create.call_args_list] == ["sms", "email"]

    def test_input_session_is_not_mutated(self, service) -> None:
        original = OnboardingSession()
        service.submit_phone(original, "+14155552671")
        assert original.step == OnboardingStep.PHONE
        assert original.phone == ""


class TestPhoneStep:
    """Tests for phone submission errors."""

    def test_invalid_number_stops_before_sending(self, service, phone_lookup, phone_resource, verify_api) -> None:
        phone_lookup.return_value.fetch.return_value = phone_resource(valid=False)

        session, error = service.submit_phone(OnboardingSession(), "123")

        assert error == INVALID_PHONE_MESSAGE
        assert session.step == OnboardingStep.PHONE
        verify_api.verifications.create.assert_not_called()

    def test_lookup_failure_reads_as_invalid_number(self, service, phone_lookup) -> None:
        phone_lookup.return_value.fetch.side_effect = TwilioRestException(
            404, "https://lookups.twilio.com/v2/PhoneNumbers/x", msg="Not found", code=20404
        )

        _, error = service.submit_phone(OnboardingSession(), "x")

        assert error == INVALID_PHONE_MESSAGE

    def test_send_failure_shows_provider_message(self, service, verify_api) -> None:
        verify_api.verifications.create.side_effect = TwilioRestException(
            429, "https://verify.twilio.com/v2/Services/VA/Verifications", msg="Max send attempts", code=60203
        )

        session, error = service.submit_phone(OnboardingSession(), "+14155552671")

        assert error == "Max send attempts reached"
        assert session.step == OnboardingStep.PHONE
        assert session.phone == ""

    def test_transport_failure_is_network_error(self, service, phone_lookup) -> None:
        phone_lookup.return_value.fetch.side_effect = ConnectionError("connection reset")

        _, error = service.submit_phone(OnboardingSession(), "+14155552671")

        assert error == NETWORK_ERROR_MESSAGE

    def test_wrong_step_is_rejected_before_calling_twilio(self, service, phone_lookup) -> None:
        with pytest.raises(StateTransitionError):
            service.submit_phone(session_at(OnboardingStep.EMAIL), "+14155552671")

        phone_lookup.assert_not_called()


class TestCodeSteps:
    """Tests for code checks."""

    def test_rejected_phone_code(self, service, verify_api) -> None:
        verify_api.verification_checks.create.return_value.status = "pending"
        session = session_at(OnboardingStep.PHONE_OTP, phone="+14155552671")

        result, error = service.submit_phone_code(session, "000000")

        assert error == INVALID_CODE_MESSAGE
        assert result.step == OnboardingStep.PHONE_OTP

    def test_phone_code_is_checked_against_saved_phone(self, service, verify_api) -> None:
        session = session_at(OnboardingStep.PHONE_OTP, phone="+14155552671")

        service.submit_phone_code(session, " 123456 ")

        verify_api.verification_checks.create.assert_called_once_with(to="+14155552671", code="123456")

    def test_email_code_check_error(self, service, verify_api) -> None:
        verify_api.verification_checks.create.side_effect = TwilioRestException(
            429, "https://verify.twilio.com/v2/Services/VA/VerificationCheck", msg="Too many", code=60202
        )
        session = session_at(OnboardingStep.EMAIL_OTP, phone="+14155552671", email="user@example.com")

        result, error = service.submit_email_code(session, "123456")

        assert error == "Max verification attempts reached"
        assert not result.is_complete
