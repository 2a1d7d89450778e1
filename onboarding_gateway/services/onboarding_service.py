"""
Onboarding service - drives a session through phone and email verification.
"""

import logging
from typing import Callable, Optional, Tuple, TypeVar

from onboarding_gateway.core.exceptions import ProviderError
from onboarding_gateway.core.models import OnboardingSession, OnboardingStep
from onboarding_gateway.services.lookup_service import PhoneLookupService
from onboarding_gateway.services.state_machine import OnboardingStateMachine
from onboarding_gateway.services.verification_service import VerificationService

logger = logging.getLogger(__name__)

T = TypeVar("T")

# User-facing messages
INVALID_PHONE_MESSAGE = "Invalid phone number."
SEND_FAILED_MESSAGE = "Failed to send OTP."
INVALID_CODE_MESSAGE = "Invalid code."
NETWORK_ERROR_MESSAGE = "Network error."

StepResult = Tuple[OnboardingSession, Optional[str]]


class OnboardingService:
    """
    Runs the onboarding steps for a session.

    Each operation takes the current session and returns the (possibly advanced)
    session with an error message, which is None when the step succeeded.
    Sessions passed in are never mutated.
    """

    def __init__(
        self,
        lookup_service: PhoneLookupService,
        verification_service: VerificationService
    ):
        self.lookup_service = lookup_service
        self.verification_service = verification_service

    def _call(self, fn: Callable[[], T], fallback_message: str) -> Tuple[Optional[T], Optional[str]]:
        """Run a provider call, turning failures into a user-facing message."""
        try:
            return fn(), None
        except ProviderError as e:
            return None, e.message or fallback_message
        except Exception:
            logger.exception("Provider call failed")
            return None, NETWORK_ERROR_MESSAGE

    def submit_phone(self, session: OnboardingSession, phone: str) -> StepResult:
        """
        Step 1: validate the number with Lookup, then text it a code.

        Args:
            session: Current session (must be on the PHONE step)
            phone: Number as typed by the user

        Returns:
            Session on PHONE_OTP with the phone saved, or unchanged with an error
        """
        session = session.model_copy()
        machine = OnboardingStateMachine(session)
        machine.ensure_can_transition_to(OnboardingStep.PHONE_OTP)
        phone = (phone or "").strip()

        lookup, error = self._call(lambda: self.lookup_service.lookup(phone), INVALID_PHONE_MESSAGE)
        if error == NETWORK_ERROR_MESSAGE:
            return session, error
        if lookup is None or not lookup.valid:
            return session, INVALID_PHONE_MESSAGE

        _, error = self._call(
            lambda: self.verification_service.start_phone_verification(phone),
            SEND_FAILED_MESSAGE
        )
        if error:
            return session, error

        machine.transition_to(OnboardingStep.PHONE_OTP)
        session.phone = phone
        return session, None

    def submit_phone_code(self, session: OnboardingSession, code: str) -> StepResult:
        """Step 2: check the SMS code against the saved phone number."""
        session = session.model_copy()
        machine = OnboardingStateMachine(session)
        machine.ensure_can_transition_to(OnboardingStep.PHONE_VERIFIED)

        check, error = self._call(
            lambda: self.verification_service.check_phone_verification(
                session.phone, (code or "").strip()
            ),
            INVALID_CODE_MESSAGE
        )
        if error:
            return session, error
        if not check.approved:
            return session, INVALID_CODE_MESSAGE

        machine.transition_to(OnboardingStep.PHONE_VERIFIED)
        return session, None

    def begin_email(self, session: OnboardingSession) -> OnboardingSession:
        """Step 3: the user chose to verify an email address."""
        session = session.model_copy()
        OnboardingStateMachine(session).transition_to(OnboardingStep.EMAIL)
        return session

    def submit_email(self, session: OnboardingSession, email: str) -> StepResult:
        """Step 4: send a code to the email address."""
        session = session.model_copy()
        machine = OnboardingStateMachine(session)
        machine.ensure_can_transition_to(OnboardingStep.EMAIL_OTP)
        email = (email or "").strip()

        _, error = self._call(
            lambda: self.verification_service.start_email_verification(email),
            SEND_FAILED_MESSAGE
        )
        if error:
            return session, error

        machine.transition_to(OnboardingStep.EMAIL_OTP)
        session.email = email
        return session, None

    def submit_email_code(self, session: OnboardingSession, code: str) -> StepResult:
        """Step 5: check the email code; success completes onboarding."""
        session = session.model_copy()
        machine = OnboardingStateMachine(session)
        machine.ensure_can_transition_to(OnboardingStep.DASHBOARD)

        check, error = self._call(
            lambda: self.verification_service.check_email_verification(
                session.email, (code or "").strip()
            ),
            INVALID_CODE_MESSAGE
        )
        if error:
            return session, error
        if not check.approved:
            return session, INVALID_CODE_MESSAGE

        machine.transition_to(OnboardingStep.DASHBOARD)
        logger.info("Onboarding completed for %s / %s", session.phone, session.email)
        return session, None
