"""
Step transitions for the onboarding form.
"""

from typing import Dict, List

from onboarding_gateway.core.exceptions import StateTransitionError
from onboarding_gateway.core.models import OnboardingSession, OnboardingStep


# Step transition rules
ALLOWED_TRANSITIONS: Dict[OnboardingStep, List[OnboardingStep]] = {
    OnboardingStep.PHONE: [
        OnboardingStep.PHONE_OTP
    ],
    OnboardingStep.PHONE_OTP: [
        OnboardingStep.PHONE_VERIFIED
    ],
    OnboardingStep.PHONE_VERIFIED: [
        OnboardingStep.EMAIL
    ],
    OnboardingStep.EMAIL: [
        OnboardingStep.EMAIL_OTP
    ],
    OnboardingStep.EMAIL_OTP: [
        OnboardingStep.DASHBOARD
    ],
    OnboardingStep.DASHBOARD: [
        # Terminal step
    ]
}


class OnboardingStateMachine:
    """Manages step transitions for an onboarding session."""

    def __init__(self, session: OnboardingSession):
        """
        Initialize state machine for a session.

        Args:
            session: The onboarding session to manage
        """
        self.session = session

    def can_transition_to(self, to_step: OnboardingStep) -> bool:
        """
        Check if moving to the given step is allowed.

        Args:
            to_step: Target step

        Returns:
            True if transition is allowed, False otherwise
        """
        return to_step in ALLOWED_TRANSITIONS.get(self.session.step, [])

    def ensure_can_transition_to(self, to_step: OnboardingStep) -> None:
        """
        Raise unless moving to the given step is allowed.

        Raises:
            StateTransitionError: If transition is not allowed
        """
        if not self.can_transition_to(to_step):
            raise StateTransitionError(
                f"Cannot transition from {self.session.step.value} to {to_step.value}. "
                f"Allowed transitions: {[s.value for s in self.get_allowed_transitions()]}"
            )

    def transition_to(self, to_step: OnboardingStep) -> OnboardingSession:
        """
        Move the session to the next step.

        Args:
            to_step: Target step

        Returns:
            The updated session

        Raises:
            StateTransitionError: If transition is not allowed
        """
        self.ensure_can_transition_to(to_step)
        self.session.step = to_step
        return self.session

    def get_allowed_transitions(self) -> List[OnboardingStep]:
        """
        Get list of valid next steps from the current step.

        Returns:
            List of allowed target steps
        """
        return ALLOWED_TRANSITIONS.get(self.session.step, [])

    def is_terminal_state(self) -> bool:
        return not self.get_allowed_transitions()
