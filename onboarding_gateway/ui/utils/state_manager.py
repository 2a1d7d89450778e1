"""
State management for UI - which onboarding step is on screen.
"""

from typing import Dict, List

from onboarding_gateway.core.models import OnboardingSession, OnboardingStep


class StepViewManager:
    """Map onboarding sessions to the visibility of the step panels."""

    # Panel order in the page
    STEPS: List[OnboardingStep] = list(OnboardingStep)

    @staticmethod
    def new_session() -> OnboardingSession:
        """
        Create a session on the first step.

        Returns:
            Fresh onboarding session
        """
        return OnboardingSession()

    @staticmethod
    def visibility(step: OnboardingStep) -> Dict[OnboardingStep, bool]:
        """
        Show a specific step and hide all others.

        Args:
            step: Step to display

        Returns:
            Visibility flag for every step panel
        """
        return {s: s == step for s in StepViewManager.STEPS}

    @staticmethod
    def visibility_list(step: OnboardingStep) -> List[bool]:
        """Visibility flags in panel order, for positional Gradio outputs."""
        flags = StepViewManager.visibility(step)
        return [flags[s] for s in StepViewManager.STEPS]
