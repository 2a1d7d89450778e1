"""
Custom exceptions for the Onboarding Gateway.
"""

from typing import Optional, Union


class OnboardingGatewayError(Exception):
    """Base exception for all onboarding gateway errors."""
    pass


class ConfigurationError(OnboardingGatewayError):
    """Raised when required provider credentials are missing."""

    def __init__(self, missing: list):
        self.missing = list(missing)
        super().__init__(
            f"Missing required environment variables: {', '.join(self.missing)}"
        )


class ProviderError(OnboardingGatewayError):
    """Raised when a Twilio API call fails, already mapped to an HTTP status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        code: Optional[Union[int, str]] = None
    ):
        self.status_code = status_code
        self.message = message
        self.code = code
        super().__init__(message)


class StateTransitionError(OnboardingGatewayError):
    """Raised when an invalid onboarding step transition is attempted."""
    pass
