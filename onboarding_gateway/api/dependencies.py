"""
FastAPI dependencies providing the Twilio-backed services.
"""

from functools import lru_cache

from onboarding_gateway.config import settings
from onboarding_gateway.services.lookup_service import PhoneLookupService
from onboarding_gateway.services.onboarding_service import OnboardingService
from onboarding_gateway.services.twilio_client import get_twilio_client
from onboarding_gateway.services.verification_service import VerificationService


@lru_cache(maxsize=1)
def get_lookup_service() -> PhoneLookupService:
    return PhoneLookupService(get_twilio_client())


@lru_cache(maxsize=1)
def get_verification_service() -> VerificationService:
    return VerificationService(get_twilio_client(), settings.twilio_verify_service_sid)


def get_onboarding_service() -> OnboardingService:
    return OnboardingService(get_lookup_service(), get_verification_service())
