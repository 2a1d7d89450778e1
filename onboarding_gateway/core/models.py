"""
Data models for the Onboarding Gateway.
"""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from enum import Enum


class VerificationChannel(str, Enum):
    """Delivery channels supported by Twilio Verify."""
    SMS = "sms"
    CALL = "call"
    EMAIL = "email"


# Channels a phone number may be verified over
PHONE_CHANNELS = (VerificationChannel.SMS, VerificationChannel.CALL)


class LookupField(str, Enum):
    """
    Lookup v2 data packages.

    See: https://www.twilio.com/docs/lookup/v2-api#data-packages
    """
    LINE_TYPE_INTELLIGENCE = "line_type_intelligence"  # Worldwide
    SMS_PUMPING_RISK = "sms_pumping_risk"  # Worldwide
    CALLER_NAME = "caller_name"  # US carrier numbers only
    SIM_SWAP = "sim_swap"
    CALL_FORWARDING = "call_forwarding"
    LINE_STATUS = "line_status"
    IDENTITY_MATCH = "identity_match"
    REASSIGNED_NUMBER = "reassigned_number"  # US only


# Packages requested by the "multiple" lookup; the rest are private beta or region locked
MULTIPLE_LOOKUP_FIELDS: List[LookupField] = [
    LookupField.LINE_TYPE_INTELLIGENCE,
    LookupField.SMS_PUMPING_RISK,
    LookupField.CALLER_NAME,
]


class PhoneLookup(BaseModel):
    """A Lookup v2 phone number resource."""

    valid: Optional[bool] = None
    phone_number: Optional[str] = None
    national_format: Optional[str] = None
    country_code: Optional[str] = None
    calling_country_code: Optional[str] = None
    validation_errors: Optional[List[str]] = None

    # Data packages, present only when requested
    caller_name: Optional[Dict[str, Any]] = None
    sim_swap: Optional[Dict[str, Any]] = None
    call_forwarding: Optional[Dict[str, Any]] = None
    line_status: Optional[Dict[str, Any]] = None
    line_type_intelligence: Optional[Dict[str, Any]] = None
    identity_match: Optional[Dict[str, Any]] = None
    reassigned_number: Optional[Dict[str, Any]] = None
    sms_pumping_risk: Optional[Dict[str, Any]] = None
    phone_number_quality_score: Optional[Dict[str, Any]] = None
    pre_fill: Optional[Dict[str, Any]] = None
    url: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @classmethod
    def from_resource(cls, resource: Any) -> "PhoneLookup":
        """Build from a twilio PhoneNumberInstance (or anything exposing the same attributes)."""
        return cls(**{
            name: getattr(resource, name, None)
            for name in cls.model_fields
        })

    @property
    def line_type(self) -> Optional[str]:
        if not self.line_type_intelligence:
            return None
        return self.line_type_intelligence.get("type")

    @property
    def is_mobile(self) -> bool:
        return self.line_type == "mobile"

    @property
    def is_landline(self) -> bool:
        return self.line_type == "landline"


class VerificationCheck(BaseModel):
    """Outcome of checking a one-time passcode."""

    to: str = Field(..., description="Phone number or email the code was sent to")
    status: Optional[str] = Field(None, description="Twilio verification status (pending, approved, canceled)")
    channel: Optional[str] = Field(None, description="Channel the code was delivered over")

    @property
    def approved(self) -> bool:
        return self.status == "approved"


# Onboarding Flow Models

class OnboardingStep(str, Enum):
    """Screens of the onboarding form, in the order the user walks them."""
    PHONE = "phone"
    PHONE_OTP = "phone_otp"
    PHONE_VERIFIED = "phone_verified"
    EMAIL = "email"
    EMAIL_OTP = "email_otp"
    DASHBOARD = "dashboard"


class OnboardingSession(BaseModel):
    """Per-browser onboarding progress."""

    step: OnboardingStep = OnboardingStep.PHONE
    phone: str = Field(default="", description="Phone number, saved once an SMS code is sent")
    email: str = Field(default="", description="Email address, saved once a code is sent")

    @property
    def is_complete(self) -> bool:
        return self.step == OnboardingStep.DASHBOARD
