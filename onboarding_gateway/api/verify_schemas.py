"""
Pydantic schemas for the verification API.

Request fields are optional so that missing values are answered with the
API's own 400 messages instead of a validation error. JSON numbers are
accepted and passed on as strings.
"""

from pydantic import BaseModel, Field
from typing import Optional


class VerifyRequest(BaseModel):
    """Base for verification request bodies."""

    class Config:
        coerce_numbers_to_str = True


class PhoneVerificationRequest(VerifyRequest):
    """Request body for sending a code to a phone."""

    phone: Optional[str] = Field(None, description="Destination phone number", examples=["+14155552671"])
    channel: Optional[str] = Field(
        None,
        description="\"sms\" or \"call\"; anything else is sent by SMS",
        examples=["sms"]
    )


class PhoneCheckRequest(VerifyRequest):
    """Request body for checking a phone code."""

    phone: Optional[str] = Field(None, description="Phone number the code was sent to")
    code: Optional[str] = Field(None, description="Code entered by the user", examples=["123456"])


class EmailVerificationRequest(VerifyRequest):
    """Request body for sending a code by email."""

    email: Optional[str] = Field(None, description="Destination email address", examples=["user@example.com"])


class EmailCheckRequest(VerifyRequest):
    """Request body for checking an email code."""

    email: Optional[str] = Field(None, description="Email address the code was sent to")
    code: Optional[str] = Field(None, description="Code entered by the user", examples=["123456"])


class SendResponse(BaseModel):
    """Response after a code was handed to Twilio."""

    success: bool = Field(..., description="True once Twilio accepted the verification")

    class Config:
        json_schema_extra = {"example": {"success": True}}


class CheckResponse(BaseModel):
    """Response after checking a code."""

    valid: bool = Field(..., description="True when Twilio approved the code")

    class Config:
        json_schema_extra = {"example": {"valid": True}}
