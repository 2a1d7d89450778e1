"""
Pydantic schemas for the phone lookup API.
"""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List, Dict, Any, Union

from onboarding_gateway.core.models import PhoneLookup


class LookupRequest(BaseModel):
    """Request body for the body-based lookup."""

    phone: Optional[str] = Field(None, description="Phone number to look up", examples=["+14155552671"])

    class Config:
        coerce_numbers_to_str = True


class BasicLookupResponse(BaseModel):
    """Validity and formatting of a phone number."""

    valid: Optional[bool] = Field(None, description="Whether Twilio considers the number valid")
    phone_number: Optional[str] = Field(None, description="Number in E.164 format")
    national_format: Optional[str] = Field(None, description="Number in national format")
    country_code: Optional[str] = Field(None, description="ISO 3166-1 alpha-2 country code")
    calling_country_code: Optional[str] = Field(None, description="International dialing prefix")
    validation_errors: Optional[List[str]] = Field(None, description="Reasons the number is invalid")

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "valid": True,
                "phoneNumber": "+14155552671",
                "nationalFormat": "(415) 555-2671",
                "countryCode": "US",
                "callingCountryCode": "1",
                "validationErrors": []
            }
        }

    @classmethod
    def from_lookup(cls, lookup: PhoneLookup, **extra: Any) -> "BasicLookupResponse":
        return cls(
            valid=lookup.valid,
            phone_number=lookup.phone_number,
            national_format=lookup.national_format,
            country_code=lookup.country_code,
            calling_country_code=lookup.calling_country_code,
            validation_errors=lookup.validation_errors,
            **extra
        )


class LineTypeLookupResponse(BasicLookupResponse):
    """Lookup result with line type flags."""

    is_mobile: bool = Field(False, description="Line type is mobile")
    is_landline: bool = Field(False, description="Line type is landline")


class SmsPumpingLookupResponse(BasicLookupResponse):
    """Lookup result with the SMS pumping risk package."""

    sms_pumping_risk: Optional[Dict[str, Any]] = Field(
        None,
        description="SMS pumping risk score and carrier risk category"
    )


class LegacyLookupResponse(BasicLookupResponse):
    """Body-based lookup result; carries an error message when the lookup failed."""

    error: Optional[str] = Field(None, description="Error message if the lookup failed")


class LookupErrorResponse(BaseModel):
    """Error body returned by the lookup endpoints."""

    status: int = Field(..., description="HTTP status")
    message: str = Field(..., description="Error message")
    code: Union[int, str] = Field(..., description="Twilio error code, or UNKNOWN_ERROR")

    class Config:
        json_schema_extra = {
            "example": {
                "status": 404,
                "message": "The requested resource was not found",
                "code": 20404
            }
        }
