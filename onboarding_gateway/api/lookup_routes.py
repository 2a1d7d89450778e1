"""
FastAPI routes for Twilio Lookup.

See: https://www.twilio.com/docs/lookup/v2-api
"""

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from typing import Optional

from onboarding_gateway.api.dependencies import get_lookup_service
from onboarding_gateway.api.lookup_schemas import (
    LookupRequest,
    BasicLookupResponse,
    LineTypeLookupResponse,
    SmsPumpingLookupResponse,
    LegacyLookupResponse,
    LookupErrorResponse
)
from onboarding_gateway.core.exceptions import ProviderError
from onboarding_gateway.core.models import PhoneLookup
from onboarding_gateway.services.lookup_service import PhoneLookupService


router = APIRouter(prefix="/api/lookup", tags=["lookup"])

ERROR_RESPONSES = {
    400: {"model": LookupErrorResponse, "description": "Invalid phone number or request"},
    403: {"model": LookupErrorResponse, "description": "Twilio authentication failed"},
    404: {"model": LookupErrorResponse, "description": "Resource not found"},
    429: {"model": LookupErrorResponse, "description": "Too many requests"},
    500: {"model": LookupErrorResponse, "description": "Any other Twilio error, with Twilio's status when it sent one"},
}


def lookup_error_response(error: ProviderError) -> JSONResponse:
    """Render a ProviderError as the lookup error body."""
    body = LookupErrorResponse(
        status=error.status_code,
        message=error.message,
        code=error.code
    )
    return JSONResponse(status_code=error.status_code, content=body.model_dump())


@router.post(
    "",
    response_model=LegacyLookupResponse,
    response_model_exclude_none=True,
    summary="Look up a phone number from a JSON body",
    responses={400: {"model": LegacyLookupResponse, "description": "Missing phone or lookup failed"}}
)
def lookup_phone_from_body(
    request: Optional[LookupRequest] = None,
    service: PhoneLookupService = Depends(get_lookup_service)
):
    """Basic lookup taking `{"phone": ...}` in the request body."""
    if request is None or not request.phone:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"valid": False, "error": "Phone required"}
        )

    try:
        lookup = service.lookup(request.phone)
    except ProviderError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"valid": False, "error": e.message}
        )

    return LegacyLookupResponse.from_lookup(lookup)


@router.get(
    "/{phone}",
    response_model=BasicLookupResponse,
    summary="Basic phone number lookup",
    description="Validate and format a phone number. National numbers need the `countryCode` query parameter.",
    responses=ERROR_RESPONSES
)
def lookup_phone(
    phone: str,
    country_code: Optional[str] = Query(None, alias="countryCode", description="ISO country code for national numbers"),
    service: PhoneLookupService = Depends(get_lookup_service)
):
    try:
        lookup = service.lookup(phone, country_code=country_code)
    except ProviderError as e:
        return lookup_error_response(e)

    return BasicLookupResponse.from_lookup(lookup)


@router.get(
    "/{phone}/line-type",
    response_model=LineTypeLookupResponse,
    summary="Lookup with line type intelligence",
    description="Report whether the number is a mobile or a landline.",
    responses=ERROR_RESPONSES
)
def lookup_line_type(
    phone: str,
    service: PhoneLookupService = Depends(get_lookup_service)
):
    try:
        lookup = service.lookup_line_type(phone)
    except ProviderError as e:
        return lookup_error_response(e)

    return LineTypeLookupResponse.from_lookup(
        lookup,
        is_mobile=lookup.is_mobile,
        is_landline=lookup.is_landline
    )


@router.get(
    "/{phone}/sms-pumping",
    response_model=SmsPumpingLookupResponse,
    summary="Lookup with SMS pumping risk",
    description="Score the risk that verifications sent to this number are SMS pumping fraud.",
    responses=ERROR_RESPONSES
)
def lookup_sms_pumping(
    phone: str,
    service: PhoneLookupService = Depends(get_lookup_service)
):
    try:
        lookup = service.lookup_sms_pumping(phone)
    except ProviderError as e:
        return lookup_error_response(e)

    return SmsPumpingLookupResponse.from_lookup(lookup, sms_pumping_risk=lookup.sms_pumping_risk)


@router.get(
    "/{phone}/multiple",
    response_model=PhoneLookup,
    summary="Lookup with multiple data packages",
    description="Line type intelligence, SMS pumping risk and caller name (US only) in one call. Returns the full Lookup resource.",
    responses=ERROR_RESPONSES
)
def lookup_multiple(
    phone: str,
    service: PhoneLookupService = Depends(get_lookup_service)
):
    try:
        return service.lookup_multiple(phone)
    except ProviderError as e:
        return lookup_error_response(e)
