"""
FastAPI routes for Twilio Verify: send and check one-time passcodes.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from typing import Optional

from onboarding_gateway.api.dependencies import get_verification_service
from onboarding_gateway.api.schemas import ErrorResponse
from onboarding_gateway.api.verify_schemas import (
    PhoneVerificationRequest,
    PhoneCheckRequest,
    EmailVerificationRequest,
    EmailCheckRequest,
    SendResponse,
    CheckResponse
)
from onboarding_gateway.core.exceptions import ProviderError
from onboarding_gateway.services.verification_service import VerificationService


router = APIRouter(prefix="/api/verify", tags=["verify"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing fields or invalid request"},
    403: {"model": ErrorResponse, "description": "Twilio authentication failed"},
    404: {"model": ErrorResponse, "description": "Verify service not found"},
    429: {"model": ErrorResponse, "description": "Too many attempts"},
}


def error_response(message: str, status_code: int = status.HTTP_400_BAD_REQUEST) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post(
    "/phone",
    response_model=SendResponse,
    summary="Send a verification code to a phone",
    description="Deliver a code by SMS (default) or voice call.",
    responses=ERROR_RESPONSES
)
def send_phone_code(
    request: Optional[PhoneVerificationRequest] = None,
    service: VerificationService = Depends(get_verification_service)
):
    if request is None or not request.phone:
        return error_response("Phone required")

    try:
        service.start_phone_verification(request.phone, request.channel)
    except ProviderError as e:
        return error_response(e.message, e.status_code)

    return SendResponse(success=True)


@router.post(
    "/phone/validate",
    response_model=CheckResponse,
    summary="Check a phone verification code",
    responses=ERROR_RESPONSES
)
def check_phone_code(
    request: Optional[PhoneCheckRequest] = None,
    service: VerificationService = Depends(get_verification_service)
):
    if request is None or not request.phone or not request.code:
        return error_response("Phone and code required")

    try:
        check = service.check_phone_verification(request.phone, request.code)
    except ProviderError as e:
        return error_response(e.message, e.status_code)

    return CheckResponse(valid=check.approved)


@router.post(
    "/email",
    response_model=SendResponse,
    summary="Send a verification code by email",
    responses=ERROR_RESPONSES
)
def send_email_code(
    request: Optional[EmailVerificationRequest] = None,
    service: VerificationService = Depends(get_verification_service)
):
    if request is None or not request.email:
        return error_response("Email required")

    try:
        service.start_email_verification(request.email)
    except ProviderError as e:
        return error_response(e.message, e.status_code)

    return SendResponse(success=True)


@router.post(
    "/email/validate",
    response_model=CheckResponse,
    summary="Check an email verification code",
    responses=ERROR_RESPONSES
)
def check_email_code(
    request: Optional[EmailCheckRequest] = None,
    service: VerificationService = Depends(get_verification_service)
):
    if request is None or not request.email or not request.code:
        return error_response("Email and code required")

    try:
        check = service.check_email_verification(request.email, request.code)
    except ProviderError as e:
        return error_response(e.message, e.status_code)

    return CheckResponse(valid=check.approved)
