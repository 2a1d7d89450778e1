"""
Translation of Twilio error codes into HTTP responses.

See: https://www.twilio.com/docs/api/errors
"""

from typing import Dict, Optional, Tuple

from twilio.base.exceptions import TwilioRestException

from onboarding_gateway.core.exceptions import ProviderError


DEFAULT_ERROR_MESSAGE = "An error occurred"
DEFAULT_ERROR_CODE = "UNKNOWN_ERROR"

# Twilio error code -> (HTTP status, message)
PROVIDER_ERRORS: Dict[int, Tuple[int, str]] = {
    20003: (403, "Authentication failed"),
    20404: (404, "Verification service not found"),
    20429: (429, "Too many requests"),
    60200: (400, "Invalid phone number format"),
    60202: (429, "Max verification attempts reached"),
    60203: (429, "Max send attempts reached"),
}


def map_provider_error(
    error: TwilioRestException,
    default_status: Optional[int] = None,
    keep_provider_message: bool = False
) -> ProviderError:
    """
    Map a Twilio REST error to a ProviderError with an HTTP status.

    Args:
        error: Exception raised by the Twilio client
        default_status: Status for codes missing from the table. When None,
            the status Twilio answered with is used, falling back to 500.
        keep_provider_message: Report Twilio's own message for codes in the
            table; only the HTTP status is taken from the table.

    Returns:
        ProviderError ready to be rendered by a route
    """
    code = getattr(error, "code", None)

    if code in PROVIDER_ERRORS:
        status_code, message = PROVIDER_ERRORS[code]
        if keep_provider_message:
            message = getattr(error, "msg", None) or message
        return ProviderError(status_code, message, code)

    status_code = default_status or getattr(error, "status", None) or 500
    message = getattr(error, "msg", None) or str(error) or DEFAULT_ERROR_MESSAGE

    return ProviderError(status_code, message, code or DEFAULT_ERROR_CODE)
