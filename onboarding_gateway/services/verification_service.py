"""
One-time passcode delivery and checking through Twilio Verify v2.
"""

import logging
from typing import Optional, Union

from twilio.base.exceptions import TwilioRestException
from twilio.rest import Client

from onboarding_gateway.core.error_mapping import map_provider_error
from onboarding_gateway.core.models import PHONE_CHANNELS, VerificationChannel, VerificationCheck

logger = logging.getLogger(__name__)


# Status used for error codes Twilio Verify reports that are not in the table
VERIFY_DEFAULT_ERROR_STATUS = 400


def resolve_phone_channel(channel: Optional[Union[str, VerificationChannel]]) -> VerificationChannel:
    """
    Pick the delivery channel for a phone verification.

    Args:
        channel: Requested channel ("sms" or "call")

    Returns:
        The requested channel, or SMS when it is missing or unsupported
    """
    try:
        resolved = VerificationChannel(channel)
    except ValueError:
        return VerificationChannel.SMS

    return resolved if resolved in PHONE_CHANNELS else VerificationChannel.SMS


class VerificationService:
    """Sends and checks verification codes for a single Verify service."""

    def __init__(self, client: Client, service_sid: str):
        """
        Initialize the verification service.

        Args:
            client: Authenticated Twilio client
            service_sid: Twilio Verify service SID (VA...)
        """
        self.client = client
        self.service_sid = service_sid

    @property
    def _service(self):
        return self.client.verify.v2.services(self.service_sid)

    def _start(self, to: str, channel: VerificationChannel) -> str:
        try:
            verification = self._service.verifications.create(to=to, channel=channel.value)
        except TwilioRestException as e:
            error = map_provider_error(e, default_status=VERIFY_DEFAULT_ERROR_STATUS)
            logger.warning(
                "Sending %s code to %s failed (code=%s): %s",
                channel.value, to, error.code, error.message
            )
            raise error

        logger.info("Verification %s sent to %s via %s", verification.sid, to, channel.value)
        return verification.status

    def _check(self, to: str, code: str) -> VerificationCheck:
        try:
            check = self._service.verification_checks.create(to=to, code=code)
        except TwilioRestException as e:
            error = map_provider_error(e, default_status=VERIFY_DEFAULT_ERROR_STATUS)
            logger.warning(
                "Checking code for %s failed (code=%s): %s",
                to, error.code, error.message
            )
            raise error

        return VerificationCheck(to=to, status=check.status, channel=check.channel)

    def start_phone_verification(
        self,
        phone: str,
        channel: Optional[Union[str, VerificationChannel]] = None
    ) -> str:
        """
        Send a verification code to a phone by SMS or voice call.

        Args:
            phone: Destination phone number
            channel: "sms" or "call"; anything else falls back to SMS

        Returns:
            Verification status reported by Twilio (normally "pending")

        Raises:
            ProviderError: If Twilio rejects the request
        """
        return self._start(phone, resolve_phone_channel(channel))

    def check_phone_verification(self, phone: str, code: str) -> VerificationCheck:
        """Check a code previously sent to a phone."""
        return self._check(phone, code)

    def start_email_verification(self, email: str) -> str:
        """Send a verification code by email."""
        return self._start(email, VerificationChannel.EMAIL)

    def check_email_verification(self, email: str, code: str) -> VerificationCheck:
        """Check a code previously sent to an email address."""
        return self._check(email, code)
